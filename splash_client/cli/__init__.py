"""
Command-line front-end for the Splash client.
"""
from .main import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
