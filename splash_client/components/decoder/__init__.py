"""
Response decoder component of the Splash client.
"""
from .response_decoder import ResponseDecoder

__all__ = [
    "ResponseDecoder",
]
