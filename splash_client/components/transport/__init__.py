"""
Transport component of the Splash client.

Sends authenticated HTTP requests to a Splash instance.
"""
from .http_transport import SplashTransport

__all__ = [
    "SplashTransport",
]
