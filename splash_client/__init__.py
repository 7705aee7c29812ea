"""
Client library and command-line front-end for the Splash javascript rendering service.

    from splash_client import SplashClient

    client = SplashClient(host="localhost", port=8050)
    if client.is_active():
        har = client.render_har("https://www.python.org/", wait=0.5)
"""
from .core.client import SplashClient
from .core.exceptions import (
    SplashClientError,
    ConfigurationError,
    ParameterError,
    TransportError,
    DecodeError,
    RemoteError,
)
from .core.models import ConnectionConfig

__version__ = "1.0.0"

__all__ = [
    "SplashClient",
    "ConnectionConfig",
    "SplashClientError",
    "ConfigurationError",
    "ParameterError",
    "TransportError",
    "DecodeError",
    "RemoteError",
]
