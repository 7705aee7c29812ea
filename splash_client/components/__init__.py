"""
Components sub-package for the Splash client.

Each call to Splash passes through three components: the parameter builder
(options to query parameters), the transport (HTTP round-trip) and the
response decoder (body to result).
"""
from .params.param_builder import ParameterBuilder, RESERVED_SCRIPT_PARAMS, to_param_value
from .transport.http_transport import SplashTransport
from .decoder.response_decoder import ResponseDecoder

__all__ = [
    "ParameterBuilder",
    "RESERVED_SCRIPT_PARAMS",
    "to_param_value",
    "SplashTransport",
    "ResponseDecoder",
]
