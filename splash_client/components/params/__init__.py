"""
Parameter builder component of the Splash client.

Converts typed rendering and script options into the flat string-valued
query parameters sent to Splash.
"""
from .param_builder import ParameterBuilder, RESERVED_SCRIPT_PARAMS, to_param_value

__all__ = [
    "ParameterBuilder",
    "RESERVED_SCRIPT_PARAMS",
    "to_param_value",
]
