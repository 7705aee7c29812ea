"""
Custom exception classes for the Splash client.
"""
from typing import Any, Optional


class SplashClientError(Exception):
    """
    Base class for all custom exceptions in the Splash client.

    Attributes:
        message (str): A human-readable description of the error.
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}: {self.message}"


# --- Configuration Related Exceptions ---
class ConfigurationError(SplashClientError):
    """
    Raised for errors related to client configuration, such as unreadable
    configuration files or invalid connection settings.
    """
    def __init__(self, message: str):
        super().__init__(message)


# --- Component Related Exceptions ---
class ComponentError(SplashClientError):
    """
    A general base class for errors originating from within a specific component
    (ParameterBuilder, Transport, ResponseDecoder).

    Attributes:
        component_name (str): Name of the component where the error originated.
    """
    def __init__(self, component_name: str, message: str):
        full_message = f"Error in component '{component_name}': {message}"
        super().__init__(full_message)
        self.component_name = component_name


class ParameterError(ComponentError):
    """Raised when rendering or script options cannot be turned into request parameters."""
    def __init__(self, message: str):
        super().__init__(component_name="ParameterBuilder", message=message)


class TransportError(ComponentError):
    """
    Raised when the HTTP round-trip to the Splash instance fails
    (connection refused, DNS failure, TLS failure, transport timeout).

    Attributes:
        original_exception (Optional[Exception]): The underlying `requests` exception, if any.
    """
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        self.original_exception = original_exception
        full_message = f"{message}"
        if original_exception:
            full_message += f" (Original exception: {str(original_exception)})"
        super().__init__(component_name="Transport", message=full_message)


class DecodeError(ComponentError):
    """
    Raised when a response body expected to be JSON cannot be parsed.

    Attributes:
        status_code (int): HTTP status of the response.
        body (str): The raw response body.
    """
    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(component_name="ResponseDecoder", message=message)
        self.status_code = status_code
        self.body = body


# --- Remote Service Exceptions ---
class RemoteError(SplashClientError):
    """
    Raised when the Splash instance answers with a non-success HTTP status.

    Splash usually sends a JSON body such as
    `{"error": 400, "type": "BadOption", "description": "...", "info": {...}}`.
    When the body is JSON it is kept in `payload`; `kind` and `description`
    are read from it if present. Nothing else is assumed about its shape.

    Attributes:
        status_code (int): HTTP status of the response.
        body (str): The raw response body.
        payload (Any): The decoded JSON body, or None if the body was not JSON.
    """
    def __init__(self, status_code: int, body: str, payload: Any = None):
        self.status_code = status_code
        self.body = body
        self.payload = payload
        message = f"Splash returned HTTP {status_code}"
        if self.kind or self.description:
            message += f": {self.kind or 'error'}"
            if self.description:
                message += f" - {self.description}"
        elif body:
            message += f": {body[:200]}"
        super().__init__(message)

    @property
    def kind(self) -> Optional[str]:
        """Error kind reported by the service (`type`, falling back to `error`), if any."""
        if not isinstance(self.payload, dict):
            return None
        kind = self.payload.get("type", self.payload.get("error"))
        return str(kind) if kind is not None else None

    @property
    def description(self) -> Optional[str]:
        if not isinstance(self.payload, dict):
            return None
        description = self.payload.get("description")
        return str(description) if description is not None else None
