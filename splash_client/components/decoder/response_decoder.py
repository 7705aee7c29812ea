"""
Decodes raw Splash responses into results.

Two modes are supported: text (render.html) returns the body verbatim, and
structured (render.har, render.json, _gc, _debug, script helpers) parses the
body as JSON. A non-success status is raised as `RemoteError` in both modes,
carrying the decoded JSON error body when Splash sent one.
"""
from typing import Any

import requests

from splash_client.core.exceptions import DecodeError, RemoteError
from splash_client.core.logger import get_logger

logger = get_logger(__name__)


class ResponseDecoder:
    """Interprets `requests.Response` objects returned by `SplashTransport`."""

    def decode_text(self, response: requests.Response) -> str:
        """
        Returns the response body unchanged.

        Raises:
            RemoteError: If the response status is not 2xx.
        """
        self.raise_for_status(response)
        return response.text

    def decode_json(self, response: requests.Response) -> Any:
        """
        Parses the response body as a JSON document.

        Returns:
            Any: The parsed document (usually a dict, or a list for history()).

        Raises:
            RemoteError: If the response status is not 2xx.
            DecodeError: If the body is not valid JSON.
        """
        self.raise_for_status(response)
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Response from {response.url} is not valid JSON: {e}")
            raise DecodeError(
                f"Expected a JSON body from '{response.url}': {e}",
                status_code=response.status_code,
                body=response.text,
            )

    def raise_for_status(self, response: requests.Response) -> None:
        """Raises `RemoteError` for a non-2xx response; does nothing otherwise."""
        if 200 <= response.status_code < 300:
            return
        payload = None
        try:
            payload = response.json()
        except ValueError:
            logger.debug(f"Error response from {response.url} has no JSON body.")
        error = RemoteError(response.status_code, response.text, payload)
        logger.error(f"Splash request to {response.url} failed: {error.message}")
        raise error
