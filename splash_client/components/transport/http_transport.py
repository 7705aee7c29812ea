"""
HTTP transport to a Splash instance.

`SplashTransport` turns an endpoint path and a parameter mapping into one
authenticated `requests` call. It does not interpret status codes; that is
left to the response decoder. Network-level failures are raised as
`TransportError` and are never retried.
"""
from typing import Mapping, Optional

import requests
from requests.auth import HTTPBasicAuth

from splash_client.core.exceptions import TransportError
from splash_client.core.logger import get_logger
from splash_client.core.models import ConnectionConfig

logger = get_logger(__name__)


class SplashTransport:
    """
    Issues GET/POST requests against `<scheme>://<host>:<port>/<endpoint>`.

    Attributes:
        connection (ConnectionConfig): Where the Splash instance lives and how to authenticate.
        timeout (Optional[float]): Connect/read timeout in seconds handed to `requests`.
                                   None means no client-side timeout.
    """
    SUPPORTED_METHODS = ("GET", "POST")

    def __init__(self, connection: ConnectionConfig, timeout: Optional[float] = None):
        self.connection = connection
        self.timeout = timeout
        self.auth: Optional[HTTPBasicAuth] = None
        if connection.has_credentials:
            self.auth = HTTPBasicAuth(connection.username, connection.password or "")
        logger.debug(
            f"SplashTransport configured for {connection.base_url} "
            f"(auth: {'basic' if self.auth else 'none'}, timeout: {timeout})"
        )

    def url_for(self, endpoint: str) -> str:
        """Full URL of `endpoint` on the configured Splash instance."""
        return f"{self.connection.base_url}/{endpoint.lstrip('/')}"

    def call(self, endpoint: str, params: Optional[Mapping[str, str]] = None, method: str = "GET") -> requests.Response:
        """
        Performs the request and returns the raw response, whatever its status.

        Args:
            endpoint (str): Endpoint path, e.g. "render.html" or "_ping".
            params (Optional[Mapping[str, str]]): Query parameters. None sends none.
            method (str): "GET" or "POST" (case-insensitive).

        Returns:
            requests.Response: The response as received.

        Raises:
            TransportError: For an unsupported method, or when the request could not be
                            completed (connection refused, DNS, TLS, timeout).
        """
        http_method = method.upper()
        if http_method not in self.SUPPORTED_METHODS:
            raise TransportError(f"Unsupported HTTP method '{method}'. Must be one of {', '.join(self.SUPPORTED_METHODS)}.")

        url = self.url_for(endpoint)
        logger.debug(f"{http_method} {url} params={sorted(params) if params else []}")
        try:
            response = requests.request(
                http_method,
                url,
                params=dict(params) if params else None,
                auth=self.auth,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"{http_method} {url} failed: {e}")
            raise TransportError(f"{http_method} request to '{url}' failed", original_exception=e)

        logger.info(f"{http_method} {url} -> HTTP {response.status_code}")
        return response
