"""
The `SplashClient` facade: one method per Splash HTTP API endpoint.

Every call follows the same path: options are validated and turned into query
parameters by `ParameterBuilder`, sent by `SplashTransport`, and the response
is decoded by `ResponseDecoder` (text or JSON, depending on the endpoint).
"""
from typing import Any, Dict, Optional, TYPE_CHECKING

import requests
from pydantic import ValidationError

from splash_client.components.decoder.response_decoder import ResponseDecoder
from splash_client.components.params.param_builder import ParameterBuilder
from splash_client.components.transport.http_transport import SplashTransport
from splash_client.core.exceptions import ConfigurationError, TransportError
from splash_client.core.logger import get_logger
from splash_client.core.models import DEFAULT_TIMEOUT, ConnectionConfig, HarOptions, JsonOptions, RenderOptions, ScriptOptions

if TYPE_CHECKING:
    from splash_client.core.config import ConfigurationManager

logger = get_logger(__name__)

VERSION_SCRIPT = "return splash:get_version()"
PERF_STATS_SCRIPT = "return splash:get_perf_stats()"
HISTORY_SCRIPT = "return splash:history()"


class SplashClient:
    """
    Client for a Splash javascript rendering service.

    Splash is a lightweight headless browser with an HTTP API. This class builds
    requests for its endpoints, forwards HTTP Basic credentials when configured,
    and decodes what comes back.

    Connection settings are resolved once, at construction: explicit arguments win,
    then the `splash.*` keys of `config`, then the defaults (localhost:8050, plain
    HTTP, no authentication). The resulting `ConnectionConfig` is immutable.

    Example:
        client = SplashClient()
        html = client.render_html("https://www.python.org/", wait=0.5)

    Attributes:
        connection (ConnectionConfig): The resolved connection settings.
        transport (SplashTransport): Performs the HTTP requests.
        decoder (ResponseDecoder): Turns responses into results.
        params (ParameterBuilder): Turns options into query parameters.
    """
    DEFAULT_HOST = "localhost"
    DEFAULT_PORT = 8050

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: Optional[bool] = None,
        config: Optional['ConfigurationManager'] = None,
    ):
        """
        Args:
            host (Optional[str]): Host name or IP address of the Splash instance.
            port (Optional[int]): Port the Splash instance listens on.
            username (Optional[str]): User for HTTP Basic authentication. None disables authentication.
            password (Optional[str]): Password for HTTP Basic authentication.
            use_tls (Optional[bool]): Connect over HTTPS when True.
            config (Optional[ConfigurationManager]): Source of `splash.*` settings for any
                argument left as None.

        Raises:
            ConfigurationError: If the resolved connection settings are invalid.
        """
        def setting(value: Any, key: str, default: Any) -> Any:
            if value is not None:
                return value
            if config is not None:
                configured = config.get(f"splash.{key}")
                if configured is not None:
                    return configured
            return default

        try:
            self.connection = ConnectionConfig(
                host=setting(host, "host", self.DEFAULT_HOST),
                port=setting(port, "port", self.DEFAULT_PORT),
                username=setting(username, "username", None),
                password=setting(password, "password", None),
                use_tls=setting(use_tls, "use_tls", False),
            )
        except ValidationError as e:
            logger.error(f"Invalid Splash connection settings: {e}")
            raise ConfigurationError(f"Invalid Splash connection settings: {e}")

        transport_timeout = config.get("splash.transport_timeout") if config is not None else None
        self.transport = SplashTransport(self.connection, timeout=transport_timeout)
        self.decoder = ResponseDecoder()
        self.params = ParameterBuilder()
        logger.info(f"SplashClient configured for {self.connection.base_url}")

    # --- Render endpoints ---

    def render_html(self, url: str, **options: Any) -> str:
        """
        Returns the HTML of the javascript-rendered page.

        Args:
            url (str): The URL to render (required).
            **options: Render options; see `RenderOptions`. The most common are
                `base_url` (base for relative resource URLs, sent as `baseurl`),
                `timeout` (seconds for the whole render, default 30, also used for None;
                Splash caps it, 90 by default), `resource_timeout` (seconds per network request),
                `wait` (seconds to wait after page load, needed for setTimeout and
                setInterval callbacks to run), `proxy` (profile name or
                `[protocol://][user:password@]proxyhost[:port]`), `viewport`
                (`<width>x<height>`), `js` (javascript profile name), `js_source`
                (javascript to run in the page), `filters`, `allowed_domains`,
                `allowed_content_types`, `forbidden_content_types` (comma-separated
                lists) and `images` (whether to download images).

        Returns:
            str: The response body, unchanged.

        Raises:
            ParameterError: If `url` is empty or an option is invalid.
            TransportError: If Splash could not be reached.
            RemoteError: If Splash answered with an error status.
        """
        render_options = self.params.make_options(RenderOptions, url=url, **options)
        response = self.transport.call("render.html", self.params.render_params(render_options))
        return self.decoder.decode_text(response)

    def render_har(self, url: str, response_body: Optional[bool] = None, **options: Any) -> Dict[str, Any]:
        """
        Returns information about the page load in HAR format: requests made,
        responses received, timings, headers. Response contents are included in
        the HAR records only when `response_body` is True.

        Args:
            url (str): The URL to render (required).
            response_body (Optional[bool]): Include response contents in the records.
            **options: Render options, as for `render_html`.

        Returns:
            Dict[str, Any]: The parsed HAR document, e.g. `result["log"]["pages"][0]["title"]`.
        """
        har_options = self.params.make_options(HarOptions, url=url, response_body=response_body, **options)
        response = self.transport.call("render.har", self.params.render_params(har_options))
        return self.decoder.decode_json(response)

    def render_json(
        self,
        url: str,
        response_body: Optional[bool] = None,
        html: Optional[bool] = None,
        png: Optional[bool] = None,
        jpeg: Optional[bool] = None,
        iframes: Optional[bool] = None,
        script: Optional[bool] = None,
        console: Optional[bool] = None,
        history: Optional[bool] = None,
        har: Optional[bool] = None,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Returns a JSON-encoded dictionary describing the rendered page.

        Flags left as None are not sent, so Splash's defaults apply.

        Args:
            url (str): The URL to render (required).
            response_body (Optional[bool]): Include response contents in HAR records.
            html (Optional[bool]): Include the HTML.
            png (Optional[bool]): Include a PNG screenshot (base64).
            jpeg (Optional[bool]): Include a JPEG screenshot (base64).
            iframes (Optional[bool]): Include information about child frames.
            script (Optional[bool]): Include the result of the executed javascript final statement.
            console (Optional[bool]): Include the executed javascript console messages.
            history (Optional[bool]): Include the request/response history of the main frame.
            har (Optional[bool]): Include the HAR data that `render_har` would return, under `har`.
            **options: Render options, as for `render_html`.

        Returns:
            Dict[str, Any]: The parsed document, e.g. `result["title"]`.
        """
        json_options = self.params.make_options(
            JsonOptions,
            url=url,
            response_body=response_body,
            html=html,
            png=png,
            jpeg=jpeg,
            iframes=iframes,
            script=script,
            console=console,
            history=history,
            har=har,
            **options,
        )
        response = self.transport.call("render.json", self.params.render_params(json_options))
        return self.decoder.decode_json(response)

    # --- Script endpoints ---

    def execute(
        self,
        lua_source: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        allowed_domains: Optional[str] = None,
        proxy: Optional[str] = None,
        filters: Optional[str] = None,
        lua_args: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Executes a complete Splash script (one that defines `function main(splash, args)`).

        See `run` for the variant that supplies the `main` boilerplate.

        Args:
            lua_source (str): The browser automation script.
            timeout (Optional[float]): Seconds allowed for the script (default 30; None also means 30).
            allowed_domains (Optional[str]): Comma-separated list of allowed domain names.
            proxy (Optional[str]): Proxy profile name or proxy URL.
            filters (Optional[str]): Comma-separated list of request filter names.
            lua_args (Optional[Dict[str, Any]]): Extra values available to the script in
                `splash.args`. Names may not reuse the parameters above.

        Returns:
            requests.Response: The raw response; what the script returns is up to the
                script, so decoding is left to the caller.

        Raises:
            ParameterError: If `lua_source` is empty or a `lua_args` name is reserved.
            TransportError: If Splash could not be reached.
        """
        return self._script("execute", lua_source, timeout, allowed_domains, proxy, filters, lua_args)

    def run(
        self,
        lua_source: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        allowed_domains: Optional[str] = None,
        proxy: Optional[str] = None,
        filters: Optional[str] = None,
        lua_args: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Like `execute`, but Splash wraps `lua_source` in `function main(splash, args) ... end`.
        """
        return self._script("run", lua_source, timeout, allowed_domains, proxy, filters, lua_args)

    def _script(self, endpoint, lua_source, timeout, allowed_domains, proxy, filters, lua_args) -> requests.Response:
        script_options = self.params.make_options(
            ScriptOptions,
            lua_source=lua_source,
            timeout=timeout,
            allowed_domains=allowed_domains,
            proxy=proxy,
            filters=filters,
            lua_args=lua_args,
        )
        return self.transport.call(endpoint, self.params.script_params(script_options))

    # --- Service endpoints ---

    def is_active(self) -> bool:
        """
        Checks whether the Splash instance responds.

        Returns:
            bool: True only if `_ping` answered HTTP 200. Any other status, or a
                  transport failure, gives False; this method never raises.
        """
        try:
            response = self.transport.call("_ping")
        except TransportError as e:
            logger.warning(f"Splash at {self.connection.base_url} is unreachable: {e}")
            return False
        if response.status_code != 200:
            logger.warning(f"Splash ping at {self.connection.base_url} returned HTTP {response.status_code}")
            return False
        return True

    def reset(self) -> Dict[str, Any]:
        """
        Runs the Python garbage collector in the Splash instance and clears WebKit caches.

        Returns:
            Dict[str, Any]: Number of objects freed and the instance status.
        """
        return self.decoder.decode_json(self.transport.call("_gc", method="POST"))

    def debug_info(self) -> Dict[str, Any]:
        """Returns debug-level information about the Splash instance."""
        return self.decoder.decode_json(self.transport.call("_debug"))

    # --- Script helpers ---

    def version(self) -> Dict[str, Any]:
        """Version information of the running Splash instance (e.g. `result["splash"]`)."""
        return self.decoder.decode_json(self.run(VERSION_SCRIPT))

    def performance_statistics(self) -> Dict[str, Any]:
        """Performance statistics of the running Splash instance (e.g. `result["cputime"]`)."""
        return self.decoder.decode_json(self.run(PERF_STATS_SCRIPT))

    def history(self) -> Any:
        """Requests/responses for the pages loaded by the Splash instance, as a list."""
        return self.decoder.decode_json(self.run(HISTORY_SCRIPT))
