"""
Command-line entry point: render one URL through a Splash instance.

The command pings Splash, runs its garbage collector, performs the requested
render and prints the result on stdout. Diagnostics go to stderr.

Exit codes:
    0  success
    1  missing or invalid configuration, Splash unreachable, or any client error during the render
    2  invalid command-line arguments (argparse)
"""
import argparse
import json
import sys
from typing import Any, List, Optional

from splash_client.core.client import SplashClient
from splash_client.core.config import get_config_manager
from splash_client.core.exceptions import SplashClientError
from splash_client.core.logger import get_logger, setup_logging

logger = get_logger(__name__)

RENDER_MODES = ("html", "json", "har")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splash-client",
        description="Render a web page through a Splash javascript rendering service.",
    )
    parser.add_argument("url", help="the URL to render")
    parser.add_argument(
        "-r", "--render",
        choices=RENDER_MODES,
        default="html",
        help="request action; one of 'html', 'json' or 'har' (default: html)",
    )
    parser.add_argument(
        "-w", "--wait",
        type=float,
        default=2.0,
        help="seconds to wait after loading the page so javascript callbacks can run (default: 2)",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=30.0,
        help="overall render timeout in seconds (default: 30)",
    )
    # Connection flags default to None so the configuration file applies when they are omitted.
    parser.add_argument("-H", "--host", default=None, help="Splash host name or IP address (default: from configuration, else localhost)")
    parser.add_argument("-p", "--port", type=int, default=None, help="Splash port (default: from configuration, else 8050)")
    parser.add_argument("-u", "--user", default=None, help="Splash username, if authentication is enabled")
    parser.add_argument("-P", "--pass", dest="password", default=None, help="Splash password, if authentication is enabled")
    parser.add_argument(
        "-s", "--ssl",
        action="store_const",
        const=True,
        default=None,
        help="connect to Splash over HTTPS",
    )
    return parser


def render(client: SplashClient, args: argparse.Namespace) -> Any:
    """Performs the render selected by `args.render`."""
    if args.render == "har":
        return client.render_har(args.url, response_body=True, wait=args.wait, timeout=args.timeout)
    if args.render == "json":
        return client.render_json(
            args.url,
            response_body=True,
            html=True,
            png=True,
            jpeg=True,
            iframes=True,
            wait=args.wait,
            timeout=args.timeout,
        )
    return client.render_html(args.url, wait=args.wait, timeout=args.timeout)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config_manager()
    except SplashClientError as e:
        print(str(e), file=sys.stderr)
        return 1
    setup_logging(config)

    try:
        client = SplashClient(
            host=args.host,
            port=args.port,
            username=args.user,
            password=args.password,
            use_tls=args.ssl,
            config=config,
        )
    except SplashClientError as e:
        print(str(e), file=sys.stderr)
        return 1

    if not client.is_active():
        print("Splash instance is not active", file=sys.stderr)
        return 1

    try:
        client.reset()
        result = render(client, args)
    except SplashClientError as e:
        logger.debug(f"Render of {args.url} failed", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
