# =============================================================================
# app/server.py - Process Bootstrap
# =============================================================================
# Starts the Weather API: resolves the listen address, binds the socket and
# runs uvicorn until the process receives SIGINT/SIGTERM.
#
# Usage:
#   python -m app.server
#   python -m app.server --host 127.0.0.1 --port 8080
#   LISTEN_ADDR=:9000 weather-api
#
# Exit codes:
#   0 - graceful shutdown
#   1 - startup failure (e.g. port already in use)
# =============================================================================

import argparse
import errno
import logging
import signal
import socket
import sys
from typing import Sequence

import uvicorn

from app.config import Settings, get_settings
from app.exceptions import ListenAddressInUseError, ServerStartupError, WeatherApiError
from app.main import create_app

logger = logging.getLogger(__name__)

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def port_number(value: str) -> int:
    """argparse type for a TCP port in 0-65535."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be 0-65535, got {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    """Command-line options; all of them fall back to settings."""
    parser = argparse.ArgumentParser(
        prog="weather-api",
        description="Run the Weather API HTTP server.",
    )
    parser.add_argument("--host", help="Host to bind (default: API_HOST or LISTEN_ADDR)")
    parser.add_argument("--port", type=port_number, help="Port to bind (default: API_PORT or LISTEN_ADDR)")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="uvicorn log level (default: debug when DEBUG is set, else info)",
    )
    return parser


def resolve_listen_address(
    app_settings: Settings,
    host: str | None = None,
    port: int | None = None,
) -> tuple[str, int]:
    """
    Command-line values win over settings, one field at a time.

    Brackets around an IPv6 host ("[::1]") are stripped.
    """
    default_host, default_port = app_settings.listen_address
    if host is not None:
        host = host.strip().removeprefix("[").removesuffix("]")
    return (
        host if host is not None else default_host,
        port if port is not None else default_port,
    )


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Create a listening-ready socket bound to host:port.

    Raises:
        ListenAddressInUseError: If something else already listens there
        ServerStartupError: For any other bind failure
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        # Only lets us reuse TIME_WAIT ports; a live listener still blocks the bind
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OverflowError as e:
        sock.close()
        raise ServerStartupError(host, port, str(e)) from e
    except OSError as e:
        sock.close()
        if e.errno == errno.EADDRINUSE:
            raise ListenAddressInUseError(host, port) from e
        raise ServerStartupError(host, port, e.strerror or str(e)) from e

    sock.set_inheritable(True)
    return sock


def build_server(app_settings: Settings, log_level: str | None = None) -> uvicorn.Server:
    """Create a uvicorn server for a freshly built application."""
    config = uvicorn.Config(
        app=create_app(app_settings),
        log_level=log_level or ("debug" if app_settings.DEBUG else "info"),
        lifespan="on",
    )
    return uvicorn.Server(config)


def _interrupt(signum: int, frame) -> None:
    """Turn SIGTERM into KeyboardInterrupt so main() can exit cleanly."""
    raise KeyboardInterrupt


def serve(app_settings: Settings, host: str, port: int, log_level: str | None = None) -> None:
    """
    Bind host:port and serve until the process is told to stop.

    uvicorn handles SIGINT/SIGTERM itself: it stops accepting connections
    and drains in-flight requests before returning.
    """
    sock = bind_socket(host, port)
    bound_host, bound_port = sock.getsockname()[:2]
    logger.info(f"Listening on http://{bound_host}:{bound_port}")

    server = build_server(app_settings, log_level)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    app_settings = get_settings()
    host, port = resolve_listen_address(app_settings, args.host, args.port)

    # uvicorn re-raises the signal it caught once shutdown is complete
    previous_handler = signal.signal(signal.SIGTERM, _interrupt)

    try:
        serve(app_settings, host, port, args.log_level)
    except WeatherApiError as e:
        logger.error(f"Startup failed: {e.message}")
        if e.suggestion:
            logger.error(f"Suggestion: {e.suggestion}")
        return 1
    except KeyboardInterrupt:
        pass
    finally:
        signal.signal(signal.SIGTERM, previous_handler)

    logger.info("Weather API stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
