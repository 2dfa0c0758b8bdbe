# =============================================================================
# app/exceptions.py - Custom Exceptions
# =============================================================================
# Errors raised while bootstrapping the server.
# Errors should tell HOW to fix, not just WHAT failed.
#
# Request-level errors (unknown paths, wrong methods, malformed requests)
# are left to FastAPI's default handlers.
# =============================================================================

from typing import Any


class WeatherApiError(Exception):
    """
    Base exception for Weather API.

    All custom exceptions inherit from this class.
    Carries a machine-readable code and an actionable suggestion.
    """

    def __init__(
        self,
        message: str,
        code: str = "WEATHER_API_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a structured dict for logging."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Startup Exceptions
# =============================================================================

class ServerStartupError(WeatherApiError):
    """Raised when the listening socket can't be created or bound."""

    def __init__(self, host: str, port: int, error: str):
        super().__init__(
            message=f"Failed to listen on {host}:{port}: {error}",
            code="SERVER_STARTUP_ERROR",
            suggestion="Check that the host is a valid local address (set LISTEN_ADDR or --host/--port)",
            details={"host": host, "port": port, "error": error}
        )


class ListenAddressInUseError(WeatherApiError):
    """Raised when another process is already listening on the port."""

    def __init__(self, host: str, port: int):
        super().__init__(
            message=f"Address already in use: {host}:{port}",
            code="ADDRESS_IN_USE",
            suggestion="Stop the other listener or choose a different port with --port or LISTEN_ADDR",
            details={"host": host, "port": port}
        )
