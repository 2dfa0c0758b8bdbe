# =============================================================================
# app/routers/ - Controller Registration
# =============================================================================
# This package contains FastAPI routers ("controllers") organized by feature:
# - health.py: Health check endpoints
#
# Controllers are not discovered by scanning modules. Each one is listed in
# CONTROLLERS below with its URL prefix and tags, and main.py mounts the
# whole table through register_controllers().
# =============================================================================

import logging
from typing import NamedTuple, Sequence

from fastapi import APIRouter, FastAPI

from . import health

logger = logging.getLogger(__name__)


class Controller(NamedTuple):
    """A router together with the prefix and tags it is mounted under."""
    router: APIRouter
    prefix: str = ""
    tags: tuple[str, ...] = ()


CONTROLLERS: tuple[Controller, ...] = (
    Controller(health.router, prefix="/api/v1", tags=("Health",)),
)


def register_controllers(
    app: FastAPI,
    controllers: Sequence[Controller] = CONTROLLERS,
) -> int:
    """
    Mount every controller on the application.

    Returns:
        Number of controllers mounted
    """
    for controller in controllers:
        app.include_router(
            controller.router,
            prefix=controller.prefix,
            tags=list(controller.tags),
        )
        logger.debug(
            f"Mounted controller with {len(controller.router.routes)} route(s) "
            f"at '{controller.prefix or '/'}'"
        )
    return len(controllers)


__all__ = [
    "Controller",
    "CONTROLLERS",
    "register_controllers",
    "health",
]
