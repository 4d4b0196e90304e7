"""Core module - config, database, dependencies, exceptions."""

from app.core.config import get_settings, Settings
from app.core.database import Database
from app.core.dependencies import get_current_user
from app.core.exceptions import (
    AppException,
    NotFoundException,
    UnauthorizedException,
    BadRequestException,
    UpstreamException,
)

__all__ = [
    "get_settings",
    "Settings",
    "Database",
    "get_current_user",
    "AppException",
    "NotFoundException",
    "UnauthorizedException",
    "BadRequestException",
    "UpstreamException",
]
