from catalog_api.core.config import settings
from catalog_api.core.context import OperationContext
from catalog_api.core.database import Base, async_session_maker, engine, get_db
from catalog_api.core.exceptions import (
    AppError,
    BadRequestError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from catalog_api.core.redis import close_redis, get_redis

__all__ = [
    "settings",
    "OperationContext",
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "get_redis",
    "close_redis",
    "AppError",
    "BadRequestError",
    "InternalError",
    "NotFoundError",
    "ValidationError",
]
