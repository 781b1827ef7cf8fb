"""Create/read pipeline shared by the order and product services."""

import logging
import time
import uuid
from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from catalog_api.core.context import OperationContext
from catalog_api.core.exceptions import NotFoundError, ValidationError
from catalog_api.core.timeutils import Clock, utcnow
from catalog_api.middleware.metrics import CreationMetrics, record_creation_metrics
from catalog_api.repositories.base import EntityRepository
from catalog_api.services.cache_service import ResponseCache
from catalog_api.validators.rules import RuleSetValidator

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)
EntityT = TypeVar("EntityT")
ResponseT = TypeVar("ResponseT", bound=BaseModel)


def category_label(category: Any) -> str:
    """Enum member name, or the raw value when the request carried an unknown one."""
    return getattr(category, "name", str(category))


class CatalogService(Generic[RequestT, EntityT, ResponseT]):
    """Validate, persist, invalidate the list cache and derive the response.

    Subclasses provide the entity-specific pieces: how a request becomes an
    entity, how an entity becomes a response, and which fields identify the
    request in logs and metrics.
    """

    entity_name: str
    not_found_label: str
    cache_key: str
    duplicate_message: str
    unique_constraints: tuple[str, ...]
    response_model: type[BaseModel]

    def __init__(
        self,
        repository: EntityRepository[EntityT],
        cache: ResponseCache,
        validator: RuleSetValidator[RequestT],
        clock: Clock = utcnow,
    ):
        self.repository = repository
        self.cache = cache
        self.validator = validator
        self.clock = clock

    # -- hooks ---------------------------------------------------------------

    def build_entity(self, request: RequestT, entity_id: UUID, created_at: datetime) -> EntityT:
        raise NotImplementedError

    def to_response(self, entity: EntityT, now: datetime) -> ResponseT:
        raise NotImplementedError

    def describe(self, request: RequestT) -> tuple[str, str, str]:
        """(title, code, category) of a request for log lines and metrics."""
        raise NotImplementedError

    def is_duplicate(self, error: IntegrityError) -> bool:
        """True when ``error`` came from one of this entity's unique constraints."""
        detail = str(error.orig)
        return any(name in detail for name in self.unique_constraints)

    # -- operations ----------------------------------------------------------

    async def create(self, request: RequestT, ctx: OperationContext | None = None) -> ResponseT:
        """Run the create pipeline.

        Raises:
            ValidationError: If any rule fails, or the store reports a duplicate
        """
        ctx = ctx or OperationContext()
        extra = ctx.log_extra()
        title, code, category = self.describe(request)

        started = time.perf_counter()
        validation_seconds = 0.0
        database_seconds = 0.0

        logger.info(
            f"{self.entity_name.capitalize()} creation started | Title: {title} | "
            f"Code: {code} | Category: {category}",
            extra=extra,
        )

        try:
            validation_started = time.perf_counter()
            result = await self.validator.validate(request)
            validation_seconds = time.perf_counter() - validation_started

            if not result.is_valid:
                logger.warning(
                    f"{self.entity_name.capitalize()} validation failed | "
                    f"Code: {code} | Errors: {'; '.join(result.errors)}",
                    extra=extra,
                )
                raise ValidationError(result.errors)

            now = self.clock()
            entity = self.build_entity(request, uuid.uuid4(), now)

            logger.info(f"Database save started | Code: {code}", extra=extra)
            database_started = time.perf_counter()
            try:
                entity = await self.repository.add(entity)
            except IntegrityError as e:
                if not self.is_duplicate(e):
                    raise
                raise ValidationError(self.duplicate_message)
            finally:
                database_seconds = time.perf_counter() - database_started
            logger.info(
                f"Database save completed | Id: {entity.id} | "
                f"DurationMs: {database_seconds * 1000:.2f}",
                extra=extra,
            )

            removed = await self.cache.invalidate(self.cache_key)
            logger.info(
                f"Cache invalidated | Key: {self.cache_key} | Removed: {removed}",
                extra=extra,
            )

            response = self.to_response(entity, now)
        except Exception as e:
            record_creation_metrics(
                CreationMetrics(
                    entity=self.entity_name,
                    operation_id=ctx.operation_id,
                    title=title,
                    code=code,
                    category=category,
                    validation_seconds=validation_seconds,
                    database_seconds=database_seconds,
                    total_seconds=time.perf_counter() - started,
                    success=False,
                    error=str(e),
                ),
                extra=extra,
            )
            logger.error(
                f"{self.entity_name.capitalize()} creation failed | Code: {code} | Error: {e}",
                exc_info=not isinstance(e, ValidationError),
                extra=extra,
            )
            raise

        record_creation_metrics(
            CreationMetrics(
                entity=self.entity_name,
                operation_id=ctx.operation_id,
                title=title,
                code=code,
                category=category,
                validation_seconds=validation_seconds,
                database_seconds=database_seconds,
                total_seconds=time.perf_counter() - started,
                success=True,
            ),
            extra=extra,
        )
        logger.info(
            f"{self.entity_name.capitalize()} creation completed | Id: {entity.id} | Code: {code}",
            extra=extra,
        )
        return response

    async def get_all(self) -> list[ResponseT]:
        """All entities, newest first, served from the list cache when warm."""
        cached: list[dict[str, Any]] | None = await self.cache.get(self.cache_key)
        if cached is not None:
            logger.debug(f"Cache hit: {self.cache_key}")
            return [self.response_model.model_validate(item) for item in cached]

        now = self.clock()
        entities = await self.repository.list_all()
        responses = [self.to_response(entity, now) for entity in entities]
        await self.cache.set(
            self.cache_key,
            [response.model_dump(mode="json") for response in responses],
        )
        return responses

    async def get_by_id(self, entity_id: UUID) -> ResponseT:
        """Raises NotFoundError when no entity has ``entity_id``."""
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.not_found_label} with ID {entity_id} not found.")
        return self.to_response(entity, self.clock())
