"""Base model pieces shared by orders and products."""

import enum
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.core.timeutils import utcnow


class CategoryEnum(enum.IntEnum):
    """Integer-valued category that also accepts its name from clients."""

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return the matching member, or ``value`` unchanged when nothing matches.

        Accepts members, integer values, digit strings and case-insensitive
        names. Unknown values are left for the validator to report.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return value
        if isinstance(value, str):
            text = value.strip()
            if text.lstrip("-").isdigit():
                return cls.coerce(int(text))
            for member in cls:
                if member.name.lower() == text.lower():
                    return member
        return value


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        nullable=True,
        onupdate=utcnow,
    )
