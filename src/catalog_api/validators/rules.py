"""Rule objects and shared checks used by the domain validators.

A validator is an ordered list of :class:`Rule` objects. Every rule whose
``when`` guard holds is evaluated, sync or async, and each failure adds its
message to the result. Nothing short-circuits.
"""

import inspect
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Awaitable, Callable, Generic, Iterable, TypeVar
from urllib.parse import urlsplit

T = TypeVar("T")

Check = Callable[[T], "bool | Awaitable[bool]"]

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")


@dataclass(frozen=True)
class Rule(Generic[T]):
    message: str
    check: Check
    when: Callable[[T], bool] | None = None

    async def passes(self, subject: T) -> bool:
        if self.when is not None and not self.when(subject):
            return True
        result = self.check(subject)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class RuleSetValidator(Generic[T]):
    """Evaluates ``self.rules`` in order and collects every failure message."""

    rules: list[Rule]

    async def validate(self, subject: T) -> ValidationResult:
        result = ValidationResult()
        for rule in self.rules:
            if not await rule.passes(subject):
                result.errors.append(rule.message)
        return result


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def length_between(value: str, minimum: int, maximum: int) -> bool:
    return minimum <= len(value) <= maximum


def has_max_decimal_places(value: Decimal, places: int) -> bool:
    """Trailing zeros are ignored, so ``Decimal("45.000")`` has no decimal places."""
    exponent = value.normalize().as_tuple().exponent
    return isinstance(exponent, int) and exponent >= -places


def contains_any(text: str, words: Iterable[str]) -> bool:
    """Case-insensitive substring match against any of ``words``."""
    lowered = text.lower()
    return any(word.lower() in lowered for word in words)


def is_image_url(url: str) -> bool:
    """Absolute http(s) URL whose path ends in a known image extension."""
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        return False
    return parts.path.lower().endswith(IMAGE_EXTENSIONS)
