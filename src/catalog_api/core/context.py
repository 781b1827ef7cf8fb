"""Request-scoped context passed explicitly through the create pipeline."""

import uuid
from dataclasses import dataclass, field


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def new_operation_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass(frozen=True)
class OperationContext:
    """Correlation id from the inbound request plus a short per-call operation id."""

    correlation_id: str = field(default_factory=new_correlation_id)
    operation_id: str = field(default_factory=new_operation_id)

    def log_extra(self) -> dict[str, str]:
        return {
            "correlation_id": self.correlation_id,
            "operation_id": self.operation_id,
        }
