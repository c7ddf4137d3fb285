from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class OperationResult:
    """Structured outcome handed back to API callers.

    Services raise ``DomainError``; controllers turn both outcomes into this
    shape so no failure escapes as an unhandled error.
    """

    success: bool
    message: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: Optional[str] = None, **data: Any) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        payload = out.pop("data")
        if out["message"] is None:
            out.pop("message")
        out.update(payload)
        return out
