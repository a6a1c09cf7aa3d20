# src/pricing/errors.py
from __future__ import annotations

from typing import Any, Iterable, Optional


class ValidationError(ValueError):
    """
    Raised when a rating factor is outside its closed set of allowed values,
    or when a rate override is not a finite positive number.

    field: name of the offending RatingInput field (e.g. "home_type")
    value: the rejected value
    """

    def __init__(self, field: str, value: Any, allowed: Optional[Iterable[Any]] = None) -> None:
        self.field = field
        self.value = value
        self.allowed = list(allowed) if allowed is not None else []
        msg = f"Invalid {field}: {value!r}"
        if self.allowed:
            msg += f". Allowed: {', '.join(str(a) for a in self.allowed)}"
        super().__init__(msg)

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "value": self.value, "message": str(self)}
