"""Kernel errors – BaseError."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Root of the tableview error hierarchy.

    Subclasses pick a ``default_code`` and name the attributes that
    describe the failure in ``context_fields``.  :meth:`to_dict` reports
    those attributes under ``"context"`` so a log line carries the
    offending filter key or setting value without parsing the message.
    """

    default_code: ClassVar[str] = "tableview_error"
    context_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    @property
    def context(self) -> dict[str, Any]:
        return {name: getattr(self, name, None) for name in self.context_fields}

    def to_dict(self) -> dict[str, Any]:
        """Plain dict for structured logging."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.context_fields:
            payload["context"] = self.context
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
