"""Discriminated success/failure value returned by mutating engine operations."""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from pyqt_themekit.theming.exceptions import ThemeEngineError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an engine operation.

    Exactly one of ``value`` / ``error`` is meaningful, selected by ``ok``.
    Callers decide how to surface failures; the engine never raises them.

    Example:
        result = store.save("Midnight", theme)
        if not result.ok:
            show_message(str(result.error))
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[ThemeEngineError] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None, message: str = "") -> "Result":
        return cls(ok=True, value=value, message=message)

    @classmethod
    def failure(cls, error: ThemeEngineError) -> "Result":
        return cls(ok=False, error=error, message=str(error))

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""
        if not self.ok:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.ok
