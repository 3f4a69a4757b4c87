"""Style-token sink capability.

The rendering layer owns a process-wide set of style tokens. The preview
controller only ever touches it through this capability, so the sink can be
a QApplication, a web bridge, or an in-memory dict in tests.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TokenApplier(Protocol):
    """Anything that can apply and clear a set of style-token overrides."""

    def apply(self, tokens: Mapping[str, str]) -> None:
        ...

    def clear(self) -> None:
        ...


class TokenApplierABC(ABC):
    """Explicit base class for token appliers.

    Subclasses must apply all tokens as one unit and must make ``clear()``
    remove every override they previously applied.
    """

    @abstractmethod
    def apply(self, tokens: Mapping[str, str]) -> None:
        """Override the sink's tokens with ``tokens``."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove all overrides so the base theme shows through."""
        raise NotImplementedError

    @abstractmethod
    def current_tokens(self) -> Dict[str, str]:
        """Return the tokens currently visible in the sink."""
        raise NotImplementedError
