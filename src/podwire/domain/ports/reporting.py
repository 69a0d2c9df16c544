"""Port for the user-facing reporting sink."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


@runtime_checkable
class IntegrationReporter(Protocol):
    """Receives section framing and informational output from integrators."""

    def section(self, title: str) -> AbstractContextManager[None]: ...

    def message(self, text: str) -> None: ...

    def warning(self, text: str) -> None: ...
