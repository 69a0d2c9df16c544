"""Reporter adapter writing integration output to ``logging``."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LoggingReporter:
    """Forward sections and messages of integrators to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("podwire.integration")

    @contextmanager
    def section(self, title: str) -> Iterator[None]:
        self.logger.info("%s", title)
        yield
        self.logger.debug("Finished: %s", title)

    def message(self, text: str) -> None:
        self.logger.info("  %s", text)

    def warning(self, text: str) -> None:
        self.logger.warning("%s", text)
