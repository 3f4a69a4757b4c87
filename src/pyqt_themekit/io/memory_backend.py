"""In-process theme backend."""

import logging
from typing import Optional

from pyqt_themekit.theming.exceptions import PersistenceFailure
from pyqt_themekit.theming.result import Result

logger = logging.getLogger(__name__)


class MemoryThemeBackend:
    """Keeps the persisted text in memory; used for sessions without disk access and in tests."""

    def __init__(self, initial_text: Optional[str] = None):
        self.text = initial_text
        self.fail_writes = False
        self.write_count = 0

    def read(self) -> Result:
        return Result.success(self.text)

    def write(self, text: str) -> Result:
        if self.fail_writes:
            logger.debug("Memory backend rejecting write")
            return Result.failure(PersistenceFailure("Memory backend is read-only"))
        self.text = text
        self.write_count += 1
        return Result.success()
