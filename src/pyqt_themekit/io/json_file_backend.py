"""
File-backed theme persistence.

Stores the exported theme list as a JSON text file, by default under the
user's cache directory (see ``ThemeEngineConfig.store_file``).
"""

import logging
from pathlib import Path
from typing import Optional

from pyqt_themekit.protocols.engine_config import get_engine_config
from pyqt_themekit.theming.exceptions import PersistenceFailure
from pyqt_themekit.theming.result import Result

logger = logging.getLogger(__name__)


class JsonFileThemeBackend:
    """
    Theme backend writing to a single text file.

    I/O errors are converted into failed results; nothing is raised.
    """

    def __init__(self, path: Optional[Path] = None):
        """
        Initialize the backend.

        Args:
            path: Optional custom file location
        """
        self.path = Path(path) if path is not None else get_engine_config().resolve_store_file()
        logger.debug(f"JsonFileThemeBackend using {self.path}")

    def read(self) -> Result:
        """Read the stored text; a missing file is an empty store, not a failure."""
        try:
            if not self.path.exists():
                logger.debug("No saved themes found, starting fresh")
                return Result.success(None)
            return Result.success(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read saved themes from {self.path}: {e}")
            return Result.failure(PersistenceFailure(f"Failed to read {self.path}: {e}"))

    def write(self, text: str) -> Result:
        """Write ``text`` to the store file, creating its directory if needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
            logger.debug(f"Saved themes to {self.path}")
            return Result.success()
        except OSError as e:
            logger.warning(f"Failed to save themes to {self.path}: {e}")
            return Result.failure(PersistenceFailure(f"Failed to write {self.path}: {e}"))
