"""
Capacity-bounded store of named custom themes.

Persists the ordered theme list through a backend port after every
mutation. Persistence failures never escape the store: it keeps working
in memory and records the failure for callers that want to surface it.
"""

import json
import logging
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from pyqt_themekit.protocols.engine_config import get_engine_config
from pyqt_themekit.theming.exceptions import (
    CapacityExceeded,
    IndexRangeError,
    ParseError,
    PersistenceFailure,
    ValidationError,
)
from pyqt_themekit.theming.result import Result
from pyqt_themekit.theming.theme_models import CustomTheme, validate_theme_name

if TYPE_CHECKING:
    from pyqt_themekit.io.base import ThemeBackend

logger = logging.getLogger(__name__)


class PaletteStore:
    """
    Ordered list of saved custom themes, at most ``capacity`` long.

    All mutating operations return a ``Result`` and persist synchronously
    before returning. The store is loaded once at construction; unreadable
    or unparseable persisted data yields an empty store.
    """

    def __init__(self, backend: Optional["ThemeBackend"] = None, capacity: Optional[int] = None):
        """
        Initialize the store and load persisted themes.

        Args:
            backend: ThemeBackend to persist through (file backend if None)
            capacity: Maximum number of themes (config ``max_slots`` if None)
        """
        if backend is None:
            # Import here to avoid circular imports
            from pyqt_themekit.io.json_file_backend import JsonFileThemeBackend
            backend = JsonFileThemeBackend()

        self.backend = backend
        self.capacity = capacity if capacity is not None else get_engine_config().max_slots
        self._themes: List[CustomTheme] = []
        self.last_persistence_error: Optional[PersistenceFailure] = None
        self.load()

    # ========== READ ACCESS ==========

    @property
    def themes(self) -> Tuple[CustomTheme, ...]:
        return tuple(self._themes)

    @property
    def is_full(self) -> bool:
        return len(self._themes) >= self.capacity

    @property
    def degraded(self) -> bool:
        """True while the last persistence attempt failed (in-memory only)."""
        return self.last_persistence_error is not None

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[CustomTheme]:
        return iter(tuple(self._themes))

    def get(self, index: int) -> Result:
        if not 0 <= index < len(self._themes):
            return Result.failure(self._index_error(index))
        return Result.success(self._themes[index])

    # ========== PERSISTENCE ==========

    def load(self) -> Result:
        """
        Replace the in-memory list with the persisted one.

        Any read or parse failure falls back to an empty store. Invalid
        records and records beyond capacity are skipped.

        Returns:
            Result: success with the number of loaded themes
        """
        self._themes = []
        read = self.backend.read()
        if not read.ok:
            self.last_persistence_error = read.error
            logger.warning(f"Saved themes unavailable, continuing in memory: {read.error}")
            return Result.success(0)
        self.last_persistence_error = None

        if not read.value:
            return Result.success(0)

        try:
            records = json.loads(read.value)
        except ValueError as e:
            logger.warning(f"Saved themes are corrupt, starting empty: {e}")
            return Result.success(0)

        if not isinstance(records, list):
            logger.warning("Saved themes are not a list, starting empty")
            return Result.success(0)

        themes, skipped = self._parse_records(records)
        self._themes = themes[:self.capacity]
        if skipped:
            logger.warning(f"Skipped {skipped} invalid saved theme(s)")
        logger.debug(f"Loaded {len(self._themes)} saved theme(s)")
        return Result.success(len(self._themes))

    def _persist(self) -> None:
        result = self.backend.write(self.export_all())
        if result.ok:
            self.last_persistence_error = None
        else:
            self.last_persistence_error = result.error
            logger.warning(f"Theme changes kept in memory only: {result.error}")

    # ========== MUTATIONS ==========

    def save(self, name: str, theme: CustomTheme) -> Result:
        """
        Save ``theme`` under ``name`` as a new entry.

        Returns:
            Result: success with the saved theme, or failure with
            ``ValidationError`` (blank/long name) or ``CapacityExceeded``
        """
        try:
            name = validate_theme_name(name)
        except ValidationError as e:
            return Result.failure(e)

        if self.is_full:
            return Result.failure(CapacityExceeded(f"Maximum {self.capacity} custom themes"))

        saved = theme.renamed(name)
        self._themes.append(saved)
        self._persist()
        logger.info(f"Saved {saved.name!r} theme")
        return Result.success(saved, message=f'Saved "{saved.name}" theme')

    def delete(self, index: int) -> Result:
        """Remove the theme at ``index``; out-of-range indices fail with ``IndexRangeError``."""
        if not 0 <= index < len(self._themes):
            return Result.failure(self._index_error(index))

        removed = self._themes.pop(index)
        self._persist()
        logger.info(f"Deleted {removed.name!r} theme")
        return Result.success(removed, message="Theme deleted")

    def clear(self) -> Result:
        count = len(self._themes)
        self._themes = []
        self._persist()
        return Result.success(count)

    # ========== IMPORT / EXPORT ==========

    def export_all(self) -> str:
        """Serialize the ordered theme list to indented JSON."""
        return json.dumps([theme.to_dict() for theme in self._themes], indent=2)

    def import_many(self, text: str) -> Result:
        """
        Merge themes from exported JSON text.

        Text that is not JSON or not a list is rejected and the store is left
        unchanged. Otherwise valid records are appended and the merged list is
        truncated to capacity, so trailing imported themes may be dropped.

        Returns:
            Result: success with ``{"imported", "invalid", "dropped"}`` counts,
            or failure with ``ParseError``
        """
        try:
            records = json.loads(text)
        except (TypeError, ValueError) as e:
            logger.warning(f"Rejected theme import: {e}")
            return Result.failure(ParseError(f"Failed to import themes: {e}"))

        if not isinstance(records, list):
            logger.warning("Rejected theme import: not a list")
            return Result.failure(ParseError("Failed to import themes: expected a list"))

        themes, invalid = self._parse_records(records)
        room = max(self.capacity - len(self._themes), 0)
        accepted = themes[:room]
        dropped = len(themes) - len(accepted)

        self._themes.extend(accepted)
        self._persist()

        if dropped:
            logger.warning(f"Import over capacity, dropped {dropped} theme(s)")
        logger.info(f"Imported {len(accepted)} theme(s)")
        counts = {"imported": len(accepted), "invalid": invalid, "dropped": dropped}
        return Result.success(counts, message=f"Imported {len(accepted)} theme(s)")

    # ========== HELPERS ==========

    def _parse_records(self, records: list) -> Tuple[List[CustomTheme], int]:
        themes = []
        invalid = 0
        for record in records:
            try:
                themes.append(CustomTheme.from_dict(record))
            except ValidationError as e:
                logger.debug(f"Skipping theme record: {e}")
                invalid += 1
        return themes, invalid

    def _index_error(self, index: int) -> IndexRangeError:
        return IndexRangeError(f"No saved theme at index {index} (store holds {len(self._themes)})")
