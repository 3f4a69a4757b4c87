"""Theme engine exceptions."""


class ThemeEngineError(Exception):
    """Base class for all theme engine errors."""


class ValidationError(ThemeEngineError):
    """Raised when a theme name, color or imported record is malformed."""


class IndexRangeError(ValidationError):
    """Raised when a store index does not refer to a saved theme."""


class CapacityExceeded(ThemeEngineError):
    """Raised when saving into a store that already holds its maximum slots."""


class ParseError(ThemeEngineError):
    """Raised when import text is not parseable or not a list of records."""


class PersistenceFailure(ThemeEngineError):
    """Raised by a backend when the underlying device store cannot be used."""
