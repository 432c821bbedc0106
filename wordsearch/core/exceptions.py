"""Custom exception hierarchy for the word-search engine."""


class WordSearchError(Exception):
    """Base exception for word-search failures."""


class CatalogError(WordSearchError):
    """Raised when a word list cannot be turned into playable word specs."""


class WordTooLongError(CatalogError):
    """Raised when a word cannot fit in the requested grid size."""


class WordTooShortError(CatalogError):
    """Raised when a word is too short to be selected by a drag."""


class SelectionError(WordSearchError):
    """Raised when the host reports a pointer event outside the grid."""


class ValidationError(WordSearchError):
    """Raised when a generated puzzle breaks a placement invariant."""


class WordSourceError(WordSearchError):
    """Raised when a word source cannot produce entries."""
