class MovieSummarizerError(Exception):
    """Base exception for the movie summarizer."""


class ConfigurationError(MovieSummarizerError):
    """Raised when required configuration is missing or invalid."""


class AppNotInitializedError(MovieSummarizerError):
    """Raised when the app is used before initialize()."""


class MovieLookupError(MovieSummarizerError):
    """Raised when the movie database lookup fails."""


class MovieNotFoundError(MovieLookupError):
    """Raised when the movie database has no match for a title."""
