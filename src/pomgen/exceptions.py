"""Custom exceptions for pomgen."""


class PomGenError(Exception):
    """Base exception for pomgen."""


class BuildGraphNotFoundError(PomGenError):
    """Raised when a build graph export cannot be found."""


class BuildGraphParseError(PomGenError):
    """Raised when a build graph export cannot be read or validated."""


class ResolutionError(PomGenError):
    """Raised when forcing the resolution of a configuration fails."""
