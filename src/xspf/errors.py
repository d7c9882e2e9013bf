"""
Error taxonomy for the XSPF builder.

Every error here is a usage error raised at the point of violation.
The builder never catches or translates them.
"""


class XSPFError(Exception):
    """Base class for all builder errors."""
    pass


class ScopeError(XSPFError):
    """Raised when a build scope is opened in the wrong place."""
    pass


class NestedPlaylistError(ScopeError):
    """Raised when a playlist is built inside another playlist."""

    def __init__(self, message: str = "Nested playlist"):
        super().__init__(message)


class NestedTrackError(ScopeError):
    """Raised when a track is built inside another track."""

    def __init__(self, message: str = "Nested track"):
        super().__init__(message)


class TrackOutsidePlaylistError(ScopeError):
    """Raised when a track is built with no open playlist."""

    def __init__(self, message: str = "Track outside playlist"):
        super().__init__(message)


class FieldError(XSPFError):
    """Raised when a field setter has no valid target."""
    pass


class TitleOutsideContextError(FieldError):
    def __init__(self, message: str = "Title outside playlist or track"):
        super().__init__(message)


class CreatorOutsideTrackError(FieldError):
    def __init__(self, message: str = "Creator outside track"):
        super().__init__(message)


class LocationOutsideTrackError(FieldError):
    def __init__(self, message: str = "Location outside track"):
        super().__init__(message)


class ConfigError(XSPFError):
    """Raised when config validation fails."""
    pass


class TagReadError(XSPFError):
    """Raised when an audio file cannot be opened for tag reading."""
    pass
