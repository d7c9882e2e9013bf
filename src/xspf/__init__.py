# XSPF builder: block-structured DSL for a subset of XSPF playlist data
# Package: xspf

__version__ = "0.1.0"
__description__ = "Block-structured builder DSL for XSPF playlists"

# Module structure:
#   - xspf.builder : BuilderContext (scopes, target resolution, setters)
#   - xspf.dsl     : module-level playlist/track/title/creator/location
#   - xspf.models  : Playlist and Track values
#   - xspf.errors  : error taxonomy
#   - xspf.config  : configuration management
#   - xspf.tags    : audio tag reading (mutagen)

from .builder import BuilderContext, Target, TargetKind
from .errors import (
    XSPFError,
    ScopeError,
    FieldError,
    NestedPlaylistError,
    NestedTrackError,
    TrackOutsidePlaylistError,
    TitleOutsideContextError,
    CreatorOutsideTrackError,
    LocationOutsideTrackError,
    ConfigError,
    TagReadError,
)
from .models import Playlist, Track

__all__ = [
    "BuilderContext",
    "Target",
    "TargetKind",
    "Playlist",
    "Track",
    "XSPFError",
    "ScopeError",
    "FieldError",
    "NestedPlaylistError",
    "NestedTrackError",
    "TrackOutsidePlaylistError",
    "TitleOutsideContextError",
    "CreatorOutsideTrackError",
    "LocationOutsideTrackError",
    "ConfigError",
    "TagReadError",
]
