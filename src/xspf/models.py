"""
Playlist and Track values built by the XSPF DSL.

Both start out mutable while a build scope owns them and are sealed when
their scope closes successfully. A sealed value rejects attribute
assignment, and a sealed playlist holds its tracks in a tuple.
"""

from dataclasses import dataclass, field, FrozenInstanceError
from typing import Any, Dict, Optional, Sequence


class _Sealable:
    """Mixin that turns attribute assignment off once seal() is called."""

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False):
            raise FrozenInstanceError(
                f"cannot assign to field {name!r} of a finished {type(self).__name__.lower()}"
            )
        super().__setattr__(name, value)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        object.__setattr__(self, "_sealed", True)


@dataclass
class Track(_Sealable):
    """One entry in a playlist."""

    title: Optional[str] = None
    creator: Optional[str] = None
    location: Optional[str] = None  # URI or file path
    _sealed: bool = field(default=False, init=False, repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict, omitting unset fields."""
        data = {}
        for key in ("location", "title", "creator"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class Playlist(_Sealable):
    """Top-level document: optional title plus ordered track list."""

    title: Optional[str] = None
    tracks: Sequence[Track] = field(default_factory=list)
    _sealed: bool = field(default=False, init=False, repr=False, compare=False)

    def seal(self) -> None:
        """Freeze the track list, then the playlist itself."""
        object.__setattr__(self, "tracks", tuple(self.tracks))
        super().seal()

    def __eq__(self, other: Any) -> bool:
        """Compare by title and tracks, whether or not the list is frozen yet."""
        if not isinstance(other, Playlist):
            return NotImplemented
        return self.title == other.title and tuple(self.tracks) == tuple(other.tracks)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dict using XSPF element names.

        Returns:
            {"title": ..., "trackList": [...]} with title omitted when unset.
        """
        data: Dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        data["trackList"] = [t.to_dict() for t in self.tracks]
        return data
