"""
Builder Context: state and scoping rules for the XSPF DSL.

A BuilderContext holds at most one in-progress playlist and, nested inside
it, at most one in-progress track. Field setters write to whichever of the
two is innermost.

Scopes follow acquire / use / release:
- acquire: check nesting rules, install a fresh empty object
- use: run the caller's construction routine
- release: clear the current reference on every exit path

Errors raised inside a scope propagate unchanged; the scope only cleans up.
One instance is meant to be driven by a single caller at a time. Separate
instances are independent.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, NamedTuple, Optional, Union

from .config import Config
from .errors import (
    NestedPlaylistError,
    NestedTrackError,
    TrackOutsidePlaylistError,
    TitleOutsideContextError,
    CreatorOutsideTrackError,
    LocationOutsideTrackError,
)
from .models import Playlist, Track
from .tags import read_tags

logger = logging.getLogger(__name__)


class TargetKind(Enum):
    TRACK = "track"
    PLAYLIST = "playlist"
    NONE = "none"


class Target(NamedTuple):
    """Result of target resolution: which kind of object, and the object."""

    kind: TargetKind
    obj: Optional[Union[Track, Playlist]] = None


class BuilderContext:
    """
    Current-playlist / current-track state for one build at a time.

    Usage:
        ctx = BuilderContext()

        def tracks():
            ctx.set_title("80's Music")
            ctx.build_track(lambda: ctx.set_location("/music/01.mp3"))

        pl = ctx.build_playlist(tracks)
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Args:
            config: Config used by tagged_location(); defaults if None
        """
        self.config = config if config is not None else Config()
        self.current_playlist: Optional[Playlist] = None
        self.current_track: Optional[Track] = None

    # -- scopes -------------------------------------------------------------

    @contextmanager
    def playlist_scope(self) -> Iterator[Playlist]:
        """
        Open a playlist scope for a ``with`` block.

        Yields the in-progress playlist. It is sealed only if the block
        exits normally; the current reference is cleared either way.

        Raises:
            NestedPlaylistError: If a playlist is already open.
        """
        if self.current_playlist is not None:
            raise NestedPlaylistError()

        playlist = Playlist()
        self.current_playlist = playlist
        logger.debug("Opened playlist scope")
        try:
            yield playlist
        except BaseException:
            logger.debug("Playlist scope failed; discarding playlist")
            raise
        else:
            playlist.seal()
            logger.debug(f"Closed playlist scope ({len(playlist.tracks)} tracks)")
        finally:
            self.current_playlist = None

    @contextmanager
    def track_scope(self) -> Iterator[Track]:
        """
        Open a track scope for a ``with`` block.

        On normal exit the track is sealed and appended to the current
        playlist. On failure it is dropped.

        Raises:
            NestedTrackError: If a track is already open.
            TrackOutsidePlaylistError: If no playlist is open.
        """
        if self.current_track is not None:
            raise NestedTrackError()
        if self.current_playlist is None:
            raise TrackOutsidePlaylistError()

        track = Track()
        self.current_track = track
        try:
            yield track
        except BaseException:
            logger.debug("Track scope failed; discarding track")
            raise
        else:
            track.seal()
            self.current_playlist.tracks.append(track)
            logger.debug(f"Appended track #{len(self.current_playlist.tracks)}: {track.title!r}")
        finally:
            self.current_track = None

    def build_playlist(self, routine: Callable[[], Any]) -> Playlist:
        """
        Build a playlist by running a construction routine.

        Args:
            routine: Called with no arguments; its return value is ignored.

        Returns:
            The finished, sealed Playlist.

        Raises:
            NestedPlaylistError: If a playlist is already open.
            Any exception raised by routine, unchanged.
        """
        with self.playlist_scope() as playlist:
            routine()
        return playlist

    def build_track(self, routine: Callable[[], Any]) -> None:
        """
        Build a track inside the current playlist by running a routine.

        The track is appended to the playlist only if routine returns
        normally.

        Raises:
            NestedTrackError: If a track is already open.
            TrackOutsidePlaylistError: If no playlist is open.
            Any exception raised by routine, unchanged.
        """
        with self.track_scope():
            routine()

    # -- targets and setters ------------------------------------------------

    def resolve_target(self) -> Target:
        """Innermost open object: track over playlist, else none."""
        if self.current_track is not None:
            return Target(TargetKind.TRACK, self.current_track)
        if self.current_playlist is not None:
            return Target(TargetKind.PLAYLIST, self.current_playlist)
        return Target(TargetKind.NONE)

    def set_title(self, value: str) -> None:
        """Set the title of the current track, or of the playlist outside tracks."""
        target = self.resolve_target()
        if target.kind is TargetKind.NONE:
            raise TitleOutsideContextError()
        target.obj.title = value
        logger.debug(f"Set {target.kind.value} title: {value!r}")

    def set_creator(self, value: str) -> None:
        """Set the creator of the current track."""
        if self.current_track is None:
            raise CreatorOutsideTrackError()
        self.current_track.creator = value

    def set_location(self, value: Union[str, Path]) -> None:
        """Set the location (URI or file path) of the current track."""
        if self.current_track is None:
            raise LocationOutsideTrackError()
        self.current_track.location = str(value) if isinstance(value, Path) else value

    def tagged_location(
        self,
        path: Union[str, Path],
        tags: Optional[Dict[str, Optional[str]]] = None,
    ) -> None:
        """
        Set location to an audio file and fill title/creator from its tags.

        Fields already set on the track are kept. Which fields are filled
        is controlled by the [tags] config section.

        Args:
            path: Audio file path.
            tags: Pre-read tags ({"title", "creator"}); read from path if None.

        Raises:
            LocationOutsideTrackError: If no track is open.
            TagReadError: If tags must be read and the file is missing.
        """
        if self.current_track is None:
            raise LocationOutsideTrackError()

        tag_config = self.config["tags"]
        max_length = tag_config.get("max_field_length")
        if tags is None:
            tags = read_tags(path, max_field_length=max_length)
        elif max_length:
            tags = {key: value[:max_length] if isinstance(value, str) else value
                    for key, value in tags.items()}

        track = self.current_track
        self.set_location(path)

        if tag_config.get("fill_title", True) and track.title is None:
            title = tags.get("title")
            if title is None and tag_config.get("title_from_filename", False):
                title = Path(path).stem[:max_length] if max_length else Path(path).stem
            if title is not None:
                self.set_title(title)

        if tag_config.get("fill_creator", True) and track.creator is None:
            creator = tags.get("creator")
            if creator is not None:
                self.set_creator(creator)

    # -- state ----------------------------------------------------------------

    def current(self) -> Dict[str, Optional[Union[Playlist, Track]]]:
        """Snapshot of the current references (for tests)."""
        return {"playlist": self.current_playlist, "track": self.current_track}

    def reset(self) -> None:
        """Drop any in-progress playlist and track."""
        if self.current_playlist is not None or self.current_track is not None:
            logger.warning("Resetting builder with an open scope")
        self.current_playlist = None
        self.current_track = None

    def __repr__(self) -> str:
        return (
            f"BuilderContext(playlist_open={self.current_playlist is not None}, "
            f"track_open={self.current_track is not None})"
        )
