"""
Module-level DSL bound to one default BuilderContext.

    from xspf.dsl import playlist, track, title, creator, location

    def eighties():
        title("80's Music")
        track(lambda: (
            location("https://example.com/music/01.mp3"),
            title("Take On Me"),
            creator("A-ha"),
        ))

    pl = playlist(eighties)

playlist() and track() also work as decorators on a no-argument function;
the decorated name is bound to the result.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from .builder import BuilderContext
from .config import Config
from .models import Playlist, Track

_context = BuilderContext()


def get_context() -> BuilderContext:
    """Return the BuilderContext used by the module-level functions."""
    return _context


def configure(config: Config) -> None:
    """Replace the config of the default context."""
    _context.config = config


def playlist(routine: Callable[[], Any]) -> Playlist:
    return _context.build_playlist(routine)


def track(routine: Callable[[], Any]) -> None:
    _context.build_track(routine)


def title(value: str) -> None:
    _context.set_title(value)


def creator(value: str) -> None:
    _context.set_creator(value)


def location(value: Union[str, Path]) -> None:
    _context.set_location(value)


def tagged_location(path: Union[str, Path], tags: Optional[Dict[str, Optional[str]]] = None) -> None:
    _context.tagged_location(path, tags)


def current() -> Dict[str, Optional[Union[Playlist, Track]]]:
    """Current playlist/track of the default context (for tests)."""
    return _context.current()


def reset() -> None:
    _context.reset()


# Long-form names
build_playlist = playlist
build_track = track
set_title = title
set_creator = creator
set_location = location
