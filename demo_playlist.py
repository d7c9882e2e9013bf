#!/usr/bin/env python3
"""Build and display the demo "80's Music" playlist with the XSPF DSL."""

import json
import logging
import sys

from xspf.config import Config
from xspf.dsl import configure, creator, location, playlist, title, track

logger = logging.getLogger(__name__)

SONGS = [
    ("https://example.com/music/01.mp3", "Take On Me", "A-ha"),
    ("https://example.com/music/02.mp3", "Tainted Love", "Soft Cell"),
    ("https://example.com/music/03.mp3", "Livin' on a Prayer", "Bon Jovi"),
]


def eighties():
    title("80's Music")
    for url, song, artist in SONGS:
        def one_track():
            location(url)
            title(song)
            creator(artist)
        track(one_track)


def main():
    config = Config.load()
    logging.basicConfig(
        level=config.get("logging", "level", "INFO"),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    )
    configure(config)

    try:
        pl = playlist(eighties)
    except Exception as e:
        logger.error(f"Playlist build failed: {e}", exc_info=True)
        return 1

    print(f"🎵 {pl.title} ({len(pl.tracks)} tracks)")
    print("-" * 60)
    for idx, t in enumerate(pl.tracks, 1):
        print(f"{idx:2d}. {t.title:<25} {t.creator:<12} {t.location}")
    print("-" * 60)
    print(json.dumps(pl.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
