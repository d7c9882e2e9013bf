"""
Unit tests for field setters and target resolution.
"""

import pytest
from pathlib import Path
from xspf.builder import BuilderContext, Target, TargetKind
from xspf.errors import (
    TitleOutsideContextError,
    CreatorOutsideTrackError,
    LocationOutsideTrackError,
    FieldError,
)


@pytest.fixture
def ctx():
    """Fresh builder context."""
    return BuilderContext()


class TestTargetResolution:
    """Test track-over-playlist precedence."""

    def test_no_target(self, ctx):
        """Nothing open resolves to NONE."""
        assert ctx.resolve_target() == Target(TargetKind.NONE, None)

    def test_playlist_target(self, ctx):
        """Inside a playlist only, the playlist is the target."""
        seen = []
        pl = ctx.build_playlist(lambda: seen.append(ctx.resolve_target()))
        assert seen[0].kind is TargetKind.PLAYLIST
        assert seen[0].obj is pl

    def test_track_overrides_playlist(self, ctx):
        """Inside a track, the track is the target."""
        seen = []
        pl = ctx.build_playlist(lambda: ctx.build_track(lambda: seen.append(ctx.resolve_target())))
        assert seen[0].kind is TargetKind.TRACK
        assert seen[0].obj is pl.tracks[0]


class TestSetTitle:
    """Test set_title."""

    def test_title_outside_context(self, ctx):
        """set_title with nothing open fails."""
        with pytest.raises(TitleOutsideContextError, match="Title outside playlist or track"):
            ctx.set_title("Orphan")

    def test_title_sets_playlist_outside_track(self, ctx):
        """set_title between tracks goes to the playlist."""
        def routine():
            ctx.build_track(lambda: ctx.set_title("Track"))
            ctx.set_title("Playlist")

        pl = ctx.build_playlist(routine)
        assert pl.title == "Playlist"
        assert pl.tracks[0].title == "Track"

    def test_title_last_write_wins(self, ctx):
        """Repeated set_title overwrites."""
        def routine():
            ctx.set_title("First")
            ctx.set_title("Second")

        assert ctx.build_playlist(routine).title == "Second"

    def test_title_same_value_twice(self, ctx):
        """Setting the same value twice equals setting it once."""
        once = ctx.build_playlist(lambda: ctx.set_title("Same"))

        def twice():
            ctx.set_title("Same")
            ctx.set_title("Same")

        assert ctx.build_playlist(twice) == once


class TestTrackOnlySetters:
    """Test set_creator and set_location."""

    def test_creator_outside_track(self, ctx):
        """set_creator with nothing open fails."""
        with pytest.raises(CreatorOutsideTrackError, match="Creator outside track"):
            ctx.set_creator("A-ha")

    def test_creator_in_playlist_outside_track(self, ctx):
        """set_creator fails even with a playlist open."""
        with pytest.raises(CreatorOutsideTrackError):
            ctx.build_playlist(lambda: ctx.set_creator("A-ha"))

    def test_location_outside_track(self, ctx):
        """set_location with nothing open fails."""
        with pytest.raises(LocationOutsideTrackError, match="Location outside track"):
            ctx.set_location("/music/01.mp3")

    def test_location_in_playlist_outside_track(self, ctx):
        """set_location fails even with a playlist open."""
        with pytest.raises(LocationOutsideTrackError):
            ctx.build_playlist(lambda: ctx.set_location("/music/01.mp3"))

    def test_field_errors_share_base(self, ctx):
        """All setter errors are FieldErrors."""
        with pytest.raises(FieldError):
            ctx.set_location("/music/01.mp3")

    def test_last_write_wins(self, ctx):
        """Repeated creator/location calls overwrite."""
        def one():
            ctx.set_creator("Someone")
            ctx.set_creator("Soft Cell")
            ctx.set_location("/tmp/a.mp3")
            ctx.set_location("https://example.com/music/02.mp3")

        pl = ctx.build_playlist(lambda: ctx.build_track(one))
        assert pl.tracks[0].creator == "Soft Cell"
        assert pl.tracks[0].location == "https://example.com/music/02.mp3"

    def test_location_accepts_path(self, ctx):
        """Path locations are stored as strings."""
        pl = ctx.build_playlist(lambda: ctx.build_track(lambda: ctx.set_location(Path("/music/01.mp3"))))
        assert pl.tracks[0].location == str(Path("/music/01.mp3"))

    def test_setters_return_none(self, ctx):
        """Setters return nothing."""
        results = []

        def one():
            results.append(ctx.set_title("T"))
            results.append(ctx.set_creator("C"))
            results.append(ctx.set_location("L"))

        ctx.build_playlist(lambda: ctx.build_track(one))
        assert results == [None, None, None]

    def test_location_none_not_stringified(self, ctx):
        """Non-Path values are stored as given."""
        pl = ctx.build_playlist(lambda: ctx.build_track(lambda: ctx.set_location(None)))
        assert pl.tracks[0].location is None

    def test_creator_and_location_same_value_twice(self, ctx):
        """Setting creator/location twice with one value equals setting once."""
        def once():
            ctx.set_creator("A-ha")
            ctx.set_location("https://example.com/music/01.mp3")

        def twice():
            once()
            once()

        single = ctx.build_playlist(lambda: ctx.build_track(once))
        double = ctx.build_playlist(lambda: ctx.build_track(twice))
        assert double.tracks[0] == single.tracks[0]
        assert double == single
