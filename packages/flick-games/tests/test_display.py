"""Tests for best-effort fullscreen tracking."""
from __future__ import annotations

from flick_games.display import Fullscreen


class TestFullscreen:
    def test_toggle_tracks_requests(self):
        requests = []
        fs = Fullscreen(requests.append)
        assert fs.toggle() is True
        assert fs.toggle() is False
        assert requests == [True, False]

    def test_failure_leaves_state_unchanged(self):
        def refuse(want):
            raise OSError("no display")

        fs = Fullscreen(refuse)
        assert fs.toggle() is False
        assert fs.active is False

    def test_custom_error_types(self):
        class WindowError(Exception):
            pass

        def refuse(want):
            raise WindowError("denied")

        fs = Fullscreen(refuse, errors=(WindowError,))
        fs.active = True
        assert fs.toggle() is True
