"""
Unit Tests for Media Implementers.

Test Aspects Covered:
    ✅ Business Logic: Playback text per media type
    ✅ Error Handling: Non-playable values rejected
"""

from __future__ import annotations

import pytest

from capability_registry.dispatch import make_play
from capability_registry.domain import Audio, Fish, Video
from capability_registry.errors import CapabilityError
from capability_registry.interfaces import Playable


class TestMedia:
    """Test cases for Video and Audio."""

    def test_video_plays(self, capsys) -> None:
        Video().play()

        assert capsys.readouterr().out == "*The Video is playing*\n"

    def test_audio_plays(self, capsys) -> None:
        Audio().play()

        assert capsys.readouterr().out == "*The Audio is playing*\n"

    def test_both_are_playable(self, playlist) -> None:
        assert all(isinstance(item, Playable) for item in playlist)

    def test_make_play_dispatches_in_order(self, playlist, capsys) -> None:
        """
        SCENARIO: Player iterates a [Video, Audio] playlist
        EXPECTED: Each item announces itself in playlist order
        """
        for item in playlist:
            make_play(item)

        assert capsys.readouterr().out.splitlines() == [
            "*The Video is playing*",
            "*The Audio is playing*",
        ]

    def test_make_play_rejects_animal(self) -> None:
        with pytest.raises(CapabilityError):
            make_play(Fish())  # type: ignore[arg-type]
