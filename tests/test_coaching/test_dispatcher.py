"""Tests for play calling."""

import pytest

from courtside.coaching.dispatcher import QUICK_ACTION_MAP, PlayCallDispatcher
from courtside.core.enums import PlayType, QuickActionType
from courtside.core.models.results import ErrorKind, ReasonCode
from courtside.core.playbook import Playbook, PlaySelectionState


@pytest.fixture
def called():
    """Collects plays passed to the play-called hook."""
    return []


@pytest.fixture
def dispatcher(playbook, called) -> PlayCallDispatcher:
    return PlayCallDispatcher(playbook, on_play_called=called.append)


class TestSetPlays:

    def test_call_known_play(self, dispatcher, called):
        result = dispatcher.call_set_play("horns_flare")

        assert result.success
        assert result.play.name == "Horns Flare"
        assert [p.play_id for p in called] == ["horns_flare"]

    def test_unknown_play(self, dispatcher, called):
        result = dispatcher.call_set_play("nope")

        assert not result.success
        assert result.code == ReasonCode.UNKNOWN_PLAY
        assert result.error_kind == ErrorKind.UNKNOWN_IDENTIFIER
        assert result.play is None
        assert called == []

    def test_no_playbook(self, called):
        dispatcher = PlayCallDispatcher(on_play_called=called.append)

        result = dispatcher.call_set_play("horns_flare")

        assert not result.success
        assert result.code == ReasonCode.NO_PLAYBOOK
        assert result.error_kind == ErrorKind.MISSING_COLLABORATOR
        assert called == []


class TestQuickActions:

    def test_every_quick_action_mapped(self):
        assert set(QUICK_ACTION_MAP) == set(QuickActionType)

    @pytest.mark.parametrize("action,expected", [
        (QuickActionType.ISOLATION, PlayType.ISOLATION),
        (QuickActionType.PICK_AND_ROLL, PlayType.PICK_AND_ROLL),
        (QuickActionType.POST_UP, PlayType.POST_UP),
        (QuickActionType.SHOOTER_ACTION, PlayType.SPOT_UP_3),
        (QuickActionType.TRANSITION, PlayType.TRANSITION_PUSH),
        (QuickActionType.SLOW_DOWN, PlayType.MOTION_OFFENSE),
    ])
    def test_quick_action_expansion(self, action, expected):
        call = PlayCallDispatcher().call_quick_action(action, "A", game_clock=312.0)

        assert call.play_type == expected
        assert call.primary_player_id == "A"
        assert call.timestamp == 312.0
        assert not call.is_ato

    def test_generic_play_call(self):
        call = PlayCallDispatcher().call_play(PlayType.HANDOFF, "A", "E", game_clock=44.0)

        assert call.play_type == PlayType.HANDOFF
        assert call.secondary_player_id == "E"

    def test_available_plays(self):
        plays = PlayCallDispatcher().get_available_plays()

        assert len(plays) == 15
        assert PlayType.ATO_SPECIAL in plays


class TestATOPlays:

    def test_ato_uses_playbook_play(self, dispatcher, called):
        call = dispatcher.call_ato_play("A", game_clock=30.0)

        assert call.is_ato
        assert call.play_type == PlayType.ATO_SPECIAL
        assert call.play_id == "box_lob"
        assert [p.play_id for p in called] == ["box_lob"]

    def test_ato_without_playbook_still_returns_call(self):
        call = PlayCallDispatcher().call_ato_play("A")

        assert call.is_ato
        assert call.play_id is None

    def test_ato_with_empty_playbook(self, called):
        dispatcher = PlayCallDispatcher(Playbook(), on_play_called=called.append)

        call = dispatcher.call_ato_play()

        assert call.is_ato
        assert called == []


class TestRecommendations:

    def test_no_playbook_no_recommendations(self):
        assert PlayCallDispatcher().get_recommended_plays(PlaySelectionState()) == []

    def test_after_timeout_recommendations(self, dispatcher):
        state = PlaySelectionState(quarter=3, clock_seconds=300.0, just_called_timeout=True)

        plays = dispatcher.get_recommended_plays(state)

        assert [p.play_id for p in plays] == ["horns_flare", "box_lob", "floppy", "spain_pnr"]
