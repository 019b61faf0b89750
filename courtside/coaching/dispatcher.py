"""Play calling: set plays, quick actions and after-timeout plays."""

import logging
from typing import Callable, Optional

from courtside.core.enums import PlaySituation, PlayType, QuickActionType
from courtside.core.models.play import PlayCall, SetPlay
from courtside.core.models.results import PlayLookupResult, ReasonCode, failure
from courtside.core.playbook.protocol import PlaybookProvider, PlaySelectionState

logger = logging.getLogger(__name__)

QUICK_ACTION_MAP = {
    QuickActionType.ISOLATION: PlayType.ISOLATION,
    QuickActionType.PICK_AND_ROLL: PlayType.PICK_AND_ROLL,
    QuickActionType.POST_UP: PlayType.POST_UP,
    QuickActionType.SHOOTER_ACTION: PlayType.SPOT_UP_3,
    QuickActionType.TRANSITION: PlayType.TRANSITION_PUSH,
    QuickActionType.SLOW_DOWN: PlayType.MOTION_OFFENSE,
}

# Actions offered on the play-call menu
AVAILABLE_PLAYS = [
    PlayType.PICK_AND_ROLL,
    PlayType.PICK_AND_POP,
    PlayType.ISOLATION,
    PlayType.POST_UP,
    PlayType.SPOT_UP_3,
    PlayType.TRANSITION_PUSH,
    PlayType.MOTION_OFFENSE,
    PlayType.HANDOFF,
    PlayType.BACKDOOR_CUT,
    PlayType.LOB_PLAY,
    PlayType.ATO_SPECIAL,
    PlayType.SPAIN_PNR,
    PlayType.HORNS_ACTION,
    PlayType.FLEX_CUT,
    PlayType.FLOPPY,
]

PlayCalledHook = Callable[[SetPlay], None]


class PlayCallDispatcher:
    """
    Turns play requests into play calls.

    The playbook is optional; without one, set-play lookups fail with
    ``NO_PLAYBOOK`` and recommendations are empty, while quick actions and
    generic calls still work. ``on_play_called`` is invoked whenever a set
    play is resolved from the playbook.
    """

    def __init__(
        self,
        playbook: Optional[PlaybookProvider] = None,
        on_play_called: Optional[PlayCalledHook] = None,
    ) -> None:
        self.playbook = playbook
        self.on_play_called = on_play_called

    def _play_called(self, play: SetPlay) -> None:
        logger.info("Called play: %s", play.name)
        if self.on_play_called is not None:
            self.on_play_called(play)

    def call_set_play(self, play_id: str) -> PlayLookupResult:
        """Call a set play by id."""
        if self.playbook is None:
            logger.warning("No playbook loaded")
            return failure(PlayLookupResult, ReasonCode.NO_PLAYBOOK, "No playbook loaded")

        play = self.playbook.get_play(play_id)
        if play is None:
            logger.warning("Play %s not found", play_id)
            return failure(PlayLookupResult, ReasonCode.UNKNOWN_PLAY, f"Play {play_id} not found")

        self._play_called(play)
        return PlayLookupResult(play=play, message=f"Called {play.name}")

    def call_quick_action(
        self,
        action: QuickActionType,
        primary_player: Optional[str] = None,
        game_clock: float = 0.0,
    ) -> PlayCall:
        """Expand a quick action into a full play call."""
        play_type = QUICK_ACTION_MAP.get(action, PlayType.MOTION_OFFENSE)
        return PlayCall(
            play_type=play_type,
            primary_player_id=primary_player,
            timestamp=game_clock,
        )

    def call_play(
        self,
        play_type: PlayType,
        primary_player: Optional[str] = None,
        secondary_player: Optional[str] = None,
        game_clock: float = 0.0,
    ) -> PlayCall:
        return PlayCall(
            play_type=play_type,
            primary_player_id=primary_player,
            secondary_player_id=secondary_player,
            timestamp=game_clock,
        )

    def call_ato_play(
        self,
        primary_player: Optional[str] = None,
        game_clock: float = 0.0,
    ) -> PlayCall:
        """
        Call a play out of a timeout.

        Uses the playbook's after-timeout play when there is one; the call
        is returned either way.
        """
        play_id = None
        if self.playbook is not None:
            ato_play = self.playbook.get_best_play_for_situation(PlaySituation.AFTER_TIMEOUT)
            if ato_play is not None:
                play_id = ato_play.play_id
                self._play_called(ato_play)

        return PlayCall(
            play_type=PlayType.ATO_SPECIAL,
            primary_player_id=primary_player,
            is_ato=True,
            timestamp=game_clock,
            play_id=play_id,
        )

    def get_recommended_plays(self, state: PlaySelectionState) -> list[SetPlay]:
        if self.playbook is None:
            return []
        return self.playbook.get_recommended_plays(state)

    def get_available_plays(self) -> list[PlayType]:
        return list(AVAILABLE_PLAYS)
