"""
Playbook System.

The coaching engine only needs ``PlaybookProvider``; ``Playbook`` is the
in-memory implementation used by the API, the demo and the tests.

Example usage:
    from courtside.core.playbook import Playbook
    from courtside.core.models import SetPlay
    from courtside.core.enums import PlaySituation, PlayType

    playbook = Playbook(team_id="BOS")
    playbook.add_play(SetPlay("ato_1", "Floppy Curl", PlayType.FLOPPY,
                              situation=PlaySituation.AFTER_TIMEOUT))
    playbook.get_best_play_for_situation(PlaySituation.AFTER_TIMEOUT)
"""

from courtside.core.playbook.playbook import (
    FAMILIARITY_FOR_GAME_READY,
    FAMILIARITY_TO_MASTER,
    Playbook,
    determine_situation,
)
from courtside.core.playbook.protocol import PlaybookProvider, PlaySelectionState

__all__ = [
    "FAMILIARITY_FOR_GAME_READY",
    "FAMILIARITY_TO_MASTER",
    "Playbook",
    "PlaybookProvider",
    "PlaySelectionState",
    "determine_situation",
]
