"""Defensive assignments and double-team triggers."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from courtside.core.enums import DoubleTeamTrigger, MatchupPriority
from courtside.core.models.matchup import Matchup
from courtside.core.models.tactics import TacticalState

logger = logging.getLogger(__name__)


@dataclass
class MatchupRegistry:
    """
    Who guards whom, and whom to double.

    A defender has at most one live assignment. Several defenders may be
    put on the same opponent; that is left to the coach. Several double-team
    triggers may be registered, but only the most recently set opponent is
    the current ``double_team_target`` on the tactical state.
    """

    matchups: list[Matchup] = field(default_factory=list)
    double_team_triggers: dict[str, DoubleTeamTrigger] = field(default_factory=dict)

    def set_defensive_matchup(
        self,
        defender_id: str,
        opponent_id: str,
        priority: MatchupPriority = MatchupPriority.NORMAL,
    ) -> Matchup:
        """Assign a defender, replacing any assignment he already had."""
        self.matchups = [m for m in self.matchups if m.defender_id != defender_id]
        matchup = Matchup(defender_id=defender_id, opponent_id=opponent_id, priority=priority)
        self.matchups.append(matchup)
        logger.debug("Matchup: %s guards %s (%s)", defender_id, opponent_id, priority.value)
        return matchup

    def set_double_team(
        self,
        opponent_id: str,
        trigger: DoubleTeamTrigger,
        tactics: TacticalState,
    ) -> None:
        self.double_team_triggers[opponent_id] = trigger
        tactics.double_team_target = opponent_id
        logger.debug("Double team %s on %s", opponent_id, trigger.value)

    def clear_double_team(self, opponent_id: str, tactics: TacticalState) -> None:
        self.double_team_triggers.pop(opponent_id, None)
        if tactics.double_team_target == opponent_id:
            tactics.double_team_target = None

    def get_defender_for(self, opponent_id: str) -> Optional[str]:
        """First defender assigned to an opponent, if any."""
        for matchup in self.matchups:
            if matchup.opponent_id == opponent_id:
                return matchup.defender_id
        return None

    def get_all_matchups(self) -> list[Matchup]:
        return list(self.matchups)

    def get_double_team_triggers(self) -> dict[str, DoubleTeamTrigger]:
        return dict(self.double_team_triggers)

    def to_dict(self) -> dict:
        return {
            "matchups": [m.to_dict() for m in self.matchups],
            "double_team_triggers": {
                opponent_id: trigger.value
                for opponent_id, trigger in self.double_team_triggers.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MatchupRegistry":
        return cls(
            matchups=[Matchup.from_dict(item) for item in data.get("matchups", [])],
            double_team_triggers={
                opponent_id: DoubleTeamTrigger(value)
                for opponent_id, value in data.get("double_team_triggers", {}).items()
            },
        )
