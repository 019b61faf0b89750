"""Substitution planning and lineup changes."""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from courtside.core.enums import SubstitutionUrgency
from courtside.core.models.results import ReasonCode, SubstitutionResult, failure
from courtside.core.models.substitution import SubstitutionPlan, SubstitutionSuggestion

logger = logging.getLogger(__name__)

# Personal fouls that put a player in foul trouble
FIRST_HALF_FOUL_TROUBLE = 2
SECOND_HALF_FOUL_TROUBLE = 4


def foul_trouble_limit(quarter: int) -> int:
    """Fouls at which a player should sit, by quarter."""
    return FIRST_HALF_FOUL_TROUBLE if quarter <= 2 else SECOND_HALF_FOUL_TROUBLE


def sort_by_urgency(suggestions: Sequence[SubstitutionSuggestion]) -> list[SubstitutionSuggestion]:
    """Most urgent first (IMMEDIATE, HIGH, MEDIUM, LOW); ties keep their order."""
    return sorted(suggestions, key=lambda s: s.urgency.rank, reverse=True)


@dataclass
class SubstitutionPlanner:
    """
    Applies lineup changes and suggests who should come out.

    Lineups passed in are never modified; results carry a new list.
    """

    plan: SubstitutionPlan = field(default_factory=SubstitutionPlan)

    def substitute(
        self,
        player_out: str,
        player_in: str,
        lineup: Sequence[str],
    ) -> SubstitutionResult:
        """Swap one player; the incoming player goes to the end of the lineup."""
        if player_out not in lineup:
            return failure(
                SubstitutionResult,
                ReasonCode.PLAYER_NOT_IN_LINEUP,
                f"{player_out} not in lineup",
                new_lineup=list(lineup),
            )

        new_lineup = list(lineup)
        new_lineup.remove(player_out)
        new_lineup.append(player_in)

        logger.info("Substitution: %s out, %s in", player_out, player_in)
        return SubstitutionResult(
            new_lineup=new_lineup,
            players_out=[player_out],
            players_in=[player_in],
            message=f"{player_in} in for {player_out}",
        )

    def substitute_multiple(
        self,
        players_out: Sequence[str],
        players_in: Sequence[str],
        lineup: Sequence[str],
    ) -> SubstitutionResult:
        """
        Make several substitutions at once, all or nothing.

        Pairs are applied in order against a working copy, so a player
        brought in by an earlier pair can be taken out by a later one.
        """
        if len(players_out) != len(players_in):
            return failure(
                SubstitutionResult,
                ReasonCode.SUBSTITUTION_COUNT_MISMATCH,
                "Unequal substitution counts",
                new_lineup=list(lineup),
            )

        working = list(lineup)
        for player_out, player_in in zip(players_out, players_in):
            if player_out not in working:
                return failure(
                    SubstitutionResult,
                    ReasonCode.PLAYER_NOT_IN_LINEUP,
                    f"{player_out} not in lineup",
                    new_lineup=list(lineup),
                )
            working.remove(player_out)
            working.append(player_in)

        logger.info("Substitution: %s out, %s in", ", ".join(players_out), ", ".join(players_in))
        return SubstitutionResult(
            new_lineup=working,
            players_out=list(players_out),
            players_in=list(players_in),
            message=f"{len(players_out)} substitutions",
        )

    def get_substitution_suggestions(
        self,
        lineup: Sequence[str],
        energy: Mapping[str, float],
        fouls: Mapping[str, int],
        quarter: int,
    ) -> list[SubstitutionSuggestion]:
        """
        Suggest substitutions for tired players and players in foul trouble.

        A player can get one suggestion for each condition. Results are
        ordered most urgent first; ties keep lineup order.
        """
        suggestions = []
        max_fouls = foul_trouble_limit(quarter)

        for player_id in lineup:
            player_energy = energy.get(player_id)
            if player_energy is not None and player_energy < self.plan.fatigue_threshold:
                suggestions.append(SubstitutionSuggestion(
                    player_out=player_id,
                    reason=f"Low energy ({player_energy:.0f}%)",
                    urgency=SubstitutionUrgency.HIGH,
                ))

            player_fouls = fouls.get(player_id, 0)
            if player_fouls >= max_fouls:
                suggestions.append(SubstitutionSuggestion(
                    player_out=player_id,
                    reason=f"Foul trouble ({player_fouls} fouls)",
                    urgency=SubstitutionUrgency.MEDIUM,
                ))

        return sort_by_urgency(suggestions)

    def should_auto_sub(self, current_energy: float) -> bool:
        return current_energy < self.plan.fatigue_threshold

    def set_fatigue_threshold(self, threshold: int) -> None:
        self.plan.set_fatigue_threshold(threshold)

    def set_rotation_depth(self, depth: int) -> None:
        self.plan.set_rotation_depth(depth)

    def set_rotation(self, target_minutes: Mapping[str, int]) -> None:
        self.plan.target_minutes = dict(target_minutes)

    def set_closing_lineup(self, lineup: Sequence[str]) -> None:
        self.plan.closing_lineup = list(lineup)
