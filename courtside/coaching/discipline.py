"""Arguing with officials: technical fouls and ejections."""

import logging
import random
from dataclasses import dataclass

from courtside.coaching.ledger import ResourceLedger
from courtside.core.models.results import ReasonCode, TechnicalResult, failure

logger = logging.getLogger(__name__)

# Chance the officials T up the coach
FIRST_TECHNICAL_CHANCE = 0.30
REPEAT_TECHNICAL_CHANCE = 0.60

# Chance a (non-ejecting) technical fires the team up
RALLY_CHANCE = 0.60

EJECTION_MORALE = -10
RALLY_MORALE = 8
NO_RALLY_MORALE = -3
MADE_POINT_MORALE = 3


def _clamp_morale(value: int) -> int:
    return max(0, min(100, value))


@dataclass
class DisciplinaryModel:
    """
    Resolves a coach arguing a call.

    State (technical count, ejection) lives on the ``ResourceLedger`` so it
    is persisted with the rest of the game's resources. Ejection is final
    for the game.
    """

    ledger: ResourceLedger

    @property
    def coach_ejected(self) -> bool:
        return self.ledger.coach_ejected

    def argue_call(self, team_morale: int, rng: random.Random) -> TechnicalResult:
        """
        Argue a call with the officials.

        Args:
            team_morale: Team morale before the argument (0-100)
            rng: Random source for the technical and rally draws

        Returns:
            TechnicalResult with the morale swing
        """
        if self.ledger.coach_ejected:
            return failure(
                TechnicalResult,
                ReasonCode.ALREADY_EJECTED,
                "Coach already ejected!",
                was_ejected=True,
                resulting_morale=_clamp_morale(team_morale),
            )

        if self.ledger.technical_fouls > 0:
            tech_chance = REPEAT_TECHNICAL_CHANCE
        else:
            tech_chance = FIRST_TECHNICAL_CHANCE

        if rng.random() >= tech_chance:
            return TechnicalResult(
                morale_change=MADE_POINT_MORALE,
                resulting_morale=_clamp_morale(team_morale + MADE_POINT_MORALE),
                message="Coach makes his point. Team appreciates the fire.",
            )

        if self.ledger.add_technical():
            logger.info("Coach ejected after %d technicals", self.ledger.technical_fouls)
            return TechnicalResult(
                got_technical=True,
                was_ejected=True,
                morale_change=EJECTION_MORALE,
                resulting_morale=_clamp_morale(team_morale + EJECTION_MORALE),
                message="Coach ejected! Team demoralized.",
            )

        logger.info("Technical foul on the coach")
        rallied = rng.random() < RALLY_CHANCE
        change = RALLY_MORALE if rallied else NO_RALLY_MORALE
        return TechnicalResult(
            got_technical=True,
            morale_change=change,
            resulting_morale=_clamp_morale(team_morale + change),
            message="Coach fired up! Team rallied!" if rallied else "Technical foul. No rally effect.",
        )
