"""Per-game consumable resources: timeouts, challenge, fouls to give, technicals."""

import logging
import random
from dataclasses import dataclass

from courtside.core.enums import ChallengeType, TimeoutReason
from courtside.core.models.results import (
    ChallengeResult,
    FoulResult,
    ReasonCode,
    TimeoutResult,
    failure,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUTS = 7
DEFAULT_FOULS_TO_GIVE = 4
DEFAULT_CHALLENGE_SUCCESS = 0.4
EJECTION_TECHNICALS = 2


@dataclass
class ResourceLedger:
    """
    Tracks what the coach has left to spend this game.

    Timeouts only ever go down. The challenge is used at most once. Fouls
    to give reset every quarter via ``advance_quarter``. Technical fouls and
    the ejection flag are written by the disciplinary model.
    """

    timeouts_remaining: int = DEFAULT_TIMEOUTS
    timeouts_used_first_half: int = 0
    technical_fouls: int = 0
    coach_ejected: bool = False
    challenge_used: bool = False
    fouls_to_give: int = DEFAULT_FOULS_TO_GIVE
    fouls_to_give_per_quarter: int = DEFAULT_FOULS_TO_GIVE

    @classmethod
    def new_game(
        cls,
        timeouts: int = DEFAULT_TIMEOUTS,
        fouls_to_give: int = DEFAULT_FOULS_TO_GIVE,
    ) -> "ResourceLedger":
        """Ledger as it stands at tip-off."""
        return cls(
            timeouts_remaining=timeouts,
            fouls_to_give=fouls_to_give,
            fouls_to_give_per_quarter=fouls_to_give,
        )

    # ------------------------------------------------------------------
    # Timeouts
    # ------------------------------------------------------------------

    def call_timeout(self, reason: TimeoutReason, quarter: int) -> TimeoutResult:
        """
        Spend a timeout.

        Args:
            reason: Why the timeout is being called
            quarter: Current quarter (timeouts in 1-2 count toward the first half)
        """
        if self.timeouts_remaining <= 0:
            return failure(
                TimeoutResult,
                ReasonCode.NO_TIMEOUTS_LEFT,
                "No timeouts remaining",
                timeouts_left=0,
                reason=reason.value,
            )

        if quarter <= 2:
            self.timeouts_used_first_half += 1
        self.timeouts_remaining -= 1

        logger.info("Timeout called (%s). %d remaining.", reason.value, self.timeouts_remaining)
        return TimeoutResult(
            timeouts_left=self.timeouts_remaining,
            reason=reason.value,
            message=f"Timeout: {reason.value}",
        )

    # ------------------------------------------------------------------
    # Coach's challenge
    # ------------------------------------------------------------------

    def use_challenge(
        self,
        challenge_type: ChallengeType,
        success_probability: float,
        rng: random.Random,
    ) -> ChallengeResult:
        """
        Challenge a call.

        A lost challenge costs a timeout, so one must be available to risk.
        The challenge is consumed whether it is won or lost.
        """
        if self.challenge_used:
            return failure(ChallengeResult, ReasonCode.ALREADY_USED, "Challenge already used")

        if self.timeouts_remaining <= 0:
            return failure(ChallengeResult, ReasonCode.NO_TIMEOUTS_AVAILABLE, "No timeouts to risk")

        self.challenge_used = True
        won = rng.random() < success_probability
        if not won:
            self.timeouts_remaining -= 1

        logger.info("Challenge %s (%s)", "WON" if won else "LOST", challenge_type.value)
        return ChallengeResult(
            challenge_won=won,
            timeout_charged=not won,
            message="Challenge successful!" if won else "Challenge unsuccessful. Timeout charged.",
        )

    # ------------------------------------------------------------------
    # Fouls to give
    # ------------------------------------------------------------------

    def intentional_foul(self, player_id: str | None = None) -> FoulResult:
        """Commit a foul on purpose, using a foul to give when one is left."""
        if self.fouls_to_give <= 0:
            return FoulResult(
                free_throws=True,
                fouls_to_give_left=0,
                player_id=player_id,
                message="Foul committed - opponent shoots free throws",
            )

        self.fouls_to_give -= 1
        return FoulResult(
            free_throws=False,
            fouls_to_give_left=self.fouls_to_give,
            player_id=player_id,
            message=f"Foul to give used. {self.fouls_to_give} remaining",
        )

    def advance_quarter(self) -> None:
        """New quarter: fouls to give are replenished."""
        self.fouls_to_give = self.fouls_to_give_per_quarter

    # ------------------------------------------------------------------
    # Technicals
    # ------------------------------------------------------------------

    def add_technical(self) -> bool:
        """
        Record a technical foul on the coach.

        Returns True if this technical ejects the coach.
        """
        self.technical_fouls += 1
        if self.technical_fouls >= EJECTION_TECHNICALS:
            self.coach_ejected = True
        return self.coach_ejected

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "timeouts_remaining": self.timeouts_remaining,
            "timeouts_used_first_half": self.timeouts_used_first_half,
            "technical_fouls": self.technical_fouls,
            "coach_ejected": self.coach_ejected,
            "challenge_used": self.challenge_used,
            "fouls_to_give": self.fouls_to_give,
            "fouls_to_give_per_quarter": self.fouls_to_give_per_quarter,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        timeouts: int = DEFAULT_TIMEOUTS,
        fouls_to_give: int = DEFAULT_FOULS_TO_GIVE,
    ) -> "ResourceLedger":
        """
        Create from dictionary.

        ``timeouts`` and ``fouls_to_give`` fill in keys missing from ``data``.
        """
        return cls(
            timeouts_remaining=data.get("timeouts_remaining", timeouts),
            timeouts_used_first_half=data.get("timeouts_used_first_half", 0),
            technical_fouls=data.get("technical_fouls", 0),
            coach_ejected=data.get("coach_ejected", False),
            challenge_used=data.get("challenge_used", False),
            fouls_to_give=data.get("fouls_to_give", fouls_to_give),
            fouls_to_give_per_quarter=data.get("fouls_to_give_per_quarter", fouls_to_give),
        )
