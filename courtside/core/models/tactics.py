"""Active tactical selections for one team."""

from dataclasses import dataclass
from typing import Optional

from courtside.core.enums import (
    DefensiveScheme,
    GamePace,
    IntensityLevel,
    OffensiveScheme,
    PnRCoverage,
    TransitionDefense,
)


@dataclass
class TacticalState:
    """
    The scheme currently selected in each tactical category.

    Every combination of values is legal; no cross-field validation is
    performed. ``double_team_target`` is the opponent id currently being
    doubled, if any.
    """

    offense: OffensiveScheme = OffensiveScheme.MOTION
    defense: DefensiveScheme = DefensiveScheme.MAN_TO_MAN
    pace: GamePace = GamePace.NORMAL
    intensity: IntensityLevel = IntensityLevel.NORMAL
    pnr_coverage: PnRCoverage = PnRCoverage.DROP
    transition_defense: TransitionDefense = TransitionDefense.NORMAL
    double_team_target: Optional[str] = None
    press_enabled: bool = False
    intentional_foul_enabled: bool = False

    def copy(self) -> "TacticalState":
        """Create a copy of this state."""
        return TacticalState(
            offense=self.offense,
            defense=self.defense,
            pace=self.pace,
            intensity=self.intensity,
            pnr_coverage=self.pnr_coverage,
            transition_defense=self.transition_defense,
            double_team_target=self.double_team_target,
            press_enabled=self.press_enabled,
            intentional_foul_enabled=self.intentional_foul_enabled,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "offense": self.offense.value,
            "defense": self.defense.value,
            "pace": self.pace.value,
            "intensity": self.intensity.value,
            "pnr_coverage": self.pnr_coverage.value,
            "transition_defense": self.transition_defense.value,
            "double_team_target": self.double_team_target,
            "press_enabled": self.press_enabled,
            "intentional_foul_enabled": self.intentional_foul_enabled,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TacticalState":
        """Create from dictionary."""
        return cls(
            offense=OffensiveScheme(data.get("offense", OffensiveScheme.MOTION.value)),
            defense=DefensiveScheme(data.get("defense", DefensiveScheme.MAN_TO_MAN.value)),
            pace=GamePace(data.get("pace", GamePace.NORMAL.value)),
            intensity=IntensityLevel(data.get("intensity", IntensityLevel.NORMAL.value)),
            pnr_coverage=PnRCoverage(data.get("pnr_coverage", PnRCoverage.DROP.value)),
            transition_defense=TransitionDefense(
                data.get("transition_defense", TransitionDefense.NORMAL.value)
            ),
            double_team_target=data.get("double_team_target"),
            press_enabled=data.get("press_enabled", False),
            intentional_foul_enabled=data.get("intentional_foul_enabled", False),
        )
