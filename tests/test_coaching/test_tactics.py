"""Tests for deriving tactics from team strategy."""

import pytest

from courtside.coaching.tactics import (
    DEFENSE_MAP,
    OFFENSE_MAP,
    PACE_MAP,
    apply_team_strategy,
)
from courtside.core.enums import (
    DefensiveScheme,
    GamePace,
    IntensityLevel,
    OffensiveScheme,
    PnRCoverage,
)
from courtside.core.models.strategy import (
    DefensiveSchemeType,
    OffensiveSystemType,
    PacePreference,
    TeamStrategy,
)
from courtside.core.models.tactics import TacticalState


class TestMappingTables:
    """Every strategy value has a tactic."""

    def test_pace_map_is_total(self):
        assert set(PACE_MAP) == set(PacePreference)

    def test_offense_map_is_total(self):
        assert set(OFFENSE_MAP) == set(OffensiveSystemType)

    def test_defense_map_is_total(self):
        assert set(DEFENSE_MAP) == set(DefensiveSchemeType)

    @pytest.mark.parametrize("system,expected", [
        (OffensiveSystemType.FLEX_OFFENSE, OffensiveScheme.MOTION),
        (OffensiveSystemType.HORNS_SET, OffensiveScheme.PICK_AND_ROLL),
        (OffensiveSystemType.FIVE_OUT, OffensiveScheme.FIVE_OUT),
    ])
    def test_offense_aliases(self, system, expected):
        assert OFFENSE_MAP[system] == expected

    @pytest.mark.parametrize("scheme", [
        DefensiveSchemeType.MAN_TO_MAN_STANDARD,
        DefensiveSchemeType.MAN_TO_MAN_AGGRESSIVE,
        DefensiveSchemeType.MAN_TO_MAN_CONSERVATIVE,
    ])
    def test_man_variants_map_to_man(self, scheme):
        assert DEFENSE_MAP[scheme] == DefensiveScheme.MAN_TO_MAN


class TestApplyTeamStrategy:

    def test_applies_all_three(self, strategy):
        tactics = apply_team_strategy(strategy)

        assert tactics.pace == GamePace.PUSH
        assert tactics.offense == OffensiveScheme.PICK_AND_ROLL
        assert tactics.defense == DefensiveScheme.SWITCH_ALL

    def test_missing_preferences_fall_back(self):
        tactics = apply_team_strategy(TeamStrategy(None, None, None))

        assert tactics.pace == GamePace.NORMAL
        assert tactics.offense == OffensiveScheme.MOTION
        assert tactics.defense == DefensiveScheme.MAN_TO_MAN

    def test_other_fields_carried_over(self, strategy):
        current = TacticalState(
            intensity=IntensityLevel.AGGRESSIVE,
            pnr_coverage=PnRCoverage.BLITZ,
            double_team_target="star",
        )

        tactics = apply_team_strategy(strategy, current)

        assert tactics.intensity == IntensityLevel.AGGRESSIVE
        assert tactics.pnr_coverage == PnRCoverage.BLITZ
        assert tactics.double_team_target == "star"

    def test_input_not_modified(self, strategy):
        current = TacticalState()
        apply_team_strategy(strategy, current)
        assert current == TacticalState()

    def test_idempotent(self, strategy):
        once = apply_team_strategy(strategy)
        twice = apply_team_strategy(strategy, once)
        assert once == twice
