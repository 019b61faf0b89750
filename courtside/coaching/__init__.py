"""Coaching - in-game decision engine.

Core components:
- CoachEngine: Composition root and public decision API
- ResourceLedger: Timeouts, challenge, fouls to give, technicals
- MomentumTracker: Scoring runs and momentum
- MatchupRegistry: Defensive assignments and double teams
- SubstitutionPlanner: Lineup changes and substitution suggestions
- PlayCallDispatcher: Set plays, quick actions, ATO plays
- recommend_end_game: Late-clock recommendations
- DisciplinaryModel: Technical fouls and ejection
"""

from courtside.coaching.decision_logic import TimeoutDecision, should_call_timeout
from courtside.coaching.discipline import DisciplinaryModel
from courtside.coaching.dispatcher import QUICK_ACTION_MAP, PlayCallDispatcher
from courtside.coaching.end_game import EndGameDecision, recommend_end_game
from courtside.coaching.engine import CoachEngine, ConfigurationError
from courtside.coaching.ledger import ResourceLedger
from courtside.coaching.matchups import MatchupRegistry
from courtside.coaching.momentum import MomentumTracker
from courtside.coaching.substitutions import (
    SubstitutionPlanner,
    foul_trouble_limit,
    sort_by_urgency,
)
from courtside.coaching.tactics import (
    DEFENSE_MAP,
    OFFENSE_MAP,
    PACE_MAP,
    apply_team_strategy,
)

__all__ = [
    # Engine
    "CoachEngine",
    "ConfigurationError",
    # Resources
    "ResourceLedger",
    "MomentumTracker",
    "MatchupRegistry",
    # Rotation
    "SubstitutionPlanner",
    "foul_trouble_limit",
    "sort_by_urgency",
    # Tactics
    "apply_team_strategy",
    "PACE_MAP",
    "OFFENSE_MAP",
    "DEFENSE_MAP",
    # Play calling
    "PlayCallDispatcher",
    "QUICK_ACTION_MAP",
    # Decisions
    "EndGameDecision",
    "recommend_end_game",
    "TimeoutDecision",
    "should_call_timeout",
    "DisciplinaryModel",
]
