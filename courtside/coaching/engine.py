"""Coach Engine - one team's in-game coaching brain.

Owns the tactical state, resources, momentum, matchups, rotation and play
calling for a single team in a single game. The match simulator pushes game
state in with ``update_game_state``; the UI or AI calls the decision methods;
results come back as return values and as events on the ``EventBus``.

Example:
    engine = CoachEngine(strategy=TeamStrategy(), playbook=playbook)
    engine.update_game_state(4, 18.0, 18.0, 100, 100, True)
    engine.get_end_game_recommendation().action  # HOLD_FOR_LAST_SHOT
"""

from __future__ import annotations

import logging
import random
from typing import Mapping, Optional, Sequence

from courtside.coaching.decision_logic import TimeoutDecision, should_call_timeout
from courtside.coaching.discipline import DisciplinaryModel
from courtside.coaching.dispatcher import PlayCallDispatcher
from courtside.coaching.end_game import EndGameDecision, recommend_end_game
from courtside.coaching.ledger import ResourceLedger
from courtside.coaching.matchups import MatchupRegistry
from courtside.coaching.momentum import MomentumTracker
from courtside.coaching.substitutions import SubstitutionPlanner
from courtside.coaching.tactics import apply_team_strategy
from courtside.config import EngineConfig, get_config
from courtside.core.enums import (
    ChallengeType,
    DefensiveScheme,
    DoubleTeamTrigger,
    GamePace,
    IntensityLevel,
    MatchupPriority,
    OffensiveScheme,
    PlayType,
    PnRCoverage,
    QuickActionType,
    TimeoutReason,
    TransitionDefense,
)
from courtside.core.models.matchup import Matchup
from courtside.core.models.play import PlayCall, SetPlay
from courtside.core.models.results import (
    ChallengeResult,
    FoulResult,
    PlayLookupResult,
    SubstitutionResult,
    TechnicalResult,
    TimeoutResult,
)
from courtside.core.models.situation import GameSituation
from courtside.core.models.strategy import TeamStrategy
from courtside.core.models.substitution import SubstitutionPlan, SubstitutionSuggestion
from courtside.core.models.tactics import TacticalState
from courtside.core.playbook.protocol import PlaybookProvider, PlaySelectionState
from courtside.events import (
    ChallengeResolvedEvent,
    CoachEvent,
    DecisionMadeEvent,
    EventBus,
    PlayCalledEvent,
    SubstitutionEvent,
    TechnicalFoulEvent,
    TimeoutCalledEvent,
)

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when an engine is constructed with unusable collaborators or settings."""


class CoachEngine:
    """
    In-game coaching decisions for one team.

    Single-threaded: each game owns its own engine and nothing is shared
    between engines except the collaborators handed in (strategy, playbook,
    event bus).

    Args:
        strategy: Team strategy the default tactics are derived from
        playbook: Playbook used for set plays and recommendations
        event_bus: Bus decisions are published on (a private one if omitted)
        config: Engine configuration (global config if omitted)
        rng: Random source for challenges and technicals
        team_id: Identifier stamped on emitted events
    """

    def __init__(
        self,
        strategy: Optional[TeamStrategy] = None,
        playbook: Optional[PlaybookProvider] = None,
        event_bus: Optional[EventBus] = None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        team_id: Optional[str] = None,
    ) -> None:
        self.config = config if config is not None else get_config()
        errors = self.config.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))
        if event_bus is not None and not isinstance(event_bus, EventBus):
            raise ConfigurationError("event_bus must be an EventBus")
        if playbook is not None and not isinstance(playbook, PlaybookProvider):
            raise ConfigurationError("playbook must implement PlaybookProvider")
        if rng is not None and not callable(getattr(rng, "random", None)):
            raise ConfigurationError("rng must provide random()")

        self.team_id = team_id
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self.rng = rng if rng is not None else self.config.make_rng()
        self._strategy = strategy

        self._situation = GameSituation(
            quarter=1,
            game_clock=self.config.quarter_length_seconds,
            shot_clock=self.config.shot_clock_seconds,
        )
        self._tactics = (
            apply_team_strategy(strategy) if strategy is not None else TacticalState()
        )
        self.ledger = ResourceLedger.new_game(
            timeouts=self.config.timeouts_per_game,
            fouls_to_give=self.config.fouls_to_give_per_quarter,
        )
        self.momentum = MomentumTracker()
        self.matchups = MatchupRegistry()
        self.substitutions = SubstitutionPlanner(SubstitutionPlan(
            fatigue_threshold=self.config.fatigue_threshold,
            rotation_depth=self.config.rotation_depth,
        ))
        self.dispatcher = PlayCallDispatcher(playbook, on_play_called=self._emit_play_called)
        self.discipline = DisciplinaryModel(self.ledger)

        self.current_lineup: list[str] = []
        self.player_fouls: dict[str, int] = {}
        self.just_called_timeout = False

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _context(self) -> dict:
        return {
            "team_id": self.team_id,
            "quarter": self._situation.quarter,
            "game_clock": self._situation.game_clock,
            "team_score": self._situation.team_score,
            "opponent_score": self._situation.opponent_score,
        }

    def _emit(self, event_type: type[CoachEvent], **kwargs) -> None:
        self.event_bus.emit(event_type(**self._context(), **kwargs))

    def _decision(self, label: str) -> None:
        logger.debug("Decision: %s", label)
        self._emit(DecisionMadeEvent, label=label)

    def _emit_play_called(self, play: SetPlay) -> None:
        self._emit(PlayCalledEvent, play=play)

    # ------------------------------------------------------------------
    # Game state
    # ------------------------------------------------------------------

    @property
    def situation(self) -> GameSituation:
        return self._situation

    @property
    def quarter(self) -> int:
        return self._situation.quarter

    @property
    def game_clock(self) -> float:
        return self._situation.game_clock

    @property
    def score_diff(self) -> int:
        return self._situation.score_diff

    @property
    def has_possession(self) -> bool:
        return self._situation.has_possession

    @property
    def is_clutch_time(self) -> bool:
        return self._situation.is_clutch_time

    @property
    def timeouts_remaining(self) -> int:
        return self.ledger.timeouts_remaining

    @property
    def fouls_to_give(self) -> int:
        return self.ledger.fouls_to_give

    @property
    def coach_ejected(self) -> bool:
        return self.ledger.coach_ejected

    def update_game_state(
        self,
        quarter: int,
        game_clock: float,
        shot_clock: float,
        team_score: int,
        opponent_score: int,
        has_possession: bool,
    ) -> GameSituation:
        """Take a game-state push from the simulator."""
        return self.update_situation(GameSituation(
            quarter=quarter,
            game_clock=game_clock,
            shot_clock=shot_clock,
            team_score=team_score,
            opponent_score=opponent_score,
            has_possession=has_possession,
        ))

    def update_situation(self, situation: GameSituation) -> GameSituation:
        """
        Replace the current snapshot.

        A change of quarter replenishes fouls to give. Once the clock has run
        after a timeout, play has resumed and the after-timeout flag clears.
        """
        new_quarter = situation.quarter != self._situation.quarter
        if new_quarter:
            self.ledger.advance_quarter()
            logger.debug("Quarter %d: fouls to give reset", situation.quarter)
        if new_quarter or situation.game_clock != self._situation.game_clock:
            self.just_called_timeout = False
        self._situation = situation
        return situation

    # ------------------------------------------------------------------
    # Strategy & tactics
    # ------------------------------------------------------------------

    @property
    def strategy(self) -> Optional[TeamStrategy]:
        return self._strategy

    @property
    def tactics(self) -> TacticalState:
        """Copy of the current tactical state."""
        return self._tactics.copy()

    def set_team_strategy(self, strategy: TeamStrategy) -> None:
        self._strategy = strategy
        self._tactics = apply_team_strategy(strategy, self._tactics)

    def set_playbook(self, playbook: Optional[PlaybookProvider]) -> None:
        if playbook is not None and not isinstance(playbook, PlaybookProvider):
            raise ConfigurationError("playbook must implement PlaybookProvider")
        self.dispatcher.playbook = playbook

    def set_offense(self, scheme: OffensiveScheme) -> None:
        self._tactics.offense = scheme
        self._decision(f"Offense: {scheme.value}")

    def set_defense(self, scheme: DefensiveScheme) -> None:
        self._tactics.defense = scheme
        self._decision(f"Defense: {scheme.value}")

    def set_pace(self, pace: GamePace) -> None:
        self._tactics.pace = pace
        self._decision(f"Pace: {pace.value}")

    def set_intensity(self, intensity: IntensityLevel) -> None:
        self._tactics.intensity = intensity
        self._decision(f"Intensity: {intensity.value}")

    def set_pnr_coverage(self, coverage: PnRCoverage) -> None:
        self._tactics.pnr_coverage = coverage
        self._decision(f"PnR Coverage: {coverage.value}")

    def set_transition_defense(self, level: TransitionDefense) -> None:
        self._tactics.transition_defense = level
        self._decision(f"Transition Defense: {level.value}")

    def set_press(self, enabled: bool) -> None:
        self._tactics.press_enabled = enabled
        self._decision(f"Press: {'on' if enabled else 'off'}")

    def set_intentional_foul_strategy(self, enabled: bool) -> None:
        self._tactics.intentional_foul_enabled = enabled
        self._decision(f"Intentional Fouling: {'on' if enabled else 'off'}")

    # ------------------------------------------------------------------
    # Matchups
    # ------------------------------------------------------------------

    def set_defensive_matchup(
        self,
        defender_id: str,
        opponent_id: str,
        priority: MatchupPriority = MatchupPriority.NORMAL,
    ) -> Matchup:
        return self.matchups.set_defensive_matchup(defender_id, opponent_id, priority)

    def set_double_team(self, opponent_id: str, trigger: DoubleTeamTrigger) -> None:
        self.matchups.set_double_team(opponent_id, trigger, self._tactics)
        self._decision(f"Double Team: {opponent_id} ({trigger.value})")

    def clear_double_team(self, opponent_id: str) -> None:
        self.matchups.clear_double_team(opponent_id, self._tactics)

    def get_defender_for(self, opponent_id: str) -> Optional[str]:
        return self.matchups.get_defender_for(opponent_id)

    def get_all_matchups(self) -> list[Matchup]:
        return self.matchups.get_all_matchups()

    # ------------------------------------------------------------------
    # Rotation & substitutions
    # ------------------------------------------------------------------

    def set_lineup(self, lineup: Sequence[str]) -> None:
        self.current_lineup = list(lineup)

    def substitute(
        self,
        player_out: str,
        player_in: str,
        lineup: Optional[Sequence[str]] = None,
    ) -> SubstitutionResult:
        """Make a substitution against ``lineup`` (the tracked lineup if omitted)."""
        base = self.current_lineup if lineup is None else lineup
        result = self.substitutions.substitute(player_out, player_in, base)
        if result.success:
            self.current_lineup = list(result.new_lineup)
            self._emit(SubstitutionEvent, result=result)
        return result

    def substitute_multiple(
        self,
        players_out: Sequence[str],
        players_in: Sequence[str],
        lineup: Optional[Sequence[str]] = None,
    ) -> SubstitutionResult:
        base = self.current_lineup if lineup is None else lineup
        result = self.substitutions.substitute_multiple(players_out, players_in, base)
        if result.success:
            self.current_lineup = list(result.new_lineup)
            self._emit(SubstitutionEvent, result=result)
        return result

    def get_substitution_suggestions(
        self,
        energy: Mapping[str, float],
        lineup: Optional[Sequence[str]] = None,
    ) -> list[SubstitutionSuggestion]:
        base = self.current_lineup if lineup is None else lineup
        return self.substitutions.get_substitution_suggestions(
            base, energy, self.player_fouls, self._situation.quarter
        )

    def should_auto_sub(self, current_energy: float) -> bool:
        return self.substitutions.should_auto_sub(current_energy)

    def set_fatigue_threshold(self, threshold: int) -> None:
        self.substitutions.set_fatigue_threshold(threshold)

    def set_rotation_depth(self, depth: int) -> None:
        self.substitutions.set_rotation_depth(depth)

    def set_rotation(self, target_minutes: Mapping[str, int]) -> None:
        self.substitutions.set_rotation(target_minutes)

    def set_closing_lineup(self, lineup: Sequence[str]) -> None:
        self.substitutions.set_closing_lineup(lineup)

    def record_player_foul(self, player_id: str) -> int:
        self.player_fouls[player_id] = self.player_fouls.get(player_id, 0) + 1
        return self.player_fouls[player_id]

    def get_player_fouls(self, player_id: str) -> int:
        return self.player_fouls.get(player_id, 0)

    # ------------------------------------------------------------------
    # Timeouts, scoring runs and momentum
    # ------------------------------------------------------------------

    def call_timeout(self, reason: TimeoutReason) -> TimeoutResult:
        result = self.ledger.call_timeout(reason, self._situation.quarter)
        if result.success:
            self.momentum.clear_opponent_run()
            self.just_called_timeout = True
            self._emit(TimeoutCalledEvent, result=result)
        return result

    def should_call_timeout(self) -> TimeoutDecision:
        return should_call_timeout(
            self._situation,
            opponent_run_points=self.momentum.opponent_run_points,
            timeouts_remaining=self.ledger.timeouts_remaining,
            timeouts_used_first_half=self.ledger.timeouts_used_first_half,
        )

    def record_team_points(self, points: int) -> None:
        self.momentum.record_team_points(points)
        self._situation = self._situation.with_scores(
            self._situation.team_score + max(0, points), self._situation.opponent_score
        )

    def record_opponent_points(self, points: int) -> None:
        self.momentum.record_opponent_points(points)
        self._situation = self._situation.with_scores(
            self._situation.team_score, self._situation.opponent_score + max(0, points)
        )

    def record_defensive_stop(self) -> None:
        self.momentum.record_defensive_stop()

    def reset_run(self) -> None:
        self.momentum.reset_run()

    # ------------------------------------------------------------------
    # Play calls
    # ------------------------------------------------------------------

    def call_set_play(self, play_id: str) -> PlayLookupResult:
        return self.dispatcher.call_set_play(play_id)

    def call_quick_action(
        self,
        action: QuickActionType,
        primary_player: Optional[str] = None,
    ) -> PlayCall:
        return self.dispatcher.call_quick_action(action, primary_player, self._situation.game_clock)

    def call_play(
        self,
        play_type: PlayType,
        primary_player: Optional[str] = None,
        secondary_player: Optional[str] = None,
    ) -> PlayCall:
        return self.dispatcher.call_play(
            play_type, primary_player, secondary_player, self._situation.game_clock
        )

    def call_ato_play(self, primary_player: Optional[str] = None) -> PlayCall:
        return self.dispatcher.call_ato_play(primary_player, self._situation.game_clock)

    def play_selection_state(self) -> PlaySelectionState:
        return PlaySelectionState(
            quarter=self._situation.quarter,
            clock_seconds=self._situation.game_clock,
            score_diff=self._situation.score_diff,
            shot_clock=self._situation.shot_clock,
            just_called_timeout=self.just_called_timeout,
            fouls_to_give=self.ledger.fouls_to_give,
        )

    def get_recommended_plays(self) -> list[SetPlay]:
        return self.dispatcher.get_recommended_plays(self.play_selection_state())

    def get_available_plays(self) -> list[PlayType]:
        return self.dispatcher.get_available_plays()

    # ------------------------------------------------------------------
    # End of game, challenge, technicals
    # ------------------------------------------------------------------

    def get_end_game_recommendation(self) -> EndGameDecision:
        return recommend_end_game(
            self._situation,
            has_possession=self._situation.has_possession,
            fouls_to_give=self.ledger.fouls_to_give,
        )

    def intentional_foul(self, player_id: Optional[str] = None) -> FoulResult:
        return self.ledger.intentional_foul(player_id)

    def use_challenge(
        self,
        challenge_type: ChallengeType,
        success_probability: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> ChallengeResult:
        if success_probability is None:
            success_probability = self.config.challenge_success_probability
        result = self.ledger.use_challenge(
            challenge_type, success_probability, rng if rng is not None else self.rng
        )
        if result.success:
            self._emit(ChallengeResolvedEvent, result=result)
        return result

    def argue_call(self, team_morale: int, rng: Optional[random.Random] = None) -> TechnicalResult:
        result = self.discipline.argue_call(team_morale, rng if rng is not None else self.rng)
        if result.got_technical:
            self._emit(TechnicalFoulEvent, result=result)
        return result

    # ------------------------------------------------------------------
    # Lifecycle & persistence
    # ------------------------------------------------------------------

    def reset_for_new_game(self) -> "CoachEngine":
        """
        Fresh engine for the next game.

        Shares this engine's strategy, playbook, event bus, config, random
        source and team id, and keeps the coach's rotation settings. All
        game state starts over.
        """
        engine = CoachEngine(
            strategy=self._strategy,
            playbook=self.dispatcher.playbook,
            event_bus=self.event_bus,
            config=self.config,
            rng=self.rng,
            team_id=self.team_id,
        )
        engine.substitutions.plan = SubstitutionPlan.from_dict(self.substitutions.plan.to_dict())
        return engine

    def to_dict(self) -> dict:
        """Snapshot every piece of game state for persistence."""
        return {
            "team_id": self.team_id,
            "strategy": self._strategy.to_dict() if self._strategy else None,
            "situation": self._situation.to_dict(),
            "tactics": self._tactics.to_dict(),
            "ledger": self.ledger.to_dict(),
            "momentum": self.momentum.to_dict(),
            "matchups": self.matchups.to_dict(),
            "substitution_plan": self.substitutions.plan.to_dict(),
            "current_lineup": list(self.current_lineup),
            "player_fouls": dict(self.player_fouls),
            "just_called_timeout": self.just_called_timeout,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        playbook: Optional[PlaybookProvider] = None,
        event_bus: Optional[EventBus] = None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "CoachEngine":
        """Restore an engine from ``to_dict`` output."""
        strategy_data = data.get("strategy")
        engine = cls(
            strategy=TeamStrategy.from_dict(strategy_data) if strategy_data else None,
            playbook=playbook,
            event_bus=event_bus,
            config=config,
            rng=rng,
            team_id=data.get("team_id"),
        )
        engine._situation = GameSituation.from_dict(data.get("situation", {}))
        engine._tactics = TacticalState.from_dict(data.get("tactics", {}))
        engine.ledger = ResourceLedger.from_dict(
            data.get("ledger", {}),
            timeouts=engine.config.timeouts_per_game,
            fouls_to_give=engine.config.fouls_to_give_per_quarter,
        )
        engine.discipline = DisciplinaryModel(engine.ledger)
        engine.momentum = MomentumTracker.from_dict(data.get("momentum", {}))
        engine.matchups = MatchupRegistry.from_dict(data.get("matchups", {}))
        engine.substitutions.plan = SubstitutionPlan.from_dict(
            data.get("substitution_plan", {}),
            fatigue_threshold=engine.config.fatigue_threshold,
            rotation_depth=engine.config.rotation_depth,
        )
        engine.current_lineup = list(data.get("current_lineup", []))
        engine.player_fouls = dict(data.get("player_fouls", {}))
        engine.just_called_timeout = data.get("just_called_timeout", False)
        return engine
