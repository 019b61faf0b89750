"""Coaching API Router.

REST endpoints for driving one team's coaching engine during a game. The
match simulator (or a test client) pushes the game situation; the coaching
UI reads state and makes decisions.

Endpoints:
- POST /coach/start - Start a coaching session
- GET /coach/{game_id}/state - Current coaching state
- PUT /coach/{game_id}/situation - Push a game-state update
- PUT /coach/{game_id}/tactics - Change tactics
- POST /coach/{game_id}/timeout - Call a timeout
- POST /coach/{game_id}/substitution - Make substitutions
- POST /coach/{game_id}/substitution-suggestions - Who should come out
- POST /coach/{game_id}/quick-action - Call a quick action
- POST /coach/{game_id}/play - Call a set play
- GET /coach/{game_id}/plays - Recommended and available plays
- GET /coach/{game_id}/end-game - End-of-game recommendation
- POST /coach/{game_id}/challenge - Challenge a call
- POST /coach/{game_id}/argue - Argue a call
- POST /coach/{game_id}/foul - Intentional foul
- GET /coach/{game_id}/summary - Markdown coaching summary
- DELETE /coach/{game_id} - End the session
"""

from typing import Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from courtside.api.schemas.coach import (
    ActionResultResponse,
    ArgueRequest,
    ChallengeRequest,
    CoachStateResponse,
    EndGameResponse,
    FoulRequest,
    PlayCallResponse,
    PlaysResponse,
    QuickActionRequest,
    SessionStartedResponse,
    SetPlayRequest,
    SituationResponse,
    SituationUpdateRequest,
    StartSessionRequest,
    SubstitutionRequest,
    SuggestionResponse,
    SuggestionsRequest,
    SuggestionsResponse,
    TacticsResponse,
    TacticsUpdateRequest,
    TimeoutRequest,
)
from courtside.api.services.session_manager import CoachSession, session_manager
from courtside.core.models.play import PlayCall, SetPlay
from courtside.core.models.results import CoachResult
from courtside.core.models.strategy import TeamStrategy
from courtside.logging import MarkdownCoachingWriter

router = APIRouter(prefix="/coach", tags=["coach"])


# =============================================================================
# Helpers
# =============================================================================

def _get_session(game_id: str) -> CoachSession:
    """Get a session or raise 404."""
    session = session_manager.get_session(game_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Game {game_id} not found",
        )
    return session


def _build_state_response(session: CoachSession) -> CoachStateResponse:
    engine = session.engine
    situation = engine.situation
    advice = engine.should_call_timeout()
    return CoachStateResponse(
        game_id=session.game_id,
        team_name=session.team_name,
        situation=SituationResponse(
            quarter=situation.quarter,
            game_clock=situation.game_clock,
            clock_display=situation.clock_display,
            shot_clock=situation.shot_clock,
            team_score=situation.team_score,
            opponent_score=situation.opponent_score,
            score_diff=situation.score_diff,
            has_possession=situation.has_possession,
            is_clutch_time=situation.is_clutch_time,
        ),
        tactics=TacticsResponse(**engine.tactics.to_dict()),
        timeouts_remaining=engine.timeouts_remaining,
        fouls_to_give=engine.fouls_to_give,
        challenge_used=engine.ledger.challenge_used,
        technical_fouls=engine.ledger.technical_fouls,
        coach_ejected=engine.coach_ejected,
        momentum=engine.momentum.momentum,
        lineup=list(engine.current_lineup),
        suggested_timeout=advice.reason if advice.should_call else None,
    )


def _build_result_response(result: CoachResult) -> ActionResultResponse:
    data = result.to_dict()
    return ActionResultResponse(
        success=data.pop("success"),
        code=data.pop("code"),
        message=data.pop("message"),
        details=data,
    )


def _build_play_call_response(call: PlayCall) -> PlayCallResponse:
    return PlayCallResponse(
        play_type=call.play_type,
        primary_player_id=call.primary_player_id,
        secondary_player_id=call.secondary_player_id,
        is_ato=call.is_ato,
        timestamp=call.timestamp,
        play_id=call.play_id,
    )


# =============================================================================
# Session Lifecycle
# =============================================================================

@router.post("/start", response_model=SessionStartedResponse, status_code=status.HTTP_201_CREATED)
async def start_session(request: StartSessionRequest) -> SessionStartedResponse:
    """Start coaching a game.

    Default tactics are derived from the strategy fields. Plays, if given,
    become the session's playbook.
    """
    strategy = TeamStrategy(
        pace_preference=request.pace_preference,
        offensive_system=request.offensive_system,
        defensive_scheme=request.defensive_scheme,
    )
    plays = [
        SetPlay(
            play_id=p.play_id,
            name=p.name,
            play_type=p.play_type,
            category=p.category,
            situation=p.situation,
            tags=list(p.tags),
        )
        for p in request.plays
    ]
    session = session_manager.create_session(
        team_name=request.team_name,
        strategy=strategy,
        plays=plays,
        familiarity={p.play_id: p.familiarity for p in request.plays},
        lineup=request.lineup,
        team_id=request.team_id,
        seed=request.seed,
    )
    return SessionStartedResponse(
        game_id=session.game_id,
        state=_build_state_response(session),
        message=f"{session.team_name} coaching session started",
    )


@router.get("/{game_id}/state", response_model=CoachStateResponse)
async def get_state(game_id: str) -> CoachStateResponse:
    """Get the current coaching state, including timeout advice."""
    return _build_state_response(_get_session(game_id))


@router.put("/{game_id}/situation", response_model=CoachStateResponse)
async def update_situation(game_id: str, request: SituationUpdateRequest) -> CoachStateResponse:
    """Push a game-state update from the simulator."""
    session = _get_session(game_id)
    session.engine.update_game_state(
        request.quarter,
        request.game_clock,
        request.shot_clock,
        request.team_score,
        request.opponent_score,
        request.has_possession,
    )
    return _build_state_response(session)


@router.delete("/{game_id}")
async def end_session(game_id: str) -> Dict:
    """End a coaching session."""
    if session_manager.remove_session(game_id):
        return {"message": f"Game {game_id} ended"}

    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Game {game_id} not found",
    )


# =============================================================================
# Tactics & Rotation
# =============================================================================

@router.put("/{game_id}/tactics", response_model=TacticsResponse)
async def update_tactics(game_id: str, request: TacticsUpdateRequest) -> TacticsResponse:
    """Change tactics. Only the fields present in the request are applied."""
    engine = _get_session(game_id).engine

    if request.offense is not None:
        engine.set_offense(request.offense)
    if request.defense is not None:
        engine.set_defense(request.defense)
    if request.pace is not None:
        engine.set_pace(request.pace)
    if request.intensity is not None:
        engine.set_intensity(request.intensity)
    if request.pnr_coverage is not None:
        engine.set_pnr_coverage(request.pnr_coverage)
    if request.transition_defense is not None:
        engine.set_transition_defense(request.transition_defense)
    if request.press_enabled is not None:
        engine.set_press(request.press_enabled)
    if request.intentional_foul_enabled is not None:
        engine.set_intentional_foul_strategy(request.intentional_foul_enabled)

    return TacticsResponse(**engine.tactics.to_dict())


@router.post("/{game_id}/substitution", response_model=ActionResultResponse)
async def substitute(game_id: str, request: SubstitutionRequest) -> ActionResultResponse:
    """Make one or more substitutions against the tracked lineup."""
    engine = _get_session(game_id).engine
    result = engine.substitute_multiple(request.players_out, request.players_in)
    return _build_result_response(result)


@router.post("/{game_id}/substitution-suggestions", response_model=SuggestionsResponse)
async def substitution_suggestions(game_id: str, request: SuggestionsRequest) -> SuggestionsResponse:
    """Suggest substitutions for tired players and players in foul trouble."""
    engine = _get_session(game_id).engine
    suggestions = engine.get_substitution_suggestions(request.energy)
    return SuggestionsResponse(suggestions=[
        SuggestionResponse(
            player_out=s.player_out,
            reason=s.reason,
            urgency=s.urgency,
            suggested_replacement=s.suggested_replacement,
        )
        for s in suggestions
    ])


# =============================================================================
# Timeouts & Play Calls
# =============================================================================

@router.post("/{game_id}/timeout", response_model=ActionResultResponse)
async def call_timeout(game_id: str, request: TimeoutRequest) -> ActionResultResponse:
    engine = _get_session(game_id).engine
    return _build_result_response(engine.call_timeout(request.reason))


@router.post("/{game_id}/quick-action", response_model=PlayCallResponse)
async def call_quick_action(game_id: str, request: QuickActionRequest) -> PlayCallResponse:
    engine = _get_session(game_id).engine
    call = engine.call_quick_action(request.action, request.primary_player)
    return _build_play_call_response(call)


@router.post("/{game_id}/play", response_model=ActionResultResponse)
async def call_set_play(game_id: str, request: SetPlayRequest) -> ActionResultResponse:
    """Call a set play from the session's playbook."""
    engine = _get_session(game_id).engine
    return _build_result_response(engine.call_set_play(request.play_id))


@router.get("/{game_id}/plays", response_model=PlaysResponse)
async def get_plays(game_id: str) -> PlaysResponse:
    engine = _get_session(game_id).engine
    return PlaysResponse(
        recommended=[play.play_id for play in engine.get_recommended_plays()],
        available=engine.get_available_plays(),
    )


@router.get("/{game_id}/end-game", response_model=EndGameResponse)
async def get_end_game(game_id: str) -> EndGameResponse:
    """Get the end-of-game recommendation for the current situation."""
    decision = _get_session(game_id).engine.get_end_game_recommendation()
    return EndGameResponse(
        action=decision.action,
        explanation=decision.explanation,
        target_shot_clock=decision.target_shot_clock,
        needs_three=decision.needs_three,
    )


# =============================================================================
# Officials & Fouls
# =============================================================================

@router.post("/{game_id}/challenge", response_model=ActionResultResponse)
async def use_challenge(game_id: str, request: ChallengeRequest) -> ActionResultResponse:
    engine = _get_session(game_id).engine
    return _build_result_response(engine.use_challenge(request.challenge_type))


@router.post("/{game_id}/argue", response_model=ActionResultResponse)
async def argue_call(game_id: str, request: ArgueRequest) -> ActionResultResponse:
    engine = _get_session(game_id).engine
    return _build_result_response(engine.argue_call(request.team_morale))


@router.post("/{game_id}/foul", response_model=ActionResultResponse)
async def intentional_foul(game_id: str, request: FoulRequest) -> ActionResultResponse:
    engine = _get_session(game_id).engine
    return _build_result_response(engine.intentional_foul(request.player_id))


# =============================================================================
# Summary
# =============================================================================

@router.get("/{game_id}/summary", response_class=PlainTextResponse)
async def get_summary(game_id: str) -> str:
    """Markdown summary of the coaching decisions so far."""
    session = _get_session(game_id)
    return MarkdownCoachingWriter().generate_summary_string(session.engine, session.decision_log)
