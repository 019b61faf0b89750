"""Entry point for courtside package."""

import argparse
import logging
import random
from pathlib import Path

from courtside.config import get_config


def build_demo_playbook():
    """A small playbook for the demo sequence."""
    from courtside.core.enums import PlayCategory, PlaySituation, PlayType
    from courtside.core.models.play import SetPlay
    from courtside.core.playbook import Playbook

    playbook = Playbook(team_id="demo")
    plays = [
        SetPlay("horns_flare", "Horns Flare", PlayType.HORNS_ACTION, situation=PlaySituation.GENERAL),
        SetPlay("spain_pnr", "Spain Pick and Roll", PlayType.SPAIN_PNR, situation=PlaySituation.GENERAL),
        SetPlay("box_lob", "Box Lob", PlayType.LOB_PLAY, PlayCategory.INBOUND,
                situation=PlaySituation.AFTER_TIMEOUT),
        SetPlay("iso_top", "Iso Top", PlayType.ISOLATION, PlayCategory.LATE_GAME,
                situation=PlaySituation.LAST_SHOT),
        SetPlay("zipper_3", "Zipper Three", PlayType.FLOPPY, PlayCategory.LATE_GAME,
                situation=PlaySituation.NEED_THREE),
    ]
    for play in plays:
        playbook.add_play(play)
        playbook.set_familiarity(play.play_id, 80)
    return playbook


def run_demo(seed: int, output: Path | None = None) -> None:
    """Coach the last five minutes of a close fourth quarter."""
    from courtside.coaching import CoachEngine
    from courtside.core.enums import (
        DefensiveScheme,
        DoubleTeamTrigger,
        QuickActionType,
    )
    from courtside.core.models.strategy import (
        DefensiveSchemeType,
        OffensiveSystemType,
        PacePreference,
        TeamStrategy,
    )
    from courtside.events import EventBus
    from courtside.logging import DecisionLog, MarkdownCoachingWriter

    print("Courtside - Basketball Coaching Engine (Demo Mode)")
    print("=" * 50)

    bus = EventBus()
    log = DecisionLog(team_name="HAWKS")
    log.connect_to_event_bus(bus)

    strategy = TeamStrategy(
        pace_preference=PacePreference.PUSH_WHEN_POSSIBLE,
        offensive_system=OffensiveSystemType.HORNS_SET,
        defensive_scheme=DefensiveSchemeType.SWITCH_EVERYTHING,
    )
    engine = CoachEngine(
        strategy=strategy,
        playbook=build_demo_playbook(),
        event_bus=bus,
        rng=random.Random(seed),
    )
    engine.set_lineup(["pg", "sg", "sf", "pf", "c"])
    tactics = engine.tactics
    print(f"Tactics: {tactics.offense.value} / {tactics.defense.value} / {tactics.pace.value}")

    # 5:00 left, tied, then the opponent goes on a run
    engine.update_game_state(4, 300.0, 24.0, 92, 92, False)
    for points in (3, 2, 3):
        engine.record_opponent_points(points)
    advice = engine.should_call_timeout()
    print(f"{engine.situation.clock_display} - opponent on a run, timeout advice: {advice.reason}")
    if advice.should_call:
        result = engine.call_timeout(advice.reason)
        print(f"  {result.message} ({result.timeouts_left} left)")

    ato = engine.call_ato_play("pg")
    print(f"  ATO call: {ato.play_type.value} (play {ato.play_id})")

    engine.set_defense(DefensiveScheme.ZONE_2_3)
    engine.set_double_team("opp_star", DoubleTeamTrigger.ON_POST)

    suggestions = engine.get_substitution_suggestions({"pg": 58, "sg": 81, "sf": 77, "pf": 66, "c": 90})
    for suggestion in suggestions:
        print(f"  Sub suggestion: {suggestion.player_out} - {suggestion.reason}")
    if suggestions:
        sub = engine.substitute(suggestions[0].player_out, "bench_guard")
        print(f"  {sub.message}")

    # Scoring back
    engine.update_game_state(4, 95.0, 24.0, 92, 100, True)
    for points in (3, 2, 3):
        engine.record_team_points(points)
    call = engine.call_quick_action(QuickActionType.PICK_AND_ROLL, "pg")
    print(f"{engine.situation.clock_display} - quick action: {call.play_type.value}")

    argue = engine.argue_call(team_morale=70)
    print(f"  Argued a call: {argue.message}")

    # Tied with the ball and the clock winding down
    engine.update_game_state(4, 18.0, 18.0, 100, 100, True)
    decision = engine.get_end_game_recommendation()
    print(f"{engine.situation.clock_display} - end game: {decision.action.value} ({decision.explanation})")
    for play in engine.get_recommended_plays()[:3]:
        print(f"  Recommended: {play}")

    print()
    summary = MarkdownCoachingWriter()
    if output is not None:
        summary.write_summary(engine, log, output)
        print(f"Summary written to {output}")
    else:
        print(summary.generate_summary_string(engine, log))


def main() -> None:
    """Main entry point for the Courtside application."""
    parser = argparse.ArgumentParser(
        description="Courtside - Basketball In-Game Coaching Engine",
        prog="courtside",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run a scripted late-game coaching demo",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the coaching API server",
    )
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="API host (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="API port (default: 8000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the demo's random draws (default: config seed or 7)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the demo's markdown summary to this file",
    )

    args = parser.parse_args()
    config = get_config()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.serve:
        from courtside.api.main import run_api

        run_api(host=args.host, port=args.port)
    elif args.demo:
        seed = args.seed if args.seed is not None else config.rng_seed
        if seed is None:
            seed = 7
        run_demo(seed, args.output)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
