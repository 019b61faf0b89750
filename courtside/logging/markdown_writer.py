"""Markdown coaching summary writer."""

from datetime import datetime
from pathlib import Path
from typing import TextIO

from courtside.coaching.engine import CoachEngine
from courtside.logging.decision_log import DecisionLog


class MarkdownCoachingWriter:
    """Generates markdown summaries of a coach's game."""

    def write_summary(
        self,
        engine: CoachEngine,
        decision_log: DecisionLog,
        output_path: Path,
    ) -> None:
        """
        Write a coaching summary to a markdown file.

        Args:
            engine: Engine at the end of (or during) the game
            decision_log: Log of the coach's decisions
            output_path: Path to write markdown file
        """
        with open(output_path, "w") as f:
            self.write_to(f, engine, decision_log)
            f.write("\n")

    def generate_summary_string(self, engine: CoachEngine, decision_log: DecisionLog) -> str:
        """Generate markdown summary as a string."""
        lines = []
        situation = engine.situation
        team = decision_log.team_name

        # Header
        lines.append(f"# {team} Coaching Summary")
        lines.append("")
        lines.append(f"**Score:** {team} {situation.team_score} - "
                     f"OPP {situation.opponent_score} "
                     f"(Q{situation.quarter} {situation.clock_display})")
        lines.append("")

        # Resources
        ledger = engine.ledger
        lines.append("## Resources")
        lines.append("")
        lines.append("| Resource | Value |")
        lines.append("|----------|:-----:|")
        lines.append(f"| Timeouts Remaining | {ledger.timeouts_remaining} |")
        lines.append(f"| Timeouts Used (1st Half) | {ledger.timeouts_used_first_half} |")
        lines.append(f"| Challenge Used | {'Yes' if ledger.challenge_used else 'No'} |")
        lines.append(f"| Technical Fouls | {ledger.technical_fouls} |")
        lines.append(f"| Ejected | {'Yes' if ledger.coach_ejected else 'No'} |")
        lines.append(f"| Momentum | {engine.momentum.momentum:.0f} |")
        lines.append("")

        # Final tactics
        tactics = engine.tactics
        lines.append("## Tactics")
        lines.append("")
        lines.append(f"- **Offense:** {tactics.offense.value}")
        lines.append(f"- **Defense:** {tactics.defense.value}")
        lines.append(f"- **Pace:** {tactics.pace.value}")
        lines.append(f"- **PnR Coverage:** {tactics.pnr_coverage.value}")
        if tactics.double_team_target:
            lines.append(f"- **Double Team:** {tactics.double_team_target}")
        lines.append("")

        # Counts
        lines.append("## Decisions")
        lines.append("")
        lines.append("| Type | Count |")
        lines.append("|------|:-----:|")
        lines.append(f"| Tactical changes | {len(decision_log.get_entries_of_type('TACTIC'))} |")
        lines.append(f"| Timeouts | {decision_log.timeout_count} |")
        lines.append(f"| Substitutions | {decision_log.substitution_count} |")
        lines.append(f"| Set plays | {decision_log.play_call_count} |")
        lines.append("")

        # Decisions by quarter
        lines.append("## Decision Log")
        lines.append("")
        by_quarter = decision_log.get_entries_by_quarter()
        if not by_quarter:
            lines.append("*No decisions logged*")
            lines.append("")
        for quarter in sorted(by_quarter.keys()):
            lines.append(f"### {self._period_name(quarter)}")
            lines.append("")
            for entry in by_quarter[quarter]:
                lines.append(f"- **{entry.time_remaining}** - {entry.description} "
                             f"({entry.team_score}-{entry.opponent_score})")
            lines.append("")

        # Footer
        lines.append("---")
        lines.append(f"*Generated by Courtside - {datetime.now().strftime('%Y-%m-%d %H:%M')}*")

        return "\n".join(lines)

    def write_to(self, f: TextIO, engine: CoachEngine, decision_log: DecisionLog) -> None:
        """Write the summary to an open text stream."""
        f.write(self.generate_summary_string(engine, decision_log))

    @staticmethod
    def _period_name(quarter: int) -> str:
        if quarter <= 4:
            return f"Quarter {quarter}"
        return f"Overtime {quarter - 4}"
