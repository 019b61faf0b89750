"""Decision logging and output."""

from courtside.logging.decision_log import DecisionLog, LogEntry
from courtside.logging.markdown_writer import MarkdownCoachingWriter

__all__ = ["DecisionLog", "LogEntry", "MarkdownCoachingWriter"]
