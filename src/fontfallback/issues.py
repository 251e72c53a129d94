"""Diagnostics reported while resolving fallback fonts.

Issues are plain records handed to a sink callable. The default sink,
:func:`log_issue`, forwards them to the ``fontfallback.issues`` logger so
that a failed lookup degrades into a log line instead of an exception.
"""

import dataclasses
import logging
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)


class IssueSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        return {
            IssueSeverity.INFO: logging.INFO,
            IssueSeverity.WARNING: logging.WARNING,
            IssueSeverity.ERROR: logging.ERROR,
        }[self]


@dataclasses.dataclass(frozen=True)
class FontIssue:
    """A user-facing diagnostic.

    Attributes:
        title: One-line summary, e.g. the font that could not be resolved.
        description: What happens as a consequence.
        severity: Issue severity.
        path: Optional context, usually the file that requested the font.
    """

    title: str
    description: str
    severity: IssueSeverity = IssueSeverity.WARNING
    path: str | None = None

    def format(self) -> str:
        prefix = f"{self.path}: " if self.path else ""
        return f"{prefix}{self.title}. {self.description}"


IssueSink = Callable[[FontIssue], None]


def log_issue(issue: FontIssue) -> None:
    """Report an issue through the logging module."""
    logger.log(issue.severity.log_level, issue.format())
