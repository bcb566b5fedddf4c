"""Pre-built session that reports every match of a pattern, file by file."""

from __future__ import annotations

import logging
import re

from ..domain.models import CaseFold, FileBinding, MatchReport
from .matching import compile_pattern, report_for, search_from_cursor, step_past
from .ports import MatchNotifier
from .session import Session

LOGGER = logging.getLogger(__name__)


def log_match(report: MatchReport) -> None:
    """Default notifier: log the hit as ``path:line:column``."""

    LOGGER.info(
        "%s:%d:%d: %s",
        report.identifier,
        report.line,
        report.column,
        report.text,
        extra={"file_path": report.identifier},
    )


class SearchSession:
    """Scan for ``pattern`` and hand each hit to a notifier.

    The scan leaves the cursor just past the hit, and the operate step always
    keeps the file current, so each ``continue_operation`` yields the next
    hit until the file sequence runs out.
    """

    pattern: str
    case_fold: CaseFold
    regex: re.Pattern[str]
    reports: list[MatchReport]
    session: Session | None
    _notifier: MatchNotifier
    _last_match: re.Match[str] | None

    def __init__(
        self,
        pattern: str,
        case_fold: CaseFold = CaseFold.INHERIT,
        *,
        ambient_case_fold: bool = True,
        notifier: MatchNotifier | None = None,
    ) -> None:
        self.pattern = pattern
        self.case_fold = case_fold
        self.regex = compile_pattern(pattern, case_fold, ambient=ambient_case_fold)
        self.reports = []
        self.session = None
        self._notifier = notifier or log_match
        self._last_match = None

    def scan(self, binding: FileBinding) -> bool:
        match = search_from_cursor(self.regex, binding)
        self._last_match = match
        if match is None:
            return False
        binding.cursor = step_past(match)
        return True

    def operate(self, binding: FileBinding) -> bool:
        match = self._last_match
        if match is None:
            return True
        report = report_for(binding, match.start(), match.end())
        self.reports.append(report)
        self._notifier(report)
        return True


__all__ = ["SearchSession", "log_match"]
