"""
Summary: Pattern compilation helpers shared by search and replace sessions.
Why: Apply one case-fold rule and one cursor-advance rule to every pattern scan.
"""

from __future__ import annotations

import re

from ..domain.models import CaseFold, FileBinding, MatchReport

_ESCAPE_RE = re.compile(r"\\.")


def has_upper_case(pattern: str) -> bool:
    """Return True when ``pattern`` has an upper-case letter outside escapes."""

    return any(ch.isupper() for ch in _ESCAPE_RE.sub("", pattern))


def ignores_case(pattern: str, case_fold: CaseFold, *, ambient: bool) -> bool:
    """Resolve a case-fold override into a concrete ignore-case flag.

    ``INHERIT`` follows the ambient setting but turns sensitive as soon as
    the pattern itself contains an upper-case letter.
    """

    if case_fold is CaseFold.SENSITIVE:
        return False
    if case_fold is CaseFold.INSENSITIVE:
        return True
    return ambient and not has_upper_case(pattern)


def compile_pattern(
    pattern: str,
    case_fold: CaseFold,
    *,
    ambient: bool,
    delimited: bool = False,
) -> re.Pattern[str]:
    """Compile ``pattern`` with line-anchored ``^``/``$`` and the resolved case flag."""

    source = rf"\b(?:{pattern})\b" if delimited else pattern
    flags = re.MULTILINE
    if ignores_case(pattern, case_fold, ambient=ambient):
        flags |= re.IGNORECASE
    return re.compile(source, flags)


def search_from_cursor(regex: re.Pattern[str], binding: FileBinding) -> re.Match[str] | None:
    """Find the first match at or after the binding's cursor."""

    if binding.cursor > len(binding.content):
        # Past the end after stepping over a trailing empty match.
        return None
    return regex.search(binding.content, binding.cursor)


def step_past(match: re.Match[str]) -> int:
    """Return the cursor position following ``match``; empty matches advance by one."""

    start, end = match.span()
    return end if end > start else end + 1


def report_for(binding: FileBinding, start: int, end: int) -> MatchReport:
    """Describe the span ``start:end`` of ``binding`` for notifiers and prompts."""

    line, column = binding.position(start)
    return MatchReport(
        identifier=binding.identifier,
        start=start,
        end=end,
        line=line,
        column=column,
        text=binding.line_text(start),
    )


__all__ = [
    "has_upper_case",
    "ignores_case",
    "compile_pattern",
    "search_from_cursor",
    "step_past",
    "report_for",
]
