"""Where: src/crossfile/features/fileloop/usecases/replace.py
What: Query-replace within one binding and the pre-built replace session.
Why: Give the controller a ready operate action that edits, saves and moves on.
Assumptions:
- Replacement strings use Python ``re`` template syntax (``\\1``, ``\\g<name>``).
Trade-offs:
- Line numbers in prompts refer to the content as it was before this pass.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..domain.models import CaseFold, FileBinding, MatchReport, ReplaceAnswer, ReplaceOutcome
from .matching import compile_pattern, report_for, search_from_cursor, step_past
from .ports import ReplaceConfirm
from .session import Session

LOGGER = logging.getLogger(__name__)


def accept_all(report: MatchReport, replacement: str) -> ReplaceAnswer:
    """Confirmation that approves every replacement."""

    _ = report, replacement
    return ReplaceAnswer.YES


def perform_replace(
    binding: FileBinding,
    regex: re.Pattern[str],
    replacement: str,
    *,
    confirm: ReplaceConfirm = accept_all,
) -> ReplaceOutcome:
    """Replace matches of ``regex`` from the cursor to the end of ``binding``.

    Every match is offered to ``confirm`` until it answers ``ALL``. ``SKIP``
    leaves the rest of the file untouched; ``QUIT`` stops and leaves the
    cursor on the pending match so a later pass resumes there. Otherwise the
    cursor ends up past the last handled match.
    """

    outcome = ReplaceOutcome(identifier=binding.identifier)
    content = binding.content
    pieces: list[str] = [content[: binding.cursor]]
    last_end = binding.cursor
    replace_all = False
    stop_cursor: int | None = None

    while (match := search_from_cursor(regex, binding)) is not None:
        start, end = match.span()
        expansion = match.expand(replacement)

        answer = ReplaceAnswer.YES if replace_all else confirm(report_for(binding, start, end), expansion)
        if answer is ReplaceAnswer.ALL:
            replace_all = True
            answer = ReplaceAnswer.YES

        if answer is ReplaceAnswer.QUIT:
            outcome.quit = True
            pieces.append(content[last_end:start])
            last_end = start
            stop_cursor = len("".join(pieces))
            break
        if answer is ReplaceAnswer.SKIP:
            # Past the end so even empty matches at EOF stay skipped.
            binding.cursor = len(content) + 1
            break

        pieces.append(content[last_end:start])
        if answer is ReplaceAnswer.YES:
            pieces.append(expansion)
            outcome.replaced += 1
        else:
            pieces.append(match.group())
            outcome.declined += 1
        last_end = end
        binding.cursor = step_past(match)

    scanned_to = binding.cursor
    head = "".join(pieces)
    pieces.append(content[last_end:])

    if outcome.replaced:
        binding.replace_content("".join(pieces))
    if stop_cursor is not None:
        binding.cursor = stop_cursor
    else:
        # Map the scan position into the edited content.
        binding.cursor = len(head) + (scanned_to - last_end)
    return outcome


class ReplaceSession:
    """Query-replace ``source`` with ``replacement`` across the file sequence."""

    source: str
    replacement: str
    delimited: bool
    regex: re.Pattern[str]
    outcomes: list[ReplaceOutcome]
    session: Session | None
    _confirm: ReplaceConfirm
    _save: Callable[[FileBinding], bool] | None

    def __init__(
        self,
        source: str,
        replacement: str,
        case_fold: CaseFold = CaseFold.INHERIT,
        *,
        delimited: bool = False,
        ambient_case_fold: bool = True,
        confirm: ReplaceConfirm | None = None,
        save: Callable[[FileBinding], bool] | None = None,
    ) -> None:
        self.source = source
        self.replacement = replacement
        self.delimited = delimited
        self.regex = compile_pattern(source, case_fold, ambient=ambient_case_fold, delimited=delimited)
        self.outcomes = []
        self.session = None
        self._confirm = confirm or accept_all
        self._save = save

    @property
    def replaced(self) -> int:
        """Total replacements made so far."""

        return sum(outcome.replaced for outcome in self.outcomes)

    def scan(self, binding: FileBinding) -> bool:
        match = search_from_cursor(self.regex, binding)
        if match is None:
            return False
        # Leave the cursor on the match so perform_replace starts with it.
        binding.cursor = match.start()
        return True

    def operate(self, binding: FileBinding) -> bool:
        outcome = perform_replace(binding, self.regex, self.replacement, confirm=self._confirm)
        if outcome.replaced and self._save is not None:
            outcome.saved = self._save(binding)
        self.outcomes.append(outcome)
        LOGGER.info(
            "Replaced %d occurrence(s) in %s",
            outcome.replaced,
            binding.identifier,
            extra={"file_path": binding.identifier},
        )
        return True


__all__ = ["ReplaceSession", "perform_replace", "accept_all"]
