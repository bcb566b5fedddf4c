# /*
# Where: features/fileloop/usecases/controller.py
# What: Resumable state machine alternating between locating the next match and operating on it.
# Why: Drive search, query-replace and custom scans over many files one user-visible turn at a time.
# Assumptions:
# - Single-threaded callers; confirmation callbacks block the turn until answered.
# - Scan predicates leave the cursor strictly past a hit they report.
# Trade-offs:
# - No iteration cap; a predicate that never advances the cursor repeats the same hit each turn.
# */

from __future__ import annotations

import logging

from ..domain.errors import AllFilesProcessed, NoOperationInProgress, OperationInProgress
from ..domain.models import CaseFold, FileBinding, LoopEvent, LoopState
from ..domain.sequence import FileSequence, FileSource
from .ports import MatchNotifier, OperateAction, ReplaceConfirm, ScanPredicate
from .replace import ReplaceSession
from .search import SearchSession
from .session import Session
from .workspace import Workspace

LOGGER = logging.getLogger(__name__)


class Controller:
    """Own the active session and advance it one turn per ``continue_operation``."""

    workspace: Workspace
    case_fold_search: bool
    save_after_replace: bool
    _session: Session | None
    _state: LoopState
    _in_progress: bool

    def __init__(
        self,
        workspace: Workspace,
        *,
        case_fold_search: bool = True,
        save_after_replace: bool = True,
    ) -> None:
        self.workspace = workspace
        self.case_fold_search = case_fold_search
        self.save_after_replace = save_after_replace
        self._session = None
        self._state = LoopState.IDLE
        self._in_progress = False

    @property
    def session(self) -> Session | None:
        """The active session, if any."""

        return self._session

    @property
    def state(self) -> LoopState:
        """Where the next ``continue_operation`` will resume."""

        return self._state

    def initialize(
        self,
        files: FileSource | FileSequence,
        scan: ScanPredicate,
        operate: OperateAction,
        *,
        visit: bool = True,
    ) -> Session:
        """Start a new round, discarding any previous session.

        With ``visit=False`` files that are not already live are loaded
        ephemerally and only become live when the operate action runs on them.
        """

        if self._in_progress:
            raise OperationInProgress("initialize")

        if self._session is not None:
            LOGGER.debug(
                "Discarding previous multi-file session after %d turn(s)",
                self._session.turns,
                extra={"loop_event": LoopEvent.SESSION_REPLACED},
            )

        session = Session(
            files=FileSequence.from_files(files),
            scan=scan,
            operate=operate,
            visit=visit,
        )
        self._session = session
        self._state = LoopState.ADVANCING
        LOGGER.debug("Initialized multi-file session", extra={"loop_event": LoopEvent.SESSION_START})
        return session

    def initialize_search(
        self,
        pattern: str,
        files: FileSource | FileSequence,
        case_fold: CaseFold = CaseFold.INHERIT,
        *,
        notifier: MatchNotifier | None = None,
        visit: bool = True,
    ) -> SearchSession:
        """Start a round that reports each occurrence of ``pattern``."""

        search = SearchSession(
            pattern,
            case_fold,
            ambient_case_fold=self.case_fold_search,
            notifier=notifier,
        )
        search.session = self.initialize(files, search.scan, search.operate, visit=visit)
        return search

    def initialize_replace(
        self,
        source: str,
        replacement: str,
        files: FileSource | FileSequence,
        case_fold: CaseFold = CaseFold.INHERIT,
        delimited: bool = False,
        *,
        confirm: ReplaceConfirm | None = None,
    ) -> ReplaceSession:
        """Start a round that query-replaces ``source`` in every file."""

        replace = ReplaceSession(
            source,
            replacement,
            case_fold,
            delimited=delimited,
            ambient_case_fold=self.case_fold_search,
            confirm=confirm,
            save=self.workspace.save if self.save_after_replace else None,
        )
        replace.session = self.initialize(files, replace.scan, replace.operate)
        return replace

    def continue_operation(self) -> bool:
        """Run one turn: find the next match and operate on it.

        Returns the operate action's result. Raises ``AllFilesProcessed``
        once the file sequence is exhausted without a further match.
        """

        session = self._session
        if session is None:
            raise NoOperationInProgress()
        if self._in_progress:
            raise OperationInProgress("continue")

        self._in_progress = True
        try:
            return self._turn(session)
        finally:
            self._in_progress = False

    def run_to_completion(self) -> int:
        """Continue until every file is processed; return the number of turns."""

        turns = 0
        while True:
            try:
                _ = self.continue_operation()
            except AllFilesProcessed:
                return turns
            turns += 1

    def skip_file(self) -> str | None:
        """Abandon the pending or current file so the next turn moves past it.

        Used after a load failure, which otherwise repeats on every retry.
        """

        session = self._session
        if session is None:
            raise NoOperationInProgress()
        if self._in_progress:
            raise OperationInProgress("skip a file")

        if session.pending_identifier is not None:
            skipped = session.pending_identifier
            session.pending_identifier = None
        elif session.current is not None:
            skipped = session.current.identifier
            session.file_finished = True
        else:
            return None
        LOGGER.warning("Skipping %s", skipped, extra={"file_path": skipped})
        return skipped

    def _turn(self, session: Session) -> bool:
        must_advance = session.needs_advance
        while True:
            if must_advance:
                self._advance(session)

            binding = session.current
            assert binding is not None
            session.freshly_initialized = False
            self._state = LoopState.SCANNING
            if session.scan(binding):
                break

            self._abandon(session, binding)
            must_advance = True

        return self._operate(session, binding)

    def _advance(self, session: Session) -> None:
        self._state = LoopState.ADVANCING
        identifier = session.pending_identifier
        if identifier is None:
            identifier = session.files.next()
        if identifier is None:
            session.current = None
            self._state = LoopState.EXHAUSTED
            LOGGER.debug(
                "All files processed after %d file(s)",
                session.files.pulled,
                extra={"loop_event": LoopEvent.EXHAUSTED},
            )
            raise AllFilesProcessed()

        session.pending_identifier = identifier
        try:
            binding = self.workspace.resolve(identifier, visit=session.visit)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.error(
                "Failed to read %s: %s",
                identifier,
                exc,
                extra={"loop_event": LoopEvent.FILE_LOAD_ERROR, "file_path": identifier},
            )
            raise

        session.pending_identifier = None
        session.file_finished = False
        session.current = binding
        session.saved_cursor = None if binding.ephemeral else binding.cursor
        binding.cursor = 0
        LOGGER.debug(
            "Scanning file %s...",
            identifier,
            extra={"loop_event": LoopEvent.FILE_ADVANCE, "file_path": identifier},
        )

    def _abandon(self, session: Session, binding: FileBinding) -> None:
        if not binding.ephemeral and session.saved_cursor is not None:
            binding.cursor = session.saved_cursor
        session.saved_cursor = None
        session.current = None
        LOGGER.debug(
            "No match in %s",
            binding.identifier,
            extra={"loop_event": LoopEvent.FILE_SCAN_MISS, "file_path": binding.identifier},
        )

    def _operate(self, session: Session, binding: FileBinding) -> bool:
        self._state = LoopState.OPERATING
        if binding.ephemeral:
            binding = self.workspace.promote(binding)
            session.current = binding
        session.saved_cursor = None

        LOGGER.debug(
            "Operating on %s at offset %d",
            binding.identifier,
            binding.cursor,
            extra={"loop_event": LoopEvent.FILE_OPERATE, "file_path": binding.identifier},
        )
        keep_scanning = bool(session.operate(binding))
        session.turns += 1

        if keep_scanning:
            self._state = LoopState.SCANNING
        else:
            session.file_finished = True
            self._state = LoopState.ADVANCING
            LOGGER.debug(
                "Finished with %s",
                binding.identifier,
                extra={"loop_event": LoopEvent.FILE_FINISHED, "file_path": binding.identifier},
            )
        return keep_scanning


__all__ = ["Controller"]
