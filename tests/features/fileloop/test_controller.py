"""Tests for the multi-file controller state machine."""

from __future__ import annotations

from typing import Any

import pytest
from pytest_mock import MockerFixture

from crossfile.features.fileloop import (
    AllFilesProcessed,
    Controller,
    FileBinding,
    LoopState,
    MatchReport,
    NoOperationInProgress,
    OperationInProgress,
    RevertMode,
    RevertPolicy,
    Workspace,
)


def test_continue_before_initialize_fails(controller: Controller) -> None:
    """Continuing without a session reports that nothing is in progress."""

    with pytest.raises(NoOperationInProgress):
        _ = controller.continue_operation()
    assert controller.state is LoopState.IDLE


def test_continue_fails_on_fresh_controller_after_other_rounds(workspace: Workspace) -> None:
    """Another controller's history does not create a session."""

    first = Controller(workspace)
    _ = first.initialize_search("needle", ["a.txt"])
    _ = first.run_to_completion()

    with pytest.raises(NoOperationInProgress):
        _ = Controller(workspace).continue_operation()


def test_empty_sequence_is_processed_without_callbacks(
    controller: Controller, mocker: MockerFixture
) -> None:
    """An empty round ends immediately and never scans or operates."""

    scan = mocker.Mock(return_value=True)
    operate = mocker.Mock(return_value=True)
    _ = controller.initialize([], scan, operate)

    with pytest.raises(AllFilesProcessed):
        _ = controller.continue_operation()

    scan.assert_not_called()
    operate.assert_not_called()
    assert controller.state is LoopState.EXHAUSTED


def test_search_visits_each_file_once_in_order(controller: Controller, loader: Any) -> None:
    """Each turn yields the next hit; the turn after the last hit ends the round."""

    loader.files["b.txt"] = "needle in b\n"
    reports: list[MatchReport] = []
    files = ["a.txt", "b.txt", "c.txt"]
    _ = controller.initialize_search("needle", files, notifier=reports.append)

    for _turn in files:
        assert controller.continue_operation() is True

    with pytest.raises(AllFilesProcessed):
        _ = controller.continue_operation()

    assert [report.identifier for report in reports] == files
    assert loader.loads == files
    assert (reports[2].line, reports[2].column) == (2, 1)


def test_exhausted_round_keeps_failing(controller: Controller) -> None:
    _ = controller.initialize_search("needle", ["b.txt"])

    for _attempt in range(3):
        with pytest.raises(AllFilesProcessed):
            _ = controller.continue_operation()


def test_files_without_matches_are_skipped_within_one_turn(controller: Controller) -> None:
    reports: list[MatchReport] = []
    _ = controller.initialize_search("needle", ["b.txt", "b.txt", "c.txt"], notifier=reports.append)

    assert controller.continue_operation() is True
    assert [report.identifier for report in reports] == ["c.txt"]
    assert controller.state is LoopState.SCANNING


def test_truthy_operate_rescans_the_same_file(controller: Controller) -> None:
    """A truthy result keeps the file current; the next turn scans it again."""

    scanned: list[str] = []

    def scan(binding: FileBinding) -> bool:
        scanned.append(binding.identifier)
        return True

    _ = controller.initialize(["a.txt", "c.txt"], scan, lambda binding: True)
    for _turn in range(3):
        assert controller.continue_operation() is True

    assert scanned == ["a.txt", "a.txt", "a.txt"]


def test_falsy_operate_finishes_the_file(controller: Controller) -> None:
    """A falsy result makes the next turn advance without rescanning."""

    scanned: list[str] = []

    def scan(binding: FileBinding) -> bool:
        scanned.append(binding.identifier)
        return True

    _ = controller.initialize(["a.txt", "c.txt"], scan, lambda binding: False)

    assert controller.continue_operation() is False
    assert controller.session is not None
    assert controller.session.file_finished is True
    assert controller.state is LoopState.ADVANCING

    assert controller.continue_operation() is False
    with pytest.raises(AllFilesProcessed):
        _ = controller.continue_operation()

    assert scanned == ["a.txt", "c.txt"]


def test_operate_sees_cursor_left_by_scan(controller: Controller) -> None:
    seen: list[int] = []

    def scan(binding: FileBinding) -> bool:
        index = binding.content.find("needle", binding.cursor)
        if index < 0:
            return False
        binding.cursor = index + len("needle")
        return True

    def operate(binding: FileBinding) -> bool:
        seen.append(binding.cursor)
        return True

    _ = controller.initialize(["a.txt"], scan, operate)
    _ = controller.run_to_completion()

    assert seen == [len("alpha needle")]


def test_non_visiting_scan_drops_files_without_match(
    controller: Controller, workspace: Workspace
) -> None:
    """Scan-only loads never become live unless the operate step runs."""

    _ = controller.initialize_search("needle", ["b.txt", "c.txt"], visit=False)

    _ = controller.continue_operation()

    assert workspace.get_live("b.txt") is None
    live = workspace.get_live("c.txt")
    assert live is not None
    assert live.ephemeral is False
    assert controller.session is not None
    assert controller.session.current is live


def test_visiting_scan_keeps_files_live(controller: Controller, workspace: Workspace) -> None:
    _ = controller.initialize_search("needle", ["b.txt", "c.txt"])
    _ = controller.continue_operation()

    assert workspace.get_live("b.txt") is not None


def test_live_cursor_is_restored_when_scan_misses(
    controller: Controller, workspace: Workspace
) -> None:
    binding = workspace.open("b.txt")
    binding.cursor = 5

    _ = controller.initialize_search("needle", ["b.txt"])
    with pytest.raises(AllFilesProcessed):
        _ = controller.continue_operation()

    assert binding.cursor == 5


def test_live_file_is_reused_and_scanned_from_start(
    controller: Controller, workspace: Workspace, loader: Any
) -> None:
    binding = workspace.open("a.txt")
    binding.cursor = len(binding.content)
    reports: list[MatchReport] = []

    _ = controller.initialize_search("needle", ["a.txt"], notifier=reports.append)
    _ = controller.continue_operation()

    assert loader.loads == ["a.txt"]
    assert reports[0].start == len("alpha ")


def test_load_failure_propagates_and_retries_same_file(
    controller: Controller, loader: Any
) -> None:
    loader.files["b.txt"] = "needle in b\n"
    loader.failing.add("b.txt")
    reports: list[MatchReport] = []
    _ = controller.initialize_search("needle", ["a.txt", "b.txt", "c.txt"], notifier=reports.append)

    _ = controller.continue_operation()
    with pytest.raises(FileNotFoundError):
        _ = controller.continue_operation()
    assert controller.state is LoopState.ADVANCING

    with pytest.raises(FileNotFoundError):
        _ = controller.continue_operation()

    loader.failing.clear()
    _ = controller.continue_operation()

    assert [report.identifier for report in reports] == ["a.txt", "b.txt"]


def test_skip_file_moves_past_unreadable_file(controller: Controller, loader: Any) -> None:
    loader.failing.add("a.txt")
    reports: list[MatchReport] = []
    _ = controller.initialize_search("needle", ["a.txt", "c.txt"], notifier=reports.append)

    with pytest.raises(FileNotFoundError):
        _ = controller.continue_operation()
    assert controller.skip_file() == "a.txt"

    _ = controller.continue_operation()
    assert [report.identifier for report in reports] == ["c.txt"]


def test_skip_file_without_session_fails(controller: Controller) -> None:
    with pytest.raises(NoOperationInProgress):
        _ = controller.skip_file()


def test_initialize_during_a_step_is_rejected(controller: Controller) -> None:
    def operate(binding: FileBinding) -> bool:
        _ = controller.initialize(["c.txt"], lambda b: True, lambda b: True)
        return True

    _ = controller.initialize(["a.txt"], lambda binding: True, operate)

    with pytest.raises(OperationInProgress):
        _ = controller.continue_operation()

    # The guard is released once the failed step unwinds.
    _ = controller.initialize(["c.txt"], lambda binding: True, lambda binding: True)
    assert controller.continue_operation() is True


def test_initialize_replaces_previous_session(controller: Controller) -> None:
    first = controller.initialize_search("needle", ["a.txt"])
    second = controller.initialize_search("line", ["c.txt"])

    assert controller.session is second.session
    assert controller.session is not first.session
    _ = controller.continue_operation()
    assert second.reports[0].identifier == "c.txt"
    assert first.reports == []


def test_run_to_completion_counts_turns(controller: Controller, loader: Any) -> None:
    loader.files["b.txt"] = "needle needle\n"
    search = controller.initialize_search("needle", ["a.txt", "b.txt", "c.txt"])

    assert controller.run_to_completion() == 4
    assert len(search.reports) == 4


def test_never_mode_keeps_stale_content(loader: Any, mocker: MockerFixture) -> None:
    confirm = mocker.Mock(return_value=True)
    workspace = Workspace(loader, RevertPolicy(RevertMode.NEVER, confirm=confirm))
    binding = workspace.open("a.txt")
    loader.change_on_disk("a.txt", "rewritten\n")

    controller = Controller(workspace)
    search = controller.initialize_search("needle", ["a.txt"])
    _ = controller.continue_operation()

    confirm.assert_not_called()
    assert binding.content == "alpha needle\n"
    assert search.reports[0].identifier == "a.txt"


def test_always_ask_refusal_scans_stale_content(loader: Any, mocker: MockerFixture) -> None:
    confirm = mocker.Mock(return_value=False)
    workspace = Workspace(loader, RevertPolicy(RevertMode.ALWAYS_ASK, confirm=confirm))
    binding = workspace.open("a.txt")
    loader.change_on_disk("a.txt", "rewritten\n")

    controller = Controller(workspace)
    search = controller.initialize_search("needle", ["a.txt"])
    _ = controller.continue_operation()

    confirm.assert_called_once_with("a.txt", False)
    assert binding.content == "alpha needle\n"
    assert len(search.reports) == 1


def test_always_ask_acceptance_rereads_before_scanning(
    loader: Any, mocker: MockerFixture
) -> None:
    confirm = mocker.Mock(return_value=True)
    workspace = Workspace(loader, RevertPolicy(RevertMode.ALWAYS_ASK, confirm=confirm))
    binding = workspace.open("a.txt")
    binding.replace_content("edited needle\n")
    loader.change_on_disk("a.txt", "rewritten\n")

    controller = Controller(workspace)
    _ = controller.initialize_search("needle", ["a.txt"])
    with pytest.raises(AllFilesProcessed):
        _ = controller.continue_operation()

    confirm.assert_called_once_with("a.txt", True)
    assert binding.content == "rewritten\n"
    assert binding.modified is False


def test_retry_of_empty_identifier_reattempts_it(controller: Controller, loader: Any) -> None:
    """A pending identifier is retried even when it is the empty string."""

    _ = controller.initialize_search("needle", ["", "b.txt"])

    with pytest.raises(FileNotFoundError):
        _ = controller.continue_operation()
    with pytest.raises(FileNotFoundError):
        _ = controller.continue_operation()

    assert loader.loads == ["", ""]
