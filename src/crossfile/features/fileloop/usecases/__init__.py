"""Use cases driving multi-file scan-and-operate rounds."""

from .controller import Controller
from .ports import (
    ContentLoaderPort,
    MatchNotifier,
    OperateAction,
    ReplaceConfirm,
    RevertConfirm,
    ScanPredicate,
)
from .replace import ReplaceSession, accept_all, perform_replace
from .revert_policy import RevertPolicy, revert_prompt
from .search import SearchSession, log_match
from .session import Session
from .workspace import Workspace

__all__ = [
    "Controller",
    "ContentLoaderPort",
    "MatchNotifier",
    "OperateAction",
    "ReplaceConfirm",
    "RevertConfirm",
    "ScanPredicate",
    "ReplaceSession",
    "accept_all",
    "perform_replace",
    "RevertPolicy",
    "revert_prompt",
    "SearchSession",
    "log_match",
    "Session",
    "Workspace",
]
