"""src/crossfile/features/fileloop/usecases/workspace.py
What: Registry of live file bindings plus ephemeral loads for scan-only visits.
Why: Let the controller reuse already-open content and apply the revert policy in one place.
"""

from __future__ import annotations

import logging

from ..domain.models import FileBinding, LoopEvent
from .ports import ContentLoaderPort
from .revert_policy import RevertPolicy

LOGGER = logging.getLogger(__name__)


class Workspace:
    """Live bindings keyed by identifier, backed by a content loader.

    Live bindings outlive sessions, the same way files left open in an
    editor keep their content and cursor between commands.
    """

    loader: ContentLoaderPort
    revert_policy: RevertPolicy
    _live: dict[str, FileBinding]

    def __init__(self, loader: ContentLoaderPort, revert_policy: RevertPolicy | None = None) -> None:
        self.loader = loader
        self.revert_policy = revert_policy or RevertPolicy()
        self._live = {}

    @property
    def bindings(self) -> list[FileBinding]:
        """Return live bindings in the order they were opened."""

        return list(self._live.values())

    def get_live(self, identifier: str) -> FileBinding | None:
        """Return the live binding for ``identifier`` if one exists."""

        return self._live.get(identifier)

    def open(self, identifier: str) -> FileBinding:
        """Return the live binding for ``identifier``, loading it when absent."""

        binding = self._live.get(identifier)
        if binding is None:
            content, mtime = self.loader.load_content(identifier)
            binding = FileBinding(identifier=identifier, content=content, synced_mtime=mtime)
            self._live[identifier] = binding
        return binding

    def load_ephemeral(self, identifier: str) -> FileBinding:
        """Load ``identifier`` into an unregistered binding for scanning only."""

        content, mtime = self.loader.load_content(identifier)
        return FileBinding(
            identifier=identifier,
            content=content,
            synced_mtime=mtime,
            ephemeral=True,
        )

    def promote(self, binding: FileBinding) -> FileBinding:
        """Turn an ephemeral binding into a live one, keeping its cursor."""

        if not binding.ephemeral:
            return binding

        existing = self._live.get(binding.identifier)
        if existing is not None:
            existing.cursor = min(binding.cursor, len(existing.content))
            return existing

        binding.ephemeral = False
        self._live[binding.identifier] = binding
        LOGGER.debug(
            "Promoted scan-only visit of %s",
            binding.identifier,
            extra={"loop_event": LoopEvent.FILE_PROMOTE, "file_path": binding.identifier},
        )
        return binding

    def close(self, identifier: str) -> FileBinding | None:
        """Forget the live binding for ``identifier``."""

        return self._live.pop(identifier, None)

    def reload(self, binding: FileBinding) -> None:
        """Replace the binding's content with the disk copy."""

        content, mtime = self.loader.load_content(binding.identifier)
        binding.content = content
        binding.synced_mtime = mtime
        binding.modified = False
        binding.cursor = min(binding.cursor, len(content))

    def refresh(self, binding: FileBinding) -> bool:
        """Apply the revert policy to ``binding``; return True when it was reloaded."""

        disk_mtime = self.loader.disk_mtime(binding.identifier)
        if not self.revert_policy.is_stale(binding, disk_mtime):
            return False

        if not self.revert_policy.should_reload(binding):
            LOGGER.info(
                "Keeping in-memory copy of %s although it changed on disk",
                binding.identifier,
                extra={"loop_event": LoopEvent.FILE_REVERT_KEPT, "file_path": binding.identifier},
            )
            return False

        self.reload(binding)
        LOGGER.info(
            "Reread %s from disk",
            binding.identifier,
            extra={"loop_event": LoopEvent.FILE_REVERT, "file_path": binding.identifier},
        )
        return True

    def resolve(self, identifier: str, *, visit: bool = True) -> FileBinding:
        """Return the binding the controller should scan for ``identifier``."""

        binding = self._live.get(identifier)
        if binding is not None:
            _ = self.refresh(binding)
            return binding
        if visit:
            return self.open(identifier)
        return self.load_ephemeral(identifier)

    def save(self, binding: FileBinding) -> bool:
        """Write modified content back through the loader."""

        if not binding.modified:
            return False
        binding.synced_mtime = self.loader.write_back_content(binding.identifier, binding.content)
        binding.modified = False
        LOGGER.debug(
            "Saved %s",
            binding.identifier,
            extra={"loop_event": LoopEvent.FILE_SAVE, "file_path": binding.identifier},
        )
        return True


__all__ = ["Workspace"]
