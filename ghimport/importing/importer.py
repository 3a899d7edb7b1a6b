"""
Repository import workflow.

Clones a GitHub repository with a chosen SSH identity. When the
destination already exists, it is set aside, the clone is made in its
place, and the old contents are merged back on top of the clone.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ghimport.core.config import Config, ImportConfig
from ghimport.core.exceptions import (
    BackupExistsError,
    BackupPathError,
    ExternalCommandFailedError,
)
from ghimport.core.identity import Identity
from ghimport.importing.git_handler import GitHandler
from ghimport.utils.fileops import merge_directories, remove_empty_directory
from ghimport.utils.validation import resolve_destination

logger = logging.getLogger(__name__)


@dataclass
class ImportOutcome:
    """What an import did to the destination."""

    destination: Path
    merged: bool = False
    moved_entries: int = 0
    backup: Optional[Path] = None


class RepositoryImporter:
    """
    Clones a repository and binds it to an SSH identity.

    Steps run strictly in order and the first failure aborts the rest.
    Nothing is rolled back: if the clone fails after an existing
    destination was renamed, the ``-tmpbkup`` directory is left for the
    operator to restore.
    """

    def __init__(
        self,
        config: Optional[ImportConfig] = None,
        git_handler: Optional[GitHandler] = None,
    ):
        self.config = config or Config.get()
        self.git_handler = git_handler or GitHandler(self.config)

    def import_repository(self, source: str, identity: str, destination: str) -> ImportOutcome:
        """
        Import a repository into a destination directory.

        Args:
            source: Validated SSH address of the repository.
            identity: Validated identity name.
            destination: Validated destination path, ``~`` is expanded.

        Returns:
            ImportOutcome describing the import.

        Raises:
            ExternalCommandFailedError: If any git invocation fails.
            BackupExistsError: If the backup directory is already present.
            OSError: If a filesystem operation fails.
        """
        bundle = Identity(identity, Path(self.config.ssh_dir))
        target = resolve_destination(destination)
        ssh_command = bundle.ssh_command()

        if target.is_dir():
            logger.info(f"Destination {target} exists")
            outcome = self._import_into_existing(source, target, ssh_command)
        else:
            logger.info(f"Destination {target} doesn't exist")
            self.git_handler.clone(source, target, ssh_command)
            outcome = ImportOutcome(destination=target)

        self.git_handler.configure_identity(target, bundle)
        return outcome

    def backup_path(self, target: Path) -> Path:
        if not target.name:
            raise BackupPathError(str(target))
        return target.with_name(target.name + self.config.backup_suffix)

    def _import_into_existing(self, source: str, target: Path, ssh_command: str) -> ImportOutcome:
        backup = self.backup_path(target)
        if backup.exists():
            raise BackupExistsError(str(backup))

        target.rename(backup)
        logger.info(f"Moved existing contents to {backup}")

        try:
            self.git_handler.clone(source, target, ssh_command)
        except ExternalCommandFailedError:
            logger.warning(f"Clone failed, previous contents remain in {backup}")
            raise

        moved = merge_directories(backup, target)
        logger.info(f"Merged {moved} entries from {backup} into {target}")

        remove_empty_directory(backup)

        return ImportOutcome(destination=target, merged=True, moved_entries=moved, backup=backup)
