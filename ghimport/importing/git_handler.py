"""
Git operations handler for repository import.

Every git invocation goes through this module, with the working
directory passed explicitly rather than changed for the whole process.
"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from ghimport.core.config import ImportConfig
from ghimport.core.exceptions import ExternalCommandFailedError
from ghimport.core.identity import Identity

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


class GitHandler:
    """
    Runs git clone and repository-local configuration commands.

    The git executable may be a path or an alias with arguments, such as
    ``flatpak run git``; it is split shell-style into the command prefix.
    """

    def __init__(self, config: ImportConfig, git_path: Optional[str] = None):
        self.config = config
        self.git_path = git_path or config.git_path
        self.git_command = shlex.split(self.git_path)

    def run(self, args: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        """
        Run git with the given arguments.

        Args:
            args: Arguments following the git executable.
            cwd: Working directory for this invocation only.

        Returns:
            The completed process.

        Raises:
            ExternalCommandFailedError: If git exits non-zero, cannot be
                started, or times out.
        """
        cmd = self.git_command + list(args)
        logger.debug(f"Running: {' '.join(cmd)} (cwd={cwd or '.'})")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(cwd) if cwd else None,
                timeout=self.config.git_timeout,
            )
        except FileNotFoundError:
            raise ExternalCommandFailedError(
                cmd, COMMAND_NOT_FOUND, f"{self.git_command[0]}: command not found"
            )
        except subprocess.TimeoutExpired:
            raise ExternalCommandFailedError(
                cmd, 1, f"timed out after {self.config.git_timeout} seconds"
            )

        if result.stdout:
            logger.debug(result.stdout.rstrip())
        if result.stderr:
            logger.debug(result.stderr.rstrip())

        if result.returncode != 0:
            raise ExternalCommandFailedError(cmd, result.returncode, result.stderr or "")

        return result

    def clone(self, source: str, destination: Path, ssh_command: str) -> None:
        """
        Clone a repository, authenticating with the given SSH command.

        Args:
            source: SSH address of the repository.
            destination: Directory to clone into. Must not exist.
            ssh_command: Value for ``core.sshCommand`` during the clone.
        """
        logger.info(f"Cloning repository: {source}")
        self.run([
            "clone",
            "--config", f"core.sshCommand={ssh_command}",
            source,
            str(destination),
        ])
        logger.info(f"Repository cloned to: {destination}")

    def set_local_config(self, repo_path: Path, key: str, value: str) -> None:
        """Set a repository-local configuration value."""
        logger.debug(f"Setting {key} in {repo_path}")
        self.run(["config", "--local", key, value], cwd=repo_path)

    def configure_identity(self, repo_path: Path, identity: Identity) -> None:
        """
        Bind a repository to an identity.

        Sets the SSH command, user name and user e-mail in the
        repository's local configuration, stopping at the first failure.
        """
        username = identity.read_username()
        email = identity.read_noreply_email()

        self.set_local_config(repo_path, "core.sshCommand", identity.ssh_command())
        self.set_local_config(repo_path, "user.name", username)
        self.set_local_config(repo_path, "user.email", email)

        logger.info(f"Repository {repo_path} configured for identity {identity.name} ({username})")
