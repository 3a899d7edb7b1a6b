"""
Input validation for the importer's three arguments.

Each validator returns a ValidationResult instead of raising, so the
command line can report every invalid argument in a single run.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from ghimport.core.config import Config
from ghimport.core.exceptions import (
    ErrorKind,
    IdentityFileError,
    InvalidSourceFormatError,
    MissingIdentityFilesError,
    ParentNotFoundError,
    ParentNotWritableError,
    ReservedIdentityNameError,
    ValidationError,
)
from ghimport.core.identity import Identity

# GitHub user names are at most 39 characters, repository names at most 100
GITHUB_SSH_SOURCE_PATTERN = re.compile(
    r"^git@github\.com:[A-Za-z0-9-]{1,39}/[A-Za-z0-9._-]{1,100}\.git$"
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one argument."""

    value: Optional[str]
    error: Optional[ValidationError] = None

    @classmethod
    def success(cls, value: str) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, value: Optional[str], error: ValidationError) -> "ValidationResult":
        return cls(value=value, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def raise_for_error(self) -> str:
        """Return the validated value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


def validate_source(source: Optional[str]) -> ValidationResult:
    """
    Validate a GitHub repository SSH address.

    Args:
        source: Address as copied from the repository's "Code" button,
            e.g. ``git@github.com:owner/repo.git``.

    Returns:
        ValidationResult carrying the unchanged address on success.
    """
    if source and GITHUB_SSH_SOURCE_PATTERN.match(source):
        return ValidationResult.success(source)
    return ValidationResult.failure(source, InvalidSourceFormatError(source or ""))


def validate_identity(
    identity: Optional[str],
    ssh_dir: Optional[str] = None,
    restricted_names: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """
    Validate that an identity's four files are present in the SSH directory.

    Every file is checked, so the failure lists all the missing ones.
    File names must match directory entries exactly, including case. The
    user name and no-reply e-mail files must also hold a readable value.

    Args:
        identity: Identity name, i.e. the private key's file name.
        ssh_dir: Directory to look in. Defaults to the configured one.
        restricted_names: Names that may not be used as identities.
            Defaults to the configured list.

    Returns:
        ValidationResult carrying the identity name on success.
    """
    config = Config.get()
    ssh_dir = ssh_dir if ssh_dir is not None else config.ssh_dir
    if restricted_names is None:
        restricted_names = config.restricted_identity_names

    if not identity or identity in set(restricted_names):
        return ValidationResult.failure(identity, ReservedIdentityNameError(identity or ""))

    bundle = Identity(identity, ssh_dir)

    # Names with a path component never match an entry of the SSH directory
    if Path(identity).name != identity:
        entries = set()
    else:
        entries = _list_directory(bundle.ssh_dir)

    missing: List[str] = [
        category
        for category, path in bundle.required_files().items()
        if path.name not in entries
    ]

    if missing:
        return ValidationResult.failure(identity, MissingIdentityFilesError(identity, missing))

    try:
        bundle.read_username()
        bundle.read_noreply_email()
    except IdentityFileError as e:
        return ValidationResult.failure(identity, e)

    return ValidationResult.success(identity)


def validate_destination(destination: Optional[str]) -> ValidationResult:
    """
    Validate that a destination can be created or replaced.

    The destination itself may or may not exist; only its parent directory
    has to exist and be writable by the current user.

    Args:
        destination: Local path, ``~`` is expanded.

    Returns:
        ValidationResult carrying the unchanged destination on success.
    """
    if not destination:
        return ValidationResult.failure(destination, ParentNotFoundError("", ""))

    parent = Path(os.path.expanduser(destination)).resolve().parent

    if not parent.is_dir():
        return ValidationResult.failure(
            destination, ParentNotFoundError(destination, str(parent))
        )

    if not os.access(parent, os.W_OK):
        return ValidationResult.failure(
            destination, ParentNotWritableError(destination, str(parent))
        )

    return ValidationResult.success(destination)


def resolve_destination(destination: str) -> Path:
    """Expand ``~`` and make a destination path absolute."""
    return Path(os.path.abspath(os.path.expanduser(destination)))


def _list_directory(directory: Path) -> set:
    try:
        return set(os.listdir(directory))
    except (FileNotFoundError, NotADirectoryError, PermissionError):
        return set()
