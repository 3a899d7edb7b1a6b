"""
Custom exceptions for the GitHub identity importer.

Provides a hierarchy of exceptions for the validation and import stages,
enabling precise error handling and clear failure reporting.
"""

from enum import Enum
from typing import List


class ErrorKind(Enum):
    """Kind of failure reported to the user."""
    INVALID_SOURCE_FORMAT = "InvalidSourceFormat"
    MISSING_IDENTITY_FILES = "MissingIdentityFiles"
    RESERVED_IDENTITY_NAME = "ReservedIdentityName"
    UNREADABLE_IDENTITY_FILE = "UnreadableIdentityFile"
    PARENT_NOT_FOUND = "ParentNotFound"
    PARENT_NOT_WRITABLE = "ParentNotWritable"
    UNKNOWN_OPTION = "UnknownOption"
    EXTERNAL_COMMAND_FAILED = "ExternalCommandFailed"


class ImportToolError(Exception):
    """Base exception for all importer errors."""

    kind: ErrorKind = None

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.stage:
            return f"[{self.stage}] {base_msg}"
        return base_msg


class ValidationError(ImportToolError):
    """Raised (or carried by a ValidationResult) when an argument is invalid."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Validation", details=details)


class InvalidSourceFormatError(ValidationError):
    """Source is not a GitHub SSH repository address."""

    kind = ErrorKind.INVALID_SOURCE_FORMAT

    def __init__(self, source: str):
        super().__init__(
            "Failed to parse source repository address, please provide a valid SSH URL\n"
            "(verify the URL points to a valid GitHub repository, uses user and "
            'host name "git@github.com", and ends in ".git")',
            details={"source": source},
        )


class MissingIdentityFilesError(ValidationError):
    """One or more of the four identity files is absent."""

    kind = ErrorKind.MISSING_IDENTITY_FILES

    def __init__(self, identity: str, missing: List[str]):
        lines = [f"{category} file not found" for category in missing]
        lines.extend([
            "Failed to find identity files, please ensure the SSH folder contains "
            "the following files of your Git/GitHub identity:",
            "- Private SSH key (e. g. my_id)",
            "- Public SSH key (e. g. my_id.pub)",
            "- User name (e. g. my_id.username)",
            "- No-reply e-mail (e. g. my_id.noreplyemail)",
        ])
        super().__init__(
            "\n".join(lines),
            details={"identity": identity, "missing": list(missing)},
        )
        self.missing = list(missing)


class ReservedIdentityNameError(ValidationError):
    """Identity name collides with a standard SSH file name."""

    kind = ErrorKind.RESERVED_IDENTITY_NAME

    def __init__(self, identity: str):
        super().__init__(
            f"Identity name {identity!r} is reserved for SSH configuration files, "
            "please choose a different name",
            details={"identity": identity},
        )


class ParentNotFoundError(ValidationError):
    """Destination's parent directory does not exist."""

    kind = ErrorKind.PARENT_NOT_FOUND

    def __init__(self, destination: str, parent: str):
        super().__init__(
            "Failed to process destination, parent directory does not exist",
            details={"destination": destination, "parent": parent},
        )


class ParentNotWritableError(ValidationError):
    """Destination's parent directory is not writable."""

    kind = ErrorKind.PARENT_NOT_WRITABLE

    def __init__(self, destination: str, parent: str):
        super().__init__(
            "Failed to process destination, no write permission in the parent directory",
            details={"destination": destination, "parent": parent},
        )


class UnknownOptionError(ImportToolError):
    """Raised when the command line names an option the tool does not know."""

    kind = ErrorKind.UNKNOWN_OPTION

    def __init__(self, option: str):
        super().__init__(f"Invalid option: {option}", details={"option": option})
        self.option = option


class ExternalCommandFailedError(ImportToolError):
    """Raised when a git invocation exits with a non-zero status."""

    kind = ErrorKind.EXTERNAL_COMMAND_FAILED

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        summary = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
        super().__init__(
            f"Command '{' '.join(command)}' failed with exit status {returncode}: {summary}",
            stage="Import",
            details={"command": list(command), "returncode": returncode, "stderr": stderr},
        )
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class IdentityFileError(ValidationError):
    """An identity's user name or e-mail file is empty or cannot be read."""

    kind = ErrorKind.UNREADABLE_IDENTITY_FILE

    def __init__(self, path: str, reason: str = "file is empty"):
        super().__init__(
            f"Identity file is unusable ({reason}): {path}",
            details={"path": path, "reason": reason},
        )


class BackupExistsError(ImportToolError):
    """Raised when the temporary backup directory is already present."""

    def __init__(self, backup: str):
        super().__init__(
            f"Backup directory already exists: {backup} "
            "(recover or remove it before importing again)",
            stage="Import",
            details={"backup": backup},
        )


class BackupPathError(ImportToolError):
    """Raised when no backup path can be derived for a destination."""

    def __init__(self, destination: str):
        super().__init__(
            f"Cannot set aside destination {destination}: it has no name to suffix",
            stage="Import",
            details={"destination": destination},
        )
