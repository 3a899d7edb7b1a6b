"""
Core module containing configuration and the exception hierarchy.
"""

from ghimport.core.config import Config, ImportConfig
from ghimport.core.identity import Identity
from ghimport.core.exceptions import (
    ErrorKind,
    ImportToolError,
    ValidationError,
    InvalidSourceFormatError,
    MissingIdentityFilesError,
    ReservedIdentityNameError,
    ParentNotFoundError,
    ParentNotWritableError,
    UnknownOptionError,
    ExternalCommandFailedError,
    IdentityFileError,
    BackupExistsError,
    BackupPathError,
)

__all__ = [
    "Config",
    "ImportConfig",
    "Identity",
    "ErrorKind",
    "ImportToolError",
    "ValidationError",
    "InvalidSourceFormatError",
    "MissingIdentityFilesError",
    "ReservedIdentityNameError",
    "ParentNotFoundError",
    "ParentNotWritableError",
    "UnknownOptionError",
    "ExternalCommandFailedError",
    "IdentityFileError",
    "BackupExistsError",
    "BackupPathError",
]
