"""
Repository import module.

Handles cloning over SSH, merging into existing directories, and binding
the clone to an identity.
"""

from ghimport.importing.git_handler import GitHandler
from ghimport.importing.importer import ImportOutcome, RepositoryImporter

__all__ = [
    "GitHandler",
    "ImportOutcome",
    "RepositoryImporter",
]
