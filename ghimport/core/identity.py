"""
Data model for an SSH identity.

An identity is a named bundle of files in the SSH directory: the private
and public keys plus two metadata files holding the GitHub user name and
no-reply e-mail that commits should be attributed to.
"""

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from ghimport.core.exceptions import IdentityFileError

PRIVATE_KEY = "Private key"
PUBLIC_KEY = "Public key"
USER_NAME = "User name"
NOREPLY_EMAIL = "No-reply e-mail"


@dataclass(frozen=True)
class Identity:
    """The four files that make up one GitHub SSH identity."""

    name: str
    ssh_dir: Path

    def __post_init__(self):
        object.__setattr__(self, "ssh_dir", Path(self.ssh_dir).expanduser())

    @property
    def private_key(self) -> Path:
        return self.ssh_dir / self.name

    @property
    def public_key(self) -> Path:
        return self.ssh_dir / f"{self.name}.pub"

    @property
    def username_file(self) -> Path:
        return self.ssh_dir / f"{self.name}.username"

    @property
    def noreply_email_file(self) -> Path:
        return self.ssh_dir / f"{self.name}.noreplyemail"

    def required_files(self) -> Dict[str, Path]:
        """Map each file category to its expected path, in reporting order."""
        return {
            PRIVATE_KEY: self.private_key,
            PUBLIC_KEY: self.public_key,
            USER_NAME: self.username_file,
            NOREPLY_EMAIL: self.noreply_email_file,
        }

    def read_username(self) -> str:
        return self._read_first_line(self.username_file)

    def read_noreply_email(self) -> str:
        return self._read_first_line(self.noreply_email_file)

    def ssh_command(self) -> str:
        """SSH command that authenticates with this identity's private key."""
        return f"ssh -i {shlex.quote(self.private_key.as_posix())}"

    @staticmethod
    def _read_first_line(path: Path) -> str:
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except UnicodeDecodeError:
            raise IdentityFileError(str(path), "not valid UTF-8")
        except OSError as e:
            raise IdentityFileError(str(path), e.strerror or "cannot be read")
        value = lines[0].strip() if lines else ""
        if not value:
            raise IdentityFileError(str(path))
        return value
