"""
GitHub identity importer.

Clones GitHub repositories over SSH and binds each clone to a chosen
SSH identity: key pair, user name and no-reply e-mail.
"""

__version__ = "1.0.0"
__author__ = "ghimport contributors"
