#!/usr/bin/env python3
"""
ghimport - Main Entry Point

Clones a GitHub repository over SSH and binds it to a chosen SSH
identity, optionally merging the clone into an existing directory.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from ghimport.cli import main

if __name__ == "__main__":
    main()
