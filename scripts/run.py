#!/usr/bin/env python
"""CLI for Narration Sync."""

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from narration_sync.cli import main


if __name__ == "__main__":
    sys.exit(main())
