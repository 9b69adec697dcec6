"""Small wrapper to run the jobblueprint CLI with `python startcli.py ...`.

Forwards all command-line arguments to `jobblueprint.cli.main` so the
generator can be run from a checkout without installing it.
"""
from __future__ import annotations

import sys

from jobblueprint.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
