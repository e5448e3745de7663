"""Simple launcher for the interactive bus route planner.

Optionally takes the routes CSV as first argument, otherwise the
planner asks for it.
"""

from __future__ import annotations

import sys

from route_planner.cli import main

if __name__ == "__main__":
    sys.exit(main())
