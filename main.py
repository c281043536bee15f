#!/usr/bin/env python3
"""
Dungeon Pathfinder

Generates maze dungeons and finds shortest paths through them with
breadth-first search, including dungeons with keys and locked doors.
"""

import sys

from dungeon_pathfinder.cli import main

if __name__ == "__main__":
    sys.exit(main())
