"""Display projection for the Grand Slam scorekeeper.

This package turns match states from `grandslam` into read-only scoreboard
snapshots so that front-ends (e.g., the Pygame GUI) can draw the current score
without re-implementing the scoring rules.
"""

from .snapshot import TROPHY_COUNT, COURT_ORDER, Scoreboard, SnapshotStream, pick_trophy, take_snapshot

__all__ = ["TROPHY_COUNT", "COURT_ORDER", "Scoreboard", "SnapshotStream", "pick_trophy", "take_snapshot"]
