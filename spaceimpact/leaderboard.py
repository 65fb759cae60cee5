"""Endless-mode leaderboard, kept as a small JSON file."""
from __future__ import annotations

import json
import logging
import os
import time
from typing import List, Optional, Sequence

from .settings import LEADERBOARD_PATH, LEADERBOARD_SIZE

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


def load_leaderboard(path: Optional[str] = None) -> List[int]:
    """Return stored scores, best first. Missing or corrupt data reads as empty."""
    path = path or LEADERBOARD_PATH
    # Structure: {"top": [ints], "last_updated": iso}
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        top = data.get("top", []) if isinstance(data, dict) else None
        if not isinstance(top, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in top
        ):
            raise ValueError("invalid structure")
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable leaderboard %s: %s", path, e)
        return []
    return sorted(top, reverse=True)[:LEADERBOARD_SIZE]


def save_leaderboard(top: Sequence[int], path: Optional[str] = None):
    path = path or LEADERBOARD_PATH
    data = {
        "top": sorted(top, reverse=True)[:LEADERBOARD_SIZE],
        "last_updated": _timestamp(),
    }
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        # A read-only disk must not end the game
        logger.warning("Could not save leaderboard to %s: %s", path, e)


def merge_score(top: Sequence[int], score: int) -> List[int]:
    merged = list(top)
    merged.append(score)
    return sorted(merged, reverse=True)[:LEADERBOARD_SIZE]
