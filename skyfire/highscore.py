"""Durable best score, stored as a tiny JSON document."""

from __future__ import annotations

import json
import os
import time


class BestScoreStore:
    """
    Reads and writes ``{"best_score": int, "last_updated": iso}``.

    A missing, unreadable or malformed file reads as 0. Write failures are reported
    and swallowed so a read-only disk never stops the game.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            best = data.get("best_score", 0)
            if isinstance(best, bool) or not isinstance(best, int) or best < 0:
                raise ValueError(f"invalid best score: {best!r}")
            return best
        except Exception as e:
            print(f"Failed to read best score: {e}")
            return 0

    def save(self, best_score: int) -> bool:
        """Write ``best_score``; it is never lowered below what the file already holds."""
        best_score = max(best_score, self.load())
        data = {
            "best_score": best_score,
            "last_updated": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        }
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            return True
        except Exception as e:
            print(f"Failed to save best score: {e}")
            return False
