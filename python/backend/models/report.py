"""Search report rendering and persistence."""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.node import SearchResult

logger = logging.getLogger(__name__)

PATH_ENTRIES_PER_LINE = 25


class ReportWriter:
    """Formats a ``SearchResult`` and writes it to a results file.

    The file is overwritten on every write; only the latest run is kept.
    """

    def __init__(self, filepath: Path, per_line: int = PATH_ENTRIES_PER_LINE) -> None:
        self.filepath = filepath
        self.per_line = per_line

    # -- formatting -----------------------------------------------------------

    @staticmethod
    def lines(result: SearchResult) -> list[str]:
        final = result.final_state.encode() if result.final_state is not None else "none"
        return [
            f"Starting State: {result.start.encode()}",
            f"Final State: {final}",
            f"Search Depth: {result.depth}",
            f"Node Count: {result.nodes_generated}",
        ]

    def path_lines(self, result: SearchResult) -> list[str]:
        """Return ``Start,`` then each move descriptor, wrapped per line."""
        entries = ["Start,"] + [f"{m}," for m in result.move_path]
        return [
            " ".join(entries[i : i + self.per_line])
            for i in range(0, len(entries), self.per_line)
        ]

    # -- persistence ----------------------------------------------------------

    def write(self, result: SearchResult) -> Path:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        body = self.lines(result) + self.path_lines(result)
        self.filepath.write_text("\n".join(body) + "\n")
        logger.info("Wrote %s report to %s", result.strategy.value, self.filepath)
        return self.filepath

    def read(self) -> str | None:
        if not self.filepath.exists():
            return None
        return self.filepath.read_text()
