from __future__ import annotations

from dataclasses import dataclass


@dataclass
class WinLossRules:
    # Rows above this index are outside the safe zone.
    safe_zone_start_row: int = 4
    win_row_count: int = 5

    def is_losing_row(self, row: int) -> bool:
        return row < self.safe_zone_start_row

    def is_win(self, cleared_rows: int) -> bool:
        return cleared_rows >= self.win_row_count
