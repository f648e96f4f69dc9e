"""
Field size presets and terminal sizing arithmetic.

Screen layout, top to bottom:
    3 info panel lines
    1 border row
    field rows
    1 border row
    1 status line
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

INFO_PANEL_HEIGHT = 3
BORDER_SIZE = 2
STATUS_LINE_HEIGHT = 1


@dataclass(frozen=True)
class FieldSize:
    name: str
    width: int
    height: int

    @property
    def required_cols(self) -> int:
        return self.width + BORDER_SIZE

    @property
    def required_rows(self) -> int:
        return self.height + INFO_PANEL_HEIGHT + BORDER_SIZE + STATUS_LINE_HEIGHT

    def __str__(self):
        return f"{self.name} ({self.width}x{self.height})"


FIELD_SIZES: List[FieldSize] = [
    FieldSize("Tiny", 20, 10),
    FieldSize("Small", 30, 20),
    FieldSize("Medium", 40, 30),
    FieldSize("Large", 60, 40),
]


@dataclass(frozen=True)
class TerminalTooSmall:
    """
    Returned (never raised) when a field does not fit the terminal.
    """
    field: FieldSize
    rows: int
    cols: int

    @property
    def required_rows(self) -> int:
        return self.field.required_rows

    @property
    def required_cols(self) -> int:
        return self.field.required_cols

    def describe(self) -> List[str]:
        return [
            f"Selected: {self.field}",
            f"Required: {self.required_cols}x{self.required_rows}",
            f"Current:  {self.cols}x{self.rows}",
        ]


def find_field_size(name: str) -> FieldSize:
    """Look up a preset by name (case-insensitive)."""
    for size in FIELD_SIZES:
        if size.name.lower() == name.strip().lower():
            return size
    valid = ", ".join(size.name for size in FIELD_SIZES)
    raise ValueError(f"Unknown field size '{name}'. Choose one of: {valid}")


def check_size(field: FieldSize, rows: int, cols: int) -> Optional[TerminalTooSmall]:
    """
    Check whether a field fits a terminal of rows x cols.

    Returns:
        None if it fits, otherwise a TerminalTooSmall describing the shortfall
    """
    if rows >= field.required_rows and cols >= field.required_cols:
        return None
    return TerminalTooSmall(field=field, rows=rows, cols=cols)


def compute_offsets(field: FieldSize, rows: int, cols: int) -> Tuple[int, int]:
    """Return (offset_x, offset_y) that centre the game view in the terminal."""
    offset_x = max(0, (cols - field.required_cols) // 2)
    offset_y = max(0, (rows - field.required_rows) // 2)
    return offset_x, offset_y
