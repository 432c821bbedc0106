"""Turns a drag gesture into a straight-line cell path."""

from __future__ import annotations

from typing import Optional

from ..core.constants import Bounds
from ..core.exceptions import SelectionError
from ..core.models import Cell, SelectionPath
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def line_path(anchor: Cell, cell: Cell) -> Optional[SelectionPath]:
    """Return every cell from ``anchor`` to ``cell`` inclusive, or ``None`` if not collinear."""

    delta_row = cell[0] - anchor[0]
    delta_col = cell[1] - anchor[1]
    if not (delta_row == 0 or delta_col == 0 or abs(delta_row) == abs(delta_col)):
        return None
    steps = max(abs(delta_row), abs(delta_col))
    if steps == 0:
        return (anchor,)
    step_row = delta_row // steps
    step_col = delta_col // steps
    return tuple((anchor[0] + i * step_row, anchor[1] + i * step_col) for i in range(steps + 1))


class SelectionTracker:
    """Tracks one drag gesture at a time.

    A hover over a cell that is not horizontal, vertical or diagonal to the
    anchor keeps the last valid path instead of clearing the selection.
    """

    def __init__(self, grid_size: int) -> None:
        self.bounds = Bounds(size=grid_size)
        self.anchor: Optional[Cell] = None
        self.path: SelectionPath = ()

    @property
    def is_active(self) -> bool:
        return self.anchor is not None

    def drag_start(self, cell: Cell) -> SelectionPath:
        if not self.bounds.contains(*cell):
            raise SelectionError(f"Drag started outside the grid at {cell}")
        self.anchor = cell
        self.path = (cell,)
        return self.path

    def drag_over(self, cell: Cell) -> SelectionPath:
        if self.anchor is None:
            return self.path
        if not self.bounds.contains(*cell):
            LOGGER.debug("Ignoring hover outside the grid at %s", cell)
            return self.path
        candidate = line_path(self.anchor, cell)
        if candidate is None:
            LOGGER.debug("Hover %s not collinear with anchor %s; keeping path", cell, self.anchor)
            return self.path
        self.path = candidate
        return self.path

    def drag_end(self) -> SelectionPath:
        final = self.path
        self.cancel()
        return final

    def cancel(self) -> None:
        self.anchor = None
        self.path = ()
