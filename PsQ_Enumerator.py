#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PseudoQ_Enumerator

Exhaustive backtracking over the empty 4 x 4 grid: produces every complete
valid grid (there are 288 of them).

Created in October 2026

@author: AlexPfaff
"""

from __future__ import annotations
import numpy as np
from typing import Dict, List, Optional, Tuple
from tqdm import tqdm

from PsQ_Grid import Grid



class CompletionEnumerator:
    """
    Fills the cells 0 .. 15 in row-major order; at every cell each of the
    digits 1 .. 4 is tried, kept if the partial grid is still valid, and
    reset to 0 after its subtree has been explored.

    Parameters
    ----------
    incremental : bool, default=False
        False: every candidate is checked with `Grid.is_valid(ignore_incomplete=True)`,
               i.e. all rows, columns and boxes are re-validated from scratch.
        True:  candidates are checked against per row/column/box occupancy
               tables that are updated on set and undone on backtrack.
        Both modes produce the same solutions in the same order.
    history : bool, default=False
        If True, every (row, col) that receives a digit is recorded.
    progress : bool, default=False
        Show a tqdm bar over the four first-cell branches.
    """

    def __init__(self,
                 incremental: bool = False,
                 history: bool = False,
                 progress: bool = False) -> None:
        self.BASE_NUMBER: int = Grid._BASE_NUMBER
        self.DIMENSION: int = Grid._DIMENSION
        self.SIZE: int = Grid._SIZE
        self._incremental: bool = incremental
        self._progress: bool = progress
        self._history: bool = history
        self._history_list: Optional[List[Tuple[int, int]]] = [] if history else None
        self.grid: Grid = Grid()
        self._solutions: Dict[str, Grid] = {}
        self._reset_tables()

    @property
    def history(self) -> Optional[List[Tuple[int, int]]]:
        return self._history_list

    def _reset_tables(self) -> None:
        # used[unit, digit]: digit already placed in that row / col / box
        self._rows_used = np.zeros((self.DIMENSION, self.DIMENSION + 1), dtype=bool)
        self._cols_used = np.zeros((self.DIMENSION, self.DIMENSION + 1), dtype=bool)
        self._boxes_used = np.zeros((self.DIMENSION, self.DIMENSION + 1), dtype=bool)


    def enumerate(self) -> Tuple[Grid, ...]:
        """
        Runs the full search from the empty grid.

        Returns
        -------
        Tuple[Grid, ...]
            all complete valid grids, deduplicated by serialization, in the
            order they were found (= ascending serialization).

        Raises
        ------
        RuntimeError
            If a recorded solution fails `is_valid()`; that is a defect of
            the search, not a property of the input.
        """
        self.grid.setZero()
        self._reset_tables()
        self._solutions = {}
        if self._history:
            self._history_list = []

        for num in tqdm(range(1, self.DIMENSION + 1),
                        desc="Enumerating completions (first-cell branches)",
                        disable=not self._progress):
            self._try(0, num)

        for key, solution in self._solutions.items():
            if not solution.is_valid():
                raise RuntimeError(f"Search produced an invalid grid: {key}")

        return tuple(self._solutions.values())


    def _fill(self, idx: int) -> None:
        if idx == self.SIZE:
            self._record()
            return
        for num in range(1, self.DIMENSION + 1):
            self._try(idx, num)

    def _try(self, idx: int, num: int) -> None:
        row, col = divmod(idx, self.DIMENSION)
        if self._incremental:
            if not self._is_free(num, row, col):
                return
            self._place(num, row, col)
            self._fill(idx + 1)
            self._place(0, row, col, undo=num)
            return

        self.grid.set(row, col, num)
        if self.grid.is_valid(ignore_incomplete=True):
            if self._history:
                self._history_list.append((row, col))
            self._fill(idx + 1)
        self.grid.set(row, col, 0)  # Backtrack

    def _record(self) -> None:
        key = self.grid.serialize()
        if key not in self._solutions:
            self._solutions[key] = self.grid.copy()


    """ incremental bookkeeping """

    def _box_index(self, row: int, col: int) -> int:
        return (row // self.BASE_NUMBER) * self.BASE_NUMBER + col // self.BASE_NUMBER

    def _is_free(self, num: int, row: int, col: int) -> bool:
        return not (self._rows_used[row, num]
                    or self._cols_used[col, num]
                    or self._boxes_used[self._box_index(row, col), num])

    def _place(self, num: int, row: int, col: int, undo: int = 0) -> None:
        box = self._box_index(row, col)
        if undo:
            self._rows_used[row, undo] = False
            self._cols_used[col, undo] = False
            self._boxes_used[box, undo] = False
        else:
            self._rows_used[row, num] = True
            self._cols_used[col, num] = True
            self._boxes_used[box, num] = True
            if self._history:
                self._history_list.append((row, col))
        self.grid.set(row, col, num)



def enumerate_completions(incremental: bool = False, progress: bool = False) -> Tuple[Grid, ...]:
    """ one-shot convenience wrapper around CompletionEnumerator.enumerate() """
    return CompletionEnumerator(incremental=incremental, progress=progress).enumerate()
