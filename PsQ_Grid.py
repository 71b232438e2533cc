#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PseudoQ_Grid  (4 x 4 edition)

The Syntax of Sudoku Grids, Part A: Local Infrastructure

Created in Spring 2020; revised winter 2022/23, spring 2025;
cut down to the 4 x 4 census in autumn 2026

@author: AlexPfaff

"""

from __future__ import annotations
import numpy as np
from typing import Iterator, Optional, Sequence, Union

from utilFunX import _str_toSeq, _type_checker, _infer_basenumber, _is_valid_unit

# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

# Allows string input for convenience (e.g. "1234341221434321"), parsed via _str_toSeq
SequenceLike = Union[str, Sequence[int], np.ndarray]


class Grid:
    """
        Provides a (2 x 2) X (2 x 2) Sudoku Grid: 16 cells, row-major,
        cell index = row * 4 + col (0-based throughout).

        Cell values are 1 .. 4; 0 marks an empty cell, which only occurs
        transiently while the completion search is running.

        An illustration; the following grid:

                *****************
                * 1 | 2 * 3 | 4 *
                *-------*-------*
                * 3 | 4 * 1 | 2 *
                *****************
                * 2 | 1 * 4 | 3 *
                *-------*-------*
                * 4 | 3 * 2 | 1 *
                *****************

           serializes to "1234341221434321"; this string is the sole
           identity and ordering key of a grid (equality, hashing and `<`
           all go through it).

           Except for `set` (reserved for the search), no method changes
           a grid that has been handed out; symmetry operations produce
           new Grid objects.
    """

    """ Fixed setting 4 x 4 Sudoku at the class level """
    _BASE_NUMBER: int = 2
    _DIMENSION: int = _BASE_NUMBER**2
    _SIZE: int = _DIMENSION**2

    def __init__(self, seq: Optional[SequenceLike] = None):
        self._arrayGrid = np.zeros(shape=(self._DIMENSION, self._DIMENSION), dtype=np.int8)
        if seq is not None:
            self.insert(seq, automatic_check=False)


    def __str__(self) -> str:
        """Returns a human-readable summary of the current grid state."""
        return (
            f"Grid[\n"
            f"  cells           : {self.serialize()}\n"
            f"  is initialized  : {self.is_initialized()}\n"
            f"  is valid        : {self.is_valid()}\n"
            f"]"
        )

    def __repr__(self) -> str:
        return f"Grid('{self.serialize()}')"

    def __eq__(self, other: Grid) -> bool:
        """Checks strict equality based on grid array contents."""
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._arrayGrid, other._arrayGrid)

    def __lt__(self, other: Grid) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.serialize() < other.serialize()

    def __hash__(self) -> int:
        return hash(self.serialize())

    def __getitem__(self, idx: int) -> int:
        return int(self._arrayGrid.flat[idx])

    def __iter__(self) -> Iterator[int]:
        return iter(int(v) for v in self._arrayGrid.flatten())


    @property
    def BASE_NUMBER(self):
        return self._BASE_NUMBER

    @property
    def DIMENSION(self):
        return self._DIMENSION

    @property
    def SIZE(self):
        return self._SIZE


# * * * * * * * * * * * * * *  INVENTORY  * * * * * * * * * * * * * * * * * * *

    """ 0.    INSERT a GRID """

    def insert(self, seq: SequenceLike, automatic_check: bool = True) -> None:
        """
        inserts a sequence of 16 integer values into this Grid.

        Parameters
        ----------
        seq : SequenceLike
            list, tuple, digit string or NumPy array (any shape) holding
            exactly 16 values from 0 .. 4, row-major.
        automatic_check : bool, default=True
            If True (default), the sequence must form a complete valid grid.
            Set to False to accept partial grids (zeros); the search does.

        Raises
        ------
        ValueError
            - If the sequence does not contain exactly 16 cells.
            - If it contains non-integer values or values outside 0 .. 4.
            - If `automatic_check` is True and the grid is not a valid
              complete Sudoku grid.
        """
        if isinstance(seq, str):
            seq = _str_toSeq(seq)

        arr = np.asarray(seq).flatten()
        _type_checker(arr)

        if arr.shape[0] != self.SIZE:
            raise ValueError(f"The sequence submitted does not contain the required number of cells: {self.SIZE}")
        if np.any(arr < 0) or np.any(arr > self.DIMENSION):
            raise ValueError(f"Cell values must lie in 0 .. {self.DIMENSION}; submitted: {arr.tolist()}")

        if automatic_check:
            if not Grid._from_array(arr).is_valid():
                raise ValueError("Not a valid Sudoku Grid!")

        self._quick_insert(arr)

    def _quick_insert(self, arr: np.ndarray) -> None:
        self._arrayGrid = np.array(arr, dtype=np.int8).reshape(self.DIMENSION, self.DIMENSION)


    def is_initialized(self) -> bool:
        """Return True if grid contains no zeros."""
        return not (0 in self._arrayGrid)

    def setZero(self) -> None:
        """
        Empties the grid by setting all values to zero
        """
        self._arrayGrid[:] = 0


    @classmethod
    def from_grid(cls, grid: SequenceLike, automatic_check: bool = False) -> Grid:
        """
        Class method to instantiate a Grid object from a given sequence/array.

        Parameters
        ----------
        grid : SequenceLike
            16 values, e.g. "1234341221434321" or a (4, 4) array.
        automatic_check : bool, default=False
            Require a complete valid grid (see `insert`).

        Returns
        -------
        Grid
            A new instance holding `grid`.

        Raises
        ------
        ValueError
            If the length is not a power of 4, or the base number inferred
            from it is not 2 (only 4 x 4 grids are supported).
        """
        if isinstance(grid, str):
            grid = _str_toSeq(grid)
        grid = np.asarray(grid).flatten()
        basenumber = _infer_basenumber(len(grid))
        if basenumber != cls._BASE_NUMBER:
            raise ValueError(f"Only {cls._DIMENSION} x {cls._DIMENSION} grids are supported; "
                             f"submitted base number: {basenumber}")
        g = Grid()
        g.insert(grid, automatic_check=automatic_check)
        return g

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> Grid:
        """ aux-method: wraps an array produced by a trusted transform, no checks """
        g = Grid()
        g._quick_insert(arr)
        return g

    def copy(self) -> Grid:
        return Grid._from_array(self._arrayGrid.copy())



    """ A.    VISUAL """

    def showGrid(self) -> None:
        """prints out the current grid as Sudoku grid """
        grdLen: int = (self.DIMENSION * 2 + self.BASE_NUMBER*2 + 1)
        print()
        print("-" * grdLen)
        for i in range(self.DIMENSION):
            print("|", end=" ")
            for u in range(self.DIMENSION):
                print(self._arrayGrid[i, u], end=" ")
                if u % self.BASE_NUMBER == self.BASE_NUMBER - 1:
                    print("|", end=" ")
            print()
            if (i+1) % self.BASE_NUMBER == 0:
                print("-" * grdLen)



    """ B.    VALUES / Value TUPLES / ARRAYS (by COORDINATE) """

    def _check_coord(self, r: int, c: int) -> None:
        if not (0 <= r < self.DIMENSION and 0 <= c < self.DIMENSION):
            raise ValueError(f"Invalid coordinate ({r}, {c}); choose 0 - {self.DIMENSION - 1}")

    def get(self, r: int, c: int) -> int:
        """ returns the value in row r, column c """
        self._check_coord(r, c)
        return int(self._arrayGrid[r, c])

    def set(self, r: int, c: int, value: int) -> None:
        """
        writes value into row r, column c;
        only meant for grids under construction (the completion search).
        """
        self._check_coord(r, c)
        if not (0 <= value <= self.DIMENSION):
            raise ValueError(f"Invalid value {value} (choose 0 - {self.DIMENSION})")
        self._arrayGrid[r, c] = value

    def gridRow(self, r: int) -> np.ndarray:
        """ returns the values in row r as array """
        if r < 0 or r >= self.DIMENSION:
            raise ValueError(f"Invalid row number (choose 0 - {self.DIMENSION - 1})")
        return self._arrayGrid[r, :].copy()

    def gridCol(self, c: int) -> np.ndarray:
        """ returns the values in column c as array """
        if c < 0 or c >= self.DIMENSION:
            raise ValueError(f"Invalid column number (choose 0 - {self.DIMENSION - 1})")
        return self._arrayGrid[:, c].copy()

    def gridBox(self, box_row: int, box_col: int) -> np.ndarray:
        """
        Returns the values in the box at (box_row, box_col) as (flattened) array;
        in order to re-box-ify: .gridBox(br, bc).reshape(2, 2)
        """
        if not (0 <= box_row < self.BASE_NUMBER and 0 <= box_col < self.BASE_NUMBER):
            raise ValueError(f"Invalid box coordinate ({box_row}, {box_col}); choose 0 - {self.BASE_NUMBER - 1}")
        row_start: int = box_row * self.BASE_NUMBER
        col_start: int = box_col * self.BASE_NUMBER
        box_out: np.ndarray = self._arrayGrid[row_start:row_start+self.BASE_NUMBER,
                                              col_start:col_start+self.BASE_NUMBER]
        return box_out.flatten()

    def grid_toArray(self, shape=(16,)) -> np.ndarray:
        """
        returns the current grid as a numpy array (a copy);
        shape must be reshapeable in accordance with self.SIZE.
        """
        return self._arrayGrid.copy().reshape(shape)

    def serialize(self) -> str:
        """
        Returns the row-major concatenation of the 16 cell digits;
        e.g. "1234341221434321", or "1000000000000000" during the search.
        """
        return "".join(map(str, self._arrayGrid.flatten()))

    grid_toString = serialize



    """ C.    CHECK the GRID   """

    @classmethod
    def is_validLine(cls, values: Sequence[int], ignore_incomplete: bool = False) -> bool:
        """
        Checks a single unit of four values.

        With ignore_incomplete=True zeros are wildcards (partial search
        states); with False every value must be one of 1 .. 4 and all of
        them distinct.
        """
        return _is_valid_unit(values, dimension=cls._DIMENSION,
                              ignore_incomplete=ignore_incomplete)

    def is_validRow(self, r: int, ignore_incomplete: bool = False) -> bool:
        return self.is_validLine(self.gridRow(r), ignore_incomplete)

    def is_validCol(self, c: int, ignore_incomplete: bool = False) -> bool:
        return self.is_validLine(self.gridCol(c), ignore_incomplete)

    def is_validBox(self, box_row: int, box_col: int, ignore_incomplete: bool = False) -> bool:
        return self.is_validLine(self.gridBox(box_row, box_col), ignore_incomplete)

    def is_valid(self, ignore_incomplete: bool = False) -> bool:
        """
        Checks all 4 rows, all 4 columns and all 4 boxes.

        Parameters
        ----------
        ignore_incomplete : bool, default=False
            False: the grid must be complete and valid according to Sudoku
                rules (each digit 1 - 4 exactly once per row, column, box).
            True: zeros are ignored; only conflicts among the filled cells
                count (used for pruning during the search).

        Returns
        -------
        bool
        """
        for i in range(self.DIMENSION):
            if not self.is_validRow(i, ignore_incomplete):
                return False
            if not self.is_validCol(i, ignore_incomplete):
                return False
        for box_row in range(self.BASE_NUMBER):
            for box_col in range(self.BASE_NUMBER):
                if not self.is_validBox(box_row, box_col, ignore_incomplete):
                    return False
        return True



    """ D.    RELABEL KEY (top row) """

    def topRow_key(self) -> str:
        """
        Returns the serialization of this grid recoded such that its top
        row reads 1 2 3 4. Every relabeling of a complete grid maps to the
        same top-row key, so it identifies the class of grids that are
        distributionally identical (= differ by value substitution only).

        Raises
        ------
        ValueError
            If the grid is not complete and valid.
        """
        if not self.is_valid():
            raise ValueError("Invalid grids cannot be translated!")

        top_row = self._arrayGrid[0]
        # lut[old value] = new value; 0 stays 0
        lut = np.zeros(self.DIMENSION + 1, dtype=np.int8)
        lut[top_row] = np.arange(1, self.DIMENSION + 1)
        return "".join(map(str, lut[self._arrayGrid].flatten()))

    def is_relabel_identical(self, other: Union[Grid, SequenceLike]) -> bool:
        """
        Checks for deep identity = distributional identity by testing whether
        both grids translate to the same top-row key.

        Parameters
        ----------
        other : Grid or SequenceLike [= str, list, tuple / np.ndarray]
            Grid object to be compared to this Grid.

        Returns
        -------
        bool
        """
        if isinstance(other, (str, Sequence, np.ndarray)):
            other = Grid.from_grid(other)

        if isinstance(other, Grid):
            return self.topRow_key() == other.topRow_key()

        raise ValueError(f"Grid object can only be compared to other Grid or grid sequence; submitted: {type(other)}")
