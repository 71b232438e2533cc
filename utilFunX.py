#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jul 23 19:22:21 2025
Shrunk to the 4 x 4 census in October 2026

@author: alexanderpfaff
"""

import numpy as np
from typing import Set, Iterable




def _str_toSeq(grid_str: str) -> np.ndarray:
    """
    Converts a grid string of digits to an integer array.

    Parameters
    ----------
    grid_str : str
        e.g. "1234341221434321"; '0' marks an empty cell.

    Returns
    -------
    np.ndarray
        one int8 entry per character.

    Raises
    ------
    ValueError
        If the string contains anything other than decimal digits.
    """
    types: Set[type] = set(
        int if c.isdigit()
        else None
        for c in grid_str
    )

    if len(types) != 1 or None in types:
        raise ValueError(f"The sequence contains invalid or mixed datatypes: {grid_str!r}")

    return np.array([int(c)
                     for c in grid_str],
                    dtype=np.int8)



def _type_checker(test_array: np.ndarray) -> None:

    # integer cells only; the census grids are never alphabetized
    dtype = test_array.dtype
    if not np.issubdtype(dtype, np.integer):
        raise ValueError(
            f"Invalid dtype for Grid: {dtype}. Expected integer type."
        )



def _infer_basenumber(grid_size: int) -> int:
    base = round(grid_size ** 0.25)
    if base ** 4 != grid_size:
        raise ValueError(f"Grid size {grid_size} is not a valid 4th power. Cannot infer base number.")
    return base




def _is_valid_unit(values: Iterable[int],
                   dimension: int,
                   ignore_incomplete: bool = False
                   ) -> bool:
    """
    Checks one Sudoku unit (row, column or box).

    Parameters
    ----------
    values : Iterable[int]
        the `dimension` cell values of the unit.
    dimension : int
        number of symbols; legal values are 1 .. dimension.
    ignore_incomplete : bool, default=False
        If True, zeros (empty cells) are wildcards and only the filled
        cells must be distinct. If False, zeros make the unit invalid.

    Returns
    -------
    bool
        False on a disallowed zero, a repeated non-zero value, or a value
        outside 1 .. dimension; True otherwise.
    """
    seen: Set[int] = set()
    for v in values:
        v = int(v)
        if v == 0:
            if ignore_incomplete:
                continue
            return False
        if v < 1 or v > dimension:
            return False
        if v in seen:
            return False
        seen.add(v)
    return True

