#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PseudoQ_Symmetry

The Syntax of Sudoku Grids, Part C: the two symmetry groups of the 4 x 4 grid

    -- 'vertical' symmetries = geometry: row swaps inside a band, column swaps
       inside a stack, band swap, stack swap, transposition (diaflection);
       7 independent flags ==> 2^7 = 128 transforms,
    -- 'horizontal' symmetries = labels: relabeling of the four digits
       ==> 4! = 24 permutations.

Both act on Grid objects without touching them: every application returns a
new Grid.

Created in October 2026

@author: AlexPfaff

"""

from __future__ import annotations
import numpy as np
from itertools import permutations
from dataclasses import dataclass, fields
from typing import Iterator, List, Sequence, Tuple

from PsQ_Grid import Grid


# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *
# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

""" A.    GEOMETRY """


@dataclass(frozen=True)
class GeometryTransform:
    """
    Descriptor of one geometric transform; fields in bit order
    (bit 0 = swap_r_band0 ... bit 6 = transpose):

        swap_r_band0  -- swap rows 0 <-> 1
        swap_r_band1  -- swap rows 2 <-> 3
        swap_bands    -- swap row pair (0, 1) <-> (2, 3)
        swap_c_stack0 -- swap cols 0 <-> 1
        swap_c_stack1 -- swap cols 2 <-> 3
        swap_stacks   -- swap col pair (0, 1) <-> (2, 3)
        transpose     -- reflect along the top-left <=> bottom-right axis

    The 128 flag sets generate the geometry group but are not a minimal
    presentation of it: different flag sets may describe the same map.
    """
    swap_r_band0: bool = False
    swap_r_band1: bool = False
    swap_bands: bool = False
    swap_c_stack0: bool = False
    swap_c_stack1: bool = False
    swap_stacks: bool = False
    transpose: bool = False

    _LABELS = ("r0", "r1", "B", "c0", "c1", "S", "T")

    def __post_init__(self):
        for f in fields(self):
            if not isinstance(getattr(self, f.name), (bool, np.bool_)):
                raise ValueError(f"Geometry flag {f.name} must be a bool; "
                                 f"submitted: {getattr(self, f.name)!r}")

    @property
    def flags(self) -> Tuple[bool, ...]:
        return tuple(bool(getattr(self, f.name)) for f in fields(self))

    @classmethod
    def from_index(cls, idx: int) -> GeometryTransform:
        """ transform #idx in binary counting order: flag k is set iff bit k of idx is set """
        if not (0 <= idx < 2**7):
            raise ValueError(f"Transform index must be 0 <= idx < 128; submitted: {idx}")
        return cls(*(bool(idx >> k & 1) for k in range(7)))

    @property
    def index(self) -> int:
        return sum(1 << k for k, flag in enumerate(self.flags) if flag)

    @property
    def label(self) -> str:
        """ compact description, e.g. 'r0.B|c1|T'; 'id' for the identity """
        flags = self.flags
        rows = ".".join(l for l, f in zip(self._LABELS[:3], flags[:3]) if f)
        cols = ".".join(l for l, f in zip(self._LABELS[3:6], flags[3:6]) if f)
        parts = [p for p in (rows, cols, "T" if flags[6] else "") if p]
        return "|".join(parts) if parts else "id"

    def is_identity(self) -> bool:
        return not any(self.flags)

    @staticmethod
    def _axis_order(inner_0: bool, inner_1: bool, outer: bool) -> List[int]:
        """
        aux-method
        new line i = old line order[i]; inner swaps first, then the pair swap
        """
        order = [0, 1, 2, 3]
        if inner_0:
            order[0], order[1] = order[1], order[0]
        if inner_1:
            order[2], order[3] = order[3], order[2]
        if outer:
            order = order[2:] + order[:2]
        return order

    def row_order(self) -> List[int]:
        return self._axis_order(self.swap_r_band0, self.swap_r_band1, self.swap_bands)

    def col_order(self) -> List[int]:
        return self._axis_order(self.swap_c_stack0, self.swap_c_stack1, self.swap_stacks)



class GeometryGroup:
    """
    The 128 geometric transforms of the 4 x 4 grid, built once per instance
    in binary counting order (index 0 = identity).
    """

    def __init__(self) -> None:
        self._transforms: Tuple[GeometryTransform, ...] = tuple(
            GeometryTransform.from_index(i) for i in range(2**7)
        )

    def __repr__(self) -> str:
        return f"<class 'GeometryGroup'> ({len(self)} transforms)"

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self) -> Iterator[GeometryTransform]:
        return iter(self._transforms)

    def enumerate_all(self) -> Tuple[GeometryTransform, ...]:
        return self._transforms

    @staticmethod
    def apply(grid: Grid, transform: GeometryTransform) -> Grid:
        """
        Applies `transform` to `grid` in three fixed stages:
            (1) rows:    band-internal swaps, then the band swap,
            (2) columns: stack-internal swaps, then the stack swap,
            (3) transposition.

        The stage order is part of the definition of a flag set; the
        128 images of a grid do not depend on it, single transforms do.

        Returns
        -------
        Grid
            a new grid; `grid` itself is left unchanged.
        """
        arr = grid.grid_toArray((Grid._DIMENSION, Grid._DIMENSION))
        arr = arr[transform.row_order(), :]
        arr = arr[:, transform.col_order()]
        if transform.transpose:
            arr = arr.T
        return Grid._from_array(np.ascontiguousarray(arr))



# * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * * *

""" B.    LABELS """


@dataclass(frozen=True)
class LabelPermutation:
    """
    Bijection on the digits 1 .. 4, held as its images:
    digit d is mapped to images[d-1]. Zeros (empty cells) stay zero.

        LabelPermutation((4, 3, 2, 1))  ==>  1->4, 2->3, 3->2, 4->1
    """
    images: Tuple[int, ...]

    def __post_init__(self):
        images = tuple(self.images)
        if len(images) != Grid._DIMENSION:
            raise ValueError(f"Proper permutation requires {Grid._DIMENSION} values; submitted: {images}")
        for v in images:
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, np.integer)):
                raise ValueError(f"Permutation images must be integers; submitted: {images}")
        if sorted(int(v) for v in images) != list(range(1, Grid._DIMENSION + 1)):
            raise ValueError(f"Permutation must be a bijection on 1 - {Grid._DIMENSION}; submitted: {images}")
        object.__setattr__(self, "images", tuple(int(v) for v in images))

    @classmethod
    def identity(cls) -> LabelPermutation:
        return cls(tuple(range(1, Grid._DIMENSION + 1)))

    @property
    def label(self) -> str:
        return "".join(map(str, self.images))

    def map(self, digit: int) -> int:
        if digit == 0:
            return 0
        return self.images[digit - 1]

    def inverse(self) -> LabelPermutation:
        inv = [0] * len(self.images)
        for d, img in enumerate(self.images, start=1):
            inv[img - 1] = d
        return LabelPermutation(tuple(inv))

    def lookup(self) -> np.ndarray:
        """ lookup table indexed by cell value: lut[0] = 0, lut[d] = images[d-1] """
        return np.array((0,) + self.images, dtype=np.int8)



class LabelGroup:
    """
    The 24 digit relabelings, built once per instance; order is that of an
    exhaustive 4-way selection without repetition, first coordinate
    outer-most (1234, 1243, 1324, ... 4321).
    """

    def __init__(self) -> None:
        self._permutations: Tuple[LabelPermutation, ...] = tuple(
            LabelPermutation(p) for p in permutations(range(1, Grid._DIMENSION + 1))
        )

    def __repr__(self) -> str:
        return f"<class 'LabelGroup'> ({len(self)} permutations)"

    def __len__(self) -> int:
        return len(self._permutations)

    def __iter__(self) -> Iterator[LabelPermutation]:
        return iter(self._permutations)

    def enumerate_all(self) -> Tuple[LabelPermutation, ...]:
        return self._permutations

    @staticmethod
    def apply(grid: Grid, perm: LabelPermutation) -> Grid:
        """ relabels every non-zero cell of `grid`; returns a new grid """
        arr = grid.grid_toArray((Grid._DIMENSION, Grid._DIMENSION))
        return Grid._from_array(perm.lookup()[arr])


def as_permutation(images: Sequence[int]) -> LabelPermutation:
    """ convenience: accepts a tuple/list or a digit string such as '4321' """
    if isinstance(images, str):
        images = tuple(int(c) for c in images)
    return LabelPermutation(tuple(images))
