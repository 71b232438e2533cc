#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PseudoQ_Canonical

Canonical keys for 4 x 4 grids: the lexicographically smallest serialization
reachable from a grid under a chosen set of symmetries.

    -- relabel-only:  24 digit permutations,
    -- full:          128 geometric transforms X 24 digit permutations
                      = 3072 candidates.

Two grids belong to the same class iff their keys (computed with the same
symmetry set) coincide.

Created in October 2026

@author: AlexPfaff
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple
import pandas as pd

from PsQ_Grid import Grid
from PsQ_Symmetry import GeometryGroup, GeometryTransform, LabelGroup, LabelPermutation


@dataclass(frozen=True)
class CandidateRecord:
    """
    One candidate of a full canonicalization:
        geometry    -- transform applied first,
        permutation -- relabeling applied to the transformed grid,
        key         -- serialization of the result,
        is_best     -- see canonical_full / canonical_full_trace.
    """
    geometry: GeometryTransform
    permutation: LabelPermutation
    key: str
    is_best: bool = False


Observer = Callable[[CandidateRecord], None]



def canonical_relabelOnly(grid: Grid, perms: LabelGroup) -> Tuple[str, Grid]:
    """
    Minimal serialization of `grid` over all digit permutations in `perms`.

    Ties are resolved in favour of the permutation met first in enumeration
    order; the key is the same either way.

    Returns
    -------
    (key, representative)
        the minimal serialization and the relabeled grid producing it.
    """
    best_key: Optional[str] = None
    best_grid: Optional[Grid] = None
    for perm in perms.enumerate_all():
        candidate = LabelGroup.apply(grid, perm)
        key = candidate.serialize()
        if best_key is None or key < best_key:
            best_key, best_grid = key, candidate
    if best_key is None:
        raise ValueError("Empty label group: nothing to canonicalize over")
    return best_key, best_grid



def canonical_full(grid: Grid,
                   geos: GeometryGroup,
                   perms: LabelGroup,
                   observer: Optional[Observer] = None
                   ) -> str:
    """
    Minimal serialization of `grid` over geometry X labels.

    Every geometry transform (outer loop) is applied first, then every
    permutation (inner loop) to the transformed grid.

    Parameters
    ----------
    observer : callable, optional
        Called once per candidate with a CandidateRecord whose `is_best`
        flag tells whether that candidate strictly lowered the running
        minimum. Diagnostics only; the result does not depend on it.

    Returns
    -------
    str
        the canonical key.
    """
    notify = observer or (lambda record: None)  # No-op if None
    best_key: Optional[str] = None
    label_perms = perms.enumerate_all()

    for geo in geos.enumerate_all():
        moved = GeometryGroup.apply(grid, geo)
        for perm in label_perms:
            key = LabelGroup.apply(moved, perm).serialize()
            improved = best_key is None or key < best_key
            if improved:
                best_key = key
            notify(CandidateRecord(geometry=geo, permutation=perm, key=key, is_best=improved))

    if best_key is None:
        raise ValueError("Empty symmetry set: nothing to canonicalize over")
    return best_key



def canonical_full_trace(grid: Grid,
                         geos: GeometryGroup,
                         perms: LabelGroup
                         ) -> Tuple[str, List[CandidateRecord]]:
    """
    As canonical_full, but returns every candidate in traversal order.
    Exactly one record is flagged `is_best`: the first one that produced
    the final key.
    """
    records: List[CandidateRecord] = []
    key = canonical_full(grid, geos, perms, observer=records.append)

    winner = next(i for i, r in enumerate(records) if r.key == key)
    records = [replace(r, is_best=(i == winner)) for i, r in enumerate(records)]
    return key, records



# * * * * * * * * * * * * * *  key functions for bucketing  * * * * * * * * * * * * * *

def relabel_keyFn(perms: LabelGroup) -> Callable[[Grid], str]:
    def key_fn(grid: Grid) -> str:
        return canonical_relabelOnly(grid, perms)[0]
    return key_fn


def full_keyFn(geos: GeometryGroup, perms: LabelGroup) -> Callable[[Grid], str]:
    def key_fn(grid: Grid) -> str:
        return canonical_full(grid, geos, perms)
    return key_fn



def trace_toFrame(records: List[CandidateRecord]) -> pd.DataFrame:
    """
    Tabulates a canonicalization trace; one row per candidate with columns
    geo_index, geometry, permutation, key, is_best.
    """
    return pd.DataFrame(
        [(r.geometry.index, r.geometry.label, r.permutation.label, r.key, r.is_best)
         for r in records],
        columns=["geo_index", "geometry", "permutation", "key", "is_best"],
    )
