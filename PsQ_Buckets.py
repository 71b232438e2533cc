#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PseudoQ_Buckets

Groups a collection of grids into equivalence classes ('buckets') by an
arbitrary canonical key function.

Created in October 2026

@author: AlexPfaff
"""

from __future__ import annotations
from collections import defaultdict
from typing import Callable, Dict, Iterable, List
import warnings
import pandas as pd
from tqdm import tqdm

from PsQ_Grid import Grid


BucketMap = Dict[str, List[Grid]]



def build_buckets(grids: Iterable[Grid],
                  canonicalize_fn: Callable[[Grid], str],
                  progress: bool = False,
                  desc: str = "Bucketing grids"
                  ) -> BucketMap:
    """
    Computes the canonical key of every grid and files the grid under it.

    Parameters
    ----------
    grids : Iterable[Grid]
        source collection; its order is kept inside every bucket.
    canonicalize_fn : Callable[[Grid], str]
        e.g. PsQ_Canonical.relabel_keyFn(perms) or full_keyFn(geos, perms).
    progress : bool, default=False
        show a tqdm bar labelled `desc`.

    Returns
    -------
    Dict[str, List[Grid]]
        key -> grids sharing it. No grid is dropped; equal grids end up in
        the same bucket, once per occurrence.
    """
    buckets: BucketMap = defaultdict(list)
    for grid in tqdm(grids, desc=desc, disable=not progress):
        buckets[canonicalize_fn(grid)].append(grid)

    if not buckets:
        warnings.warn("No grids submitted; returning an empty bucket map.", UserWarning)
    return dict(buckets)



def representatives(buckets: BucketMap) -> List[Grid]:
    """ first member (in discovery order) of every bucket """
    return [members[0] for members in buckets.values()]


def canonical_representatives(buckets: BucketMap) -> List[Grid]:
    """ the canonical key of every bucket, read back as a grid """
    return [Grid.from_grid(key) for key in buckets]


def bucket_sizes(buckets: BucketMap) -> Dict[str, int]:
    return {key: len(members) for key, members in buckets.items()}


def bucket_summary(buckets: BucketMap) -> pd.DataFrame:
    """
    One row per bucket: canonical key, number of members, first member;
    sorted by key.
    """
    frame = pd.DataFrame(
        [(key, len(members), members[0].serialize()) for key, members in buckets.items()],
        columns=["key", "size", "first_member"],
    )
    return frame.sort_values("key").reset_index(drop=True)
