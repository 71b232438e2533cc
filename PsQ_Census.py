#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PseudoQ_Census

The 4 x 4 census: enumerate all complete grids, collapse them under digit
relabeling, then under relabeling combined with geometry.

    288 grids  -->  12 relabel-classes  -->  2 fully-symmetric classes

Run as a script to print the counts; `--trace` adds the candidate table
of the first representative.

Created in October 2026

@author: AlexPfaff
"""

from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List, Optional
import pandas as pd

from PsQ_Grid import Grid
from PsQ_Symmetry import GeometryGroup, LabelGroup
from PsQ_Enumerator import CompletionEnumerator
from PsQ_Canonical import canonical_full_trace, full_keyFn, relabel_keyFn, trace_toFrame
from PsQ_Buckets import BucketMap, bucket_summary, build_buckets, canonical_representatives


EXPECTED_SOLUTIONS: int = 288
EXPECTED_RELABEL_CLASSES: int = 12
EXPECTED_FULL_CLASSES: int = 2



@dataclass
class CensusResult:
    """
    Output of one pipeline run (build-once, read-only):
        solutions                -- all complete grids, discovery order,
        relabel_buckets          -- solutions by relabel-only key,
        representatives          -- canonical grid of every relabel bucket,
        full_buckets             -- solutions by full key (direct path),
        representative_buckets   -- representatives by full key (12 -> 2 path).
    """
    geometries: GeometryGroup
    labels: LabelGroup
    solutions: tuple
    relabel_buckets: BucketMap
    representatives: List[Grid]
    full_buckets: BucketMap
    representative_buckets: BucketMap

    @property
    def n_solutions(self) -> int:
        return len(self.solutions)

    @property
    def n_relabel_classes(self) -> int:
        return len(self.relabel_buckets)

    @property
    def n_full_classes(self) -> int:
        return len(self.full_buckets)



def run_census(progress: bool = False, incremental: bool = False) -> CensusResult:
    """
    Runs the whole pipeline once.

    Raises
    ------
    RuntimeError
        If the direct path (all grids -> full key) and the indirect path
        (relabel representatives -> full key) disagree on the set of keys.
    """
    geos = GeometryGroup()
    perms = LabelGroup()

    solutions = CompletionEnumerator(incremental=incremental, progress=progress).enumerate()

    relabel_buckets = build_buckets(solutions, relabel_keyFn(perms), progress=progress,
                                    desc="Relabel-only canonicalization")
    reps = canonical_representatives(relabel_buckets)

    full_key = full_keyFn(geos, perms)
    full_buckets = build_buckets(solutions, full_key, progress=progress,
                                 desc="Full canonicalization (all grids)")
    rep_buckets = build_buckets(reps, full_key, progress=progress,
                                desc="Full canonicalization (representatives)")

    if set(full_buckets) != set(rep_buckets):
        raise RuntimeError(f"Full-symmetry classes disagree: {sorted(full_buckets)} "
                           f"(direct) vs. {sorted(rep_buckets)} (via representatives)")

    return CensusResult(geometries=geos,
                        labels=perms,
                        solutions=solutions,
                        relabel_buckets=relabel_buckets,
                        representatives=reps,
                        full_buckets=full_buckets,
                        representative_buckets=rep_buckets)



def report(result: CensusResult) -> None:
    """ prints the three counts and the class tables """
    print(f"complete grids            : {result.n_solutions:4}  (expected {EXPECTED_SOLUTIONS})")
    print(f"relabel-only classes      : {result.n_relabel_classes:4}  (expected {EXPECTED_RELABEL_CLASSES})")
    print(f"geometry x relabel classes: {result.n_full_classes:4}  (expected {EXPECTED_FULL_CLASSES})")
    print()
    print(bucket_summary(result.relabel_buckets).to_string())
    print()
    print(bucket_summary(result.full_buckets).to_string())



def show_trace(grid: Grid,
               geos: GeometryGroup,
               perms: LabelGroup,
               rows: Optional[int] = None) -> pd.DataFrame:
    """
    Prints the 3072 canonicalization candidates of `grid` (or the first
    `rows` of them) followed by the winner, and returns the full table.
    """
    key, records = canonical_full_trace(grid, geos, perms)
    frame = trace_toFrame(records)
    grid.showGrid()
    shown = frame if rows is None else frame.head(rows)
    with pd.option_context("display.max_rows", None):
        print(shown.to_string())
    print()
    print(f"winner: {frame[frame['is_best']].to_string(header=False)}")
    print(f"canonical key: {key}")
    return frame



def main(trace: bool = False) -> CensusResult:
    result = run_census(progress=True)
    report(result)
    if trace:
        show_trace(result.representatives[0], result.geometries, result.labels)
    return result



intro = ("\n\n\t\t====================================================\n"
         "\t\t*                                                  * \n"
         "\t\t*                  PSEUDO_Q  4 x 4                 * \n"
         "\t\t*                                                  * \n"
         "\t\t*            The syntax of Sudoku Grids            * \n"
         "\t\t*                                                  * \n"
         "\t\t*          census: 288 grids, 12 relabel-          * \n"
         "\t\t*          classes, 2 symmetry classes             * \n"
         "\t\t*                                                  * \n"
         "\t\t==================================================== ")


def cli(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="4 x 4 Sudoku census: 288 grids, 12 relabel-classes, 2 symmetry classes")
    parser.add_argument("--trace", action="store_true",
                        help="print the 3072 canonicalization candidates of the first representative")
    args = parser.parse_args(argv)
    print(intro)
    main(trace=args.trace)


if __name__ == '__main__':
    cli()
