from __future__ import annotations

from collections import Counter

import pandas as pd

from PsQ_Canonical import (
    CandidateRecord,
    canonical_full,
    canonical_full_trace,
    canonical_relabelOnly,
    full_keyFn,
    relabel_keyFn,
    trace_toFrame,
)
from PsQ_Grid import Grid
from PsQ_Symmetry import GeometryGroup, GeometryTransform, LabelGroup, LabelPermutation
from conftest import SAMPLE


def test_relabel_only_key_of_sample_is_itself(sample_grid, perms):
    key, rep = canonical_relabelOnly(sample_grid, perms)
    assert key == SAMPLE
    assert rep == sample_grid


def test_relabel_only_key_matches_top_row_key(solutions, perms):
    for grid in solutions:
        key, rep = canonical_relabelOnly(grid, perms)
        assert key == grid.topRow_key()
        assert rep.serialize() == key
        assert rep.is_valid()


def test_relabel_only_key_is_invariant_under_relabeling(solutions, perms):
    key_of = {g.serialize(): canonical_relabelOnly(g, perms)[0] for g in solutions}
    for grid in solutions:
        key = key_of[grid.serialize()]
        for p in perms:
            assert key_of[LabelGroup.apply(grid, p).serialize()] == key


def test_relabel_only_tie_keeps_first_permutation(perms):
    # an empty grid looks the same under every permutation
    empty = Grid()
    key, rep = canonical_relabelOnly(empty, perms)
    assert key == "0" * 16
    assert rep == empty


def test_full_key_of_global_minimum_is_itself(sample_grid, geos, perms):
    assert canonical_full(sample_grid, geos, perms) == SAMPLE


def test_full_key_is_invariant_under_the_group(census):
    # every image of a solution is a solution, so its key is already known
    key_of = {g.serialize(): key for key, members in census.full_buckets.items() for g in members}
    for grid in census.solutions:
        key = key_of[grid.serialize()]
        for t in census.geometries:
            moved = GeometryGroup.apply(grid, t)
            for p in census.labels:
                assert key_of[LabelGroup.apply(moved, p).serialize()] == key


def test_full_keys_are_recomputed_consistently(census, geos, perms):
    for key, members in census.full_buckets.items():
        assert canonical_full(members[0], geos, perms) == key
        assert canonical_full(members[-1], geos, perms) == key


def test_full_key_is_no_larger_than_relabel_key(solutions, geos, perms):
    for grid in solutions[::48]:
        assert canonical_full(grid, geos, perms) <= canonical_relabelOnly(grid, perms)[0]


def test_observer_sees_every_candidate(sample_grid, geos, perms):
    seen = []
    key = canonical_full(sample_grid, geos, perms, observer=seen.append)
    assert len(seen) == 128 * 24
    assert all(isinstance(r, CandidateRecord) for r in seen)
    # geometry outer, permutation inner
    assert seen[0].geometry.is_identity() and seen[0].permutation.label == "1234"
    assert seen[1].geometry.is_identity() and seen[1].permutation.label == "1243"
    assert seen[24].geometry == GeometryTransform.from_index(1)
    # running-minimum flags strictly decrease and end at the key
    improving = [r.key for r in seen if r.is_best]
    assert improving == sorted(improving, reverse=True)
    assert len(set(improving)) == len(improving)
    assert improving[-1] == key


def test_trace_flags_exactly_the_first_winner(solutions, geos, perms):
    grid = solutions[200]
    key, records = canonical_full_trace(grid, geos, perms)
    assert key == canonical_full(grid, geos, perms)
    assert len(records) == 3072
    winners = [i for i, r in enumerate(records) if r.is_best]
    assert len(winners) == 1
    first_with_key = next(i for i, r in enumerate(records) if r.key == key)
    assert winners == [first_with_key]
    assert min(r.key for r in records) == key


def test_trace_candidate_reproduces_its_key(sample_grid, geos, perms):
    _, records = canonical_full_trace(sample_grid, geos, perms)
    for r in records[::97]:
        moved = LabelGroup.apply(GeometryGroup.apply(sample_grid, r.geometry), r.permutation)
        assert moved.serialize() == r.key


def test_trace_frame(sample_grid, geos, perms):
    key, records = canonical_full_trace(sample_grid, geos, perms)
    frame = trace_toFrame(records)
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["geo_index", "geometry", "permutation", "key", "is_best"]
    assert len(frame) == 3072
    best = frame[frame["is_best"]]
    assert len(best) == 1
    assert best.iloc[0]["key"] == key
    assert Counter(frame["geo_index"]) == {i: 24 for i in range(128)}


def test_key_functions(sample_grid, geos, perms):
    relabeled = LabelGroup.apply(sample_grid, LabelPermutation((3, 1, 4, 2)))
    assert relabel_keyFn(perms)(relabeled) == SAMPLE
    assert full_keyFn(geos, perms)(relabeled) == SAMPLE
