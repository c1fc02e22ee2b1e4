from __future__ import annotations

import itertools
import logging

import pytest

from snake_cube.config import DEFAULT_LENGTHS
from snake_cube.explorer import enumerator
from snake_cube.explorer.enumerator import (
    EXPECTED_SUM,
    advance,
    checksum,
    iter_lengths,
    look_for_solvables,
    next_lengths,
    render,
)


def _first(count: int) -> list[tuple[int, ...]]:
    lengths: list[int] = []
    out = []
    for _ in range(count):
        out.append(tuple(lengths))
        next_lengths(lengths)
    return out


def test_odometer_first_steps():
    assert _first(8) == [(), (1,), (2,), (3,), (1, 1), (2, 1), (3, 1), (1, 2)]


def test_odometer_covers_short_sequences_once_in_order():
    seqs = _first(1 + 3 + 9 + 27)
    expected = {s for r in range(4) for s in itertools.product((1, 2, 3), repeat=r)}
    assert len(seqs) == len(set(seqs))
    assert set(seqs) == expected

    # digit count first, then most significant (last) digit first
    keys = [(len(s), tuple(reversed(s))) for s in seqs]
    assert keys == sorted(keys)
    assert advance([], len(seqs)) == [1, 1, 1, 1]


@pytest.mark.parametrize("bad", [[4], [3, 0], [3, 3, 7]])
def test_odometer_rejects_foreign_digits(bad):
    lengths = list(bad)
    with pytest.raises(AssertionError):
        next_lengths(lengths)


def test_checksum_and_expected_sum():
    assert EXPECTED_SUM == 64
    assert checksum([]) == 1
    # The reference snake fills a 3-cube, so the enumerator would never solve it.
    assert checksum(DEFAULT_LENGTHS) == 27
    assert checksum(DEFAULT_LENGTHS) != EXPECTED_SUM


def test_render():
    assert render([1, 2, 3]) == "| .:|"
    assert render([]) == "||"
    with pytest.raises(AssertionError):
        render([4])


def test_iter_lengths_stride_matches_global_stream():
    full = _first(30)
    got = list(itertools.islice(iter_lengths(2, 3), 10))
    assert [i for i, _ in got] == list(range(2, 30, 3))
    assert [s for _, s in got] == full[2::3]


@pytest.mark.parametrize("start, stride", [(-1, 1), (0, 0)])
def test_iter_lengths_rejects_bad_arguments(start, stride):
    with pytest.raises(ValueError):
        next(iter_lengths(start, stride))


def test_look_for_solvables_emits_in_order():
    out: list[str] = []
    found = look_for_solvables(0, 1, emit=out.append, limit=40, expected_sum=4)
    assert found == 4
    assert out == ["|:|", "|. |", "| .|", "|   |"]


def test_only_matching_checksums_reach_solver(monkeypatch):
    calls: list[tuple[int, ...]] = []

    def fake_solve(lengths):
        calls.append(lengths)
        return None

    monkeypatch.setattr(enumerator, "solve", fake_solve)
    out: list[str] = []
    assert look_for_solvables(0, 1, emit=out.append, limit=200, expected_sum=5) == 0
    assert calls
    assert all(checksum(c) == 5 for c in calls)
    assert out == []


def test_default_target_filters_everything_short(monkeypatch):
    monkeypatch.setattr(enumerator, "solve", lambda lengths: pytest.fail("solver reached"))
    assert look_for_solvables(1, 2, emit=print, limit=500) == 0


def test_progress_logged(caplog):
    caplog.set_level(logging.INFO, logger="snake_cube")
    look_for_solvables(3, 4, emit=print, limit=25, progress_every=10)
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 2
    assert messages[0].startswith("(3) i = 10")
