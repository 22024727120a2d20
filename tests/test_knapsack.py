import io
import random
import sys
from itertools import compress

import pytest

from estudos.knapsack import Selection, best_selection, main, random_gifts


def test_best_selection_simple():
    result = best_selection([10, 5], [3, 4], 5)
    assert result == Selection((1, 0), 10, 3)


def test_best_selection_takes_all_when_they_fit():
    result = best_selection([2, 3, 4], [1, 1, 1], 10)
    assert result == Selection((1, 1, 1), 9, 3)


def test_ties_go_to_last_visited_subset():
    assert best_selection([5, 5], [1, 1], 1).chosen == (0, 1)


def test_nothing_fits_gives_empty_choice():
    assert best_selection([4], [9], 3) == Selection((0,), 0, 0)


def test_negative_capacity_keeps_initial_flags():
    assert best_selection([4, 2], [1, 1], -1) == Selection((1, 1), 0, 0)


def test_no_gifts():
    assert best_selection([], [], 5) == Selection((), 0, 0)


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        best_selection([1, 2], [1], 3)


def test_selection_invariants_on_random_gifts():
    rng = random.Random(7)
    values, weights = random_gifts(8, rng)
    result = best_selection(values, weights, 20)
    assert result.weight <= 20
    assert result.value == sum(compress(values, result.chosen))
    assert result.weight == sum(compress(weights, result.chosen))
    for position, weight in enumerate(weights):
        if weight <= 20:
            assert result.value >= values[position]


def test_random_gifts_ranges_and_determinism():
    values, weights = random_gifts(50, random.Random(3))
    assert len(values) == len(weights) == 50
    assert all(1 <= value <= 20 for value in values)
    assert all(1 <= weight <= 15 for weight in weights)
    assert (values, weights) == random_gifts(50, random.Random(3))


def test_main_prints_report(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n10\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Digite a quantidade de presentes:\n")
    assert "Peso total dos presentes:" in out
    assert "Vetor com os presentes que devem ser escolhidos\n" in out
    assert "Tempo total:" in out


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err