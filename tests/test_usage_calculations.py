# -*- coding: utf-8 -*-
import math

import pytest

from core.calculations.usage import compute_usage_table
from core.models.usage import ValidatedInput


def _inp(v, i, r):
    return ValidatedInput(voltage_v=float(v), current_a=float(i), rate_sen_per_kwh=float(r))


def test_reference_case_230v_10a_50sen():
    res = compute_usage_table(_inp(230, 10, 50))
    assert round(res.power_kw, 6) == 2.3
    assert res.rate_rm_per_kwh == 0.5
    first, last = res.rows[0], res.rows[-1]
    assert first.hour == 1
    assert round(first.energy_kwh, 6) == 2.3
    assert round(first.total_rm, 6) == 1.15
    assert last.hour == 24
    assert round(last.energy_kwh, 6) == 55.2
    assert round(last.total_rm, 6) == 27.6


@pytest.mark.parametrize("v, i, r", [(230, 10, 50), (0, 5, 20), (12.5, 0.4, 21.8), (240, 32, 0), (1e6, 1e3, 57.1)])
def test_rows_are_hours_1_to_24_and_consistent(v, i, r):
    res = compute_usage_table(_inp(v, i, r))
    assert [row.hour for row in res.rows] == list(range(1, 25))
    for idx, row in enumerate(res.rows):
        assert math.isclose(row.energy_kwh, res.power_kw * (idx + 1), rel_tol=1e-12, abs_tol=0.0)
        assert math.isclose(row.total_rm, row.energy_kwh * res.rate_rm_per_kwh, rel_tol=1e-12, abs_tol=0.0)


def test_strictly_increasing_when_power_and_rate_positive():
    res = compute_usage_table(_inp(110, 0.5, 43.6))
    energies = [row.energy_kwh for row in res.rows]
    totals = [row.total_rm for row in res.rows]
    assert all(a < b for a, b in zip(energies, energies[1:]))
    assert all(a < b for a, b in zip(totals, totals[1:]))


@pytest.mark.parametrize("v, i", [(0, 5), (230, 0), (0, 0)])
def test_zero_load_gives_zero_rows(v, i):
    res = compute_usage_table(_inp(v, i, 20))
    assert res.power_kw == 0.0
    assert all(row.energy_kwh == 0.0 and row.total_rm == 0.0 for row in res.rows)


def test_result_is_immutable_and_deterministic():
    inp = _inp(230, 10, 50)
    a = compute_usage_table(inp)
    b = compute_usage_table(inp)
    assert a == b
    assert isinstance(a.rows, tuple)
    with pytest.raises(AttributeError):
        a.power_kw = 1.0  # type: ignore[misc]


def test_custom_hour_count():
    res = compute_usage_table(_inp(100, 10, 10), hours=3)
    assert [row.hour for row in res.rows] == [1, 2, 3]
