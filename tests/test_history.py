"""Tests pour le tampon d'historique borné."""

import math
from dataclasses import dataclass

import pytest

from neuronlab.errors import NumericOverflow
from neuronlab.history import HistoryBuffer, non_finite_fields


@dataclass(frozen=True)
class Point:
    time: float
    value: float


class TestHistoryBuffer:
    """Tests pour HistoryBuffer."""

    def test_invalid_capacity(self):
        """Une capacité nulle est refusée."""
        with pytest.raises(ValueError):
            HistoryBuffer(0)

    def test_keeps_most_recent(self):
        """Au-delà de la capacité, les plus anciens points disparaissent."""
        buf = HistoryBuffer(5)
        for i in range(12):
            buf.append(Point(float(i), 0.0))

        assert len(buf) == 5
        assert [p.time for p in buf] == [7.0, 8.0, 9.0, 10.0, 11.0]
        assert buf.last.time == 11.0

    def test_rejects_nan(self):
        """Un point NaN lève NumericOverflow sans modifier le tampon."""
        buf = HistoryBuffer(3)
        buf.append(Point(0.0, 1.0))

        with pytest.raises(NumericOverflow):
            buf.append(Point(1.0, math.nan))

        assert len(buf) == 1

    def test_rejects_infinity(self):
        buf = HistoryBuffer(3)
        with pytest.raises(NumericOverflow) as exc:
            buf.append(Point(math.inf, 0.0))
        assert "time" in exc.value.values

    def test_clear_and_empty_last(self):
        buf = HistoryBuffer(3)
        buf.append(Point(0.0, 0.0))
        buf.clear()
        assert len(buf) == 0
        assert buf.last is None

    def test_non_finite_fields(self):
        assert non_finite_fields(Point(1.0, 2.0)) == {}
        assert set(non_finite_fields(Point(math.inf, math.nan))) == {"time", "value"}
