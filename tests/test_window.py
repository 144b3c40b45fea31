"""Tests for the fixed-capacity circular window."""

import math

import pytest

from streamta.indicators.window import CircularWindow


def test_push_returns_fill_during_warmup():
    w = CircularWindow(3)
    assert [w.push(v) for v in (1.0, 2.0, 3.0)] == [0.0, 0.0, 0.0]
    assert w.full
    assert len(w) == 3


def test_push_returns_evicted_once_full():
    w = CircularWindow(3)
    for v in (1.0, 2.0, 3.0):
        w.push(v)
    assert w.push(4.0) == 1.0
    assert w.push(5.0) == 2.0


def test_cursor_wraps():
    w = CircularWindow(2)
    assert w.cursor == 0
    w.push(1.0)
    assert w.cursor == 1
    w.push(2.0)
    assert w.cursor == 0


def test_count_saturates():
    w = CircularWindow(2)
    for v in range(10):
        w.push(float(v))
    assert len(w) == 2


def test_iteration_is_chronological_after_wrap():
    w = CircularWindow(4)
    for v in (1.0, 2.0, 3.0, 4.0, 5.0, 6.0):
        w.push(v)
    assert list(w) == [3.0, 4.0, 5.0, 6.0]
    assert w.oldest == 3.0


def test_iteration_during_warmup_only_live_values():
    w = CircularWindow(5)
    w.push(7.0)
    w.push(8.0)
    assert list(w) == [7.0, 8.0]
    assert w.oldest == 7.0


def test_custom_fill():
    w = CircularWindow(2, fill=-math.inf)
    assert w.slot(0) == -math.inf
    assert w.push(1.0) == -math.inf


def test_reset():
    w = CircularWindow(3)
    for v in (1.0, 2.0, 3.0, 4.0):
        w.push(v)
    w.reset()
    assert len(w) == 0
    assert w.cursor == 0
    assert not w.full
    assert [w.slot(i) for i in range(3)] == [0.0, 0.0, 0.0]


@pytest.mark.parametrize("capacity", [0, -3, 2.5, True, "3"])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        CircularWindow(capacity)
