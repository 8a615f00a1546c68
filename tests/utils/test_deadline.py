"""Tests for deadline.py module."""

import pytest

from sail.services.exceptions import ContainerTimeoutError
from sail.utils.deadline import Deadline


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


class TestDeadline:
    """Test suite for Deadline."""

    def test_remaining_counts_down(self):
        clock = FakeClock()
        deadline = Deadline(30, clock=clock)
        assert deadline.remaining() == 30
        clock.now += 12
        assert deadline.remaining() == 18
        assert not deadline.expired

    def test_remaining_never_negative(self):
        clock = FakeClock()
        deadline = Deadline(5, clock=clock)
        clock.now += 60
        assert deadline.remaining() == 0
        assert deadline.expired

    def test_check_returns_remaining(self):
        clock = FakeClock()
        deadline = Deadline(30, clock=clock)
        clock.now += 10
        assert deadline.check("create") == 20

    def test_check_raises_when_expired(self):
        clock = FakeClock()
        deadline = Deadline(30, clock=clock)
        clock.now += 30
        with pytest.raises(ContainerTimeoutError, match="before start"):
            deadline.check("start")

    def test_check_agrees_with_expired(self):
        clock = FakeClock()
        deadline = Deadline(30, clock=clock)
        clock.now += 29.5
        assert not deadline.expired
        assert deadline.check("start") == 0.5
        clock.now += 0.5
        assert deadline.expired
        with pytest.raises(ContainerTimeoutError):
            deadline.check("start")
