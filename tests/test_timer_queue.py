"""Test suite for the timer queue."""

import pytest

from termwatch.core.timer_queue import TimerQueue


class TestTimerQueue:
    """TimerQueue cursor movement."""

    def test_advance_until_exhausted(self):
        """Advance moves forward and holds at the last entry."""
        queue = TimerQueue([7, 3])
        assert queue.head == 0
        assert queue.current() == 7

        assert queue.advance() is True
        assert queue.head == 1
        assert queue.current() == 3

        assert queue.advance() is False
        assert queue.head == 1
        assert queue.advance() is False
        assert queue.head == 1

    def test_advance_does_not_fire_selected_callback(self):
        """Only user selections are announced."""
        selected = []
        queue = TimerQueue([1, 2])
        queue.set_selected_callback(selected.append)
        queue.advance()
        assert selected == []

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_select_is_rejected(self, index: int):
        """Rejected selections neither move the head nor fire the callback."""
        selected = []
        queue = TimerQueue([10, 20, 30])
        queue.advance()
        queue.set_selected_callback(selected.append)

        assert queue.select(index) is False
        assert queue.head == 1
        assert selected == []

    def test_select_fires_callback_once(self):
        """A successful selection is announced exactly once."""
        selected = []
        queue = TimerQueue([10, 20, 30])
        queue.set_selected_callback(selected.append)

        assert queue.select(2) is True
        assert queue.head == 2
        assert queue.current() == 30
        assert selected == [2]

    def test_next_and_previous(self):
        """Next and previous are bounded selections."""
        selected = []
        queue = TimerQueue([10, 20])
        queue.set_selected_callback(selected.append)

        assert queue.previous() is False
        assert queue.next() is True
        assert queue.next() is False
        assert queue.previous() is True
        assert selected == [1, 0]

    def test_is_last(self):
        """is_last follows the head."""
        queue = TimerQueue([5, 6])
        assert not queue.is_last()
        queue.advance()
        assert queue.is_last()

    def test_single_entry_queue(self):
        """A one-entry queue is immediately at its end."""
        queue = TimerQueue([42])
        assert len(queue) == 1
        assert queue.is_last()
        assert queue.advance() is False
        assert queue.current() == 42

    def test_empty_queue_is_rejected(self):
        """At least one duration is required."""
        with pytest.raises(ValueError):
            TimerQueue([])

    def test_non_positive_durations_are_rejected(self):
        """Durations must be positive."""
        with pytest.raises(ValueError):
            TimerQueue([10, 0])

    def test_durations_are_fixed(self):
        """Durations keep insertion order and cannot be mutated."""
        source = [3, 1, 2]
        queue = TimerQueue(source)
        source.append(9)
        assert queue.durations == (3, 1, 2)
