"""Test suite for the clock state machine."""

import pytest

from termwatch.core.clock import Clock, ClockMode, ClockStateError
from tests.test_utils import FakeTickerFactory


class TestStopwatch:
    """Count-up clock behaviour."""

    def test_elapsed_counts_delivered_ticks(self, ticker_factory: FakeTickerFactory):
        """Every delivered tick adds exactly one second."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()

        assert ticker_factory.tick(10) == 10
        assert clock.elapsed == 10
        assert clock.running

    def test_stop_then_start_resumes(self, ticker_factory: FakeTickerFactory):
        """Stop followed by start continues from where it was, unlike reset."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        ticker_factory.tick(3)
        clock.stop()

        assert not clock.running
        assert clock.elapsed == 3

        clock.start()
        assert clock.running
        ticker_factory.tick(2)
        assert clock.elapsed == 5

    def test_each_start_uses_a_fresh_ticker(self, ticker_factory: FakeTickerFactory):
        """Restarting never reuses a cancelled ticker."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        first = ticker_factory.current
        clock.stop()
        clock.start()

        assert len(ticker_factory.tickers) == 2
        assert first is not None and first.cancelled
        assert ticker_factory.current is not first
        assert ticker_factory.current.live  # type: ignore[union-attr]

    def test_start_while_running_is_noop(self, ticker_factory: FakeTickerFactory):
        """A second start does not spawn another ticker."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        clock.start()
        assert len(ticker_factory.tickers) == 1

    def test_stop_while_idle_is_noop(self, ticker_factory: FakeTickerFactory):
        """Stopping an idle clock does not touch any ticker."""
        clock = Clock.stopwatch(ticker_factory)
        clock.stop()
        clock.start()
        clock.stop()
        clock.stop()
        assert ticker_factory.tickers[0].cancelled

    def test_in_flight_tick_after_stop_is_discarded(self, ticker_factory: FakeTickerFactory):
        """A tick that arrives after stop() returned does not count."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        ticker_factory.tick(2)
        stale = ticker_factory.current
        clock.stop()

        assert stale is not None
        stale.callback()
        assert clock.elapsed == 2

    def test_idle_only_after_ticker_acknowledges(self, ticker_factory: FakeTickerFactory):
        """While the ticker is still stopping the clock reports running, and a late tick is dropped."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        ticker_factory.tick(2)
        ticker = ticker_factory.current
        assert ticker is not None
        seen: list[bool] = []

        def acknowledge() -> None:
            seen.append(clock.running)
            ticker.callback()

        ticker.on_stop = acknowledge
        clock.stop()

        assert seen == [True]
        assert not clock.running
        assert clock.elapsed == 2

    def test_tick_from_previous_interval_is_discarded(self, ticker_factory: FakeTickerFactory):
        """An old ticker cannot advance a clock that was restarted."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        stale = ticker_factory.current
        clock.stop()
        clock.start()

        assert stale is not None
        stale.callback()
        assert clock.elapsed == 0

    def test_stopwatch_always_has_time_left(self, ticker_factory: FakeTickerFactory):
        """An unbounded clock never expires."""
        clock = Clock.stopwatch(ticker_factory)
        clock.start()
        ticker_factory.tick(1000)
        assert clock.is_time_left()
        assert clock.total is None
        assert clock.remaining is None

    def test_toggle(self, ticker_factory: FakeTickerFactory):
        """Toggle flips between running and paused."""
        clock = Clock.stopwatch(ticker_factory)
        clock.toggle()
        assert clock.running
        clock.toggle()
        assert not clock.running


class TestTimer:
    """Count-down clock behaviour."""

    def test_expires_in_the_tick_reaching_total(self, ticker_factory: FakeTickerFactory):
        """After tick 5 of 5 the clock is stopped and done fired exactly once."""
        done_calls = []
        clock = Clock.timer(ticker_factory, 5)
        clock.set_done_callback(lambda: done_calls.append(clock.elapsed))
        clock.start()

        ticker_factory.tick(4)
        assert clock.running
        assert done_calls == []

        ticker_factory.tick(1)
        assert not clock.running
        assert clock.elapsed == 5
        assert clock.expired
        assert done_calls == [5]

    def test_elapsed_never_exceeds_total(self, ticker_factory: FakeTickerFactory):
        """Further ticks are not delivered once expired."""
        clock = Clock.timer(ticker_factory, 3)
        clock.start()

        assert ticker_factory.tick(10) == 3
        assert clock.elapsed == 3
        assert clock.remaining == 0

    def test_start_when_expired_is_noop(self, ticker_factory: FakeTickerFactory):
        """An expired clock stays expired until reset."""
        clock = Clock.timer(ticker_factory, 1)
        clock.start()
        ticker_factory.tick()
        clock.start()

        assert not clock.running
        assert len(ticker_factory.tickers) == 1

    def test_remaining(self, ticker_factory: FakeTickerFactory):
        """Remaining is total minus elapsed."""
        clock = Clock.timer(ticker_factory, 60)
        clock.start()
        ticker_factory.tick(15)
        assert clock.remaining == 45

    @pytest.mark.parametrize("state", ["idle", "running", "expired"])
    def test_reset_always_leaves_clock_running_at_zero(self, ticker_factory: FakeTickerFactory, state: str):
        """Reset means start over regardless of the previous state."""
        clock = Clock.timer(ticker_factory, 4)
        if state in ("running", "expired"):
            clock.start()
            ticker_factory.tick(2 if state == "running" else 4)

        clock.reset()

        assert clock.running
        assert clock.elapsed == 0
        assert clock.is_time_left()

    def test_set_total_duration_while_running_is_an_error(self, ticker_factory: FakeTickerFactory):
        """Rebinding requires the caller to stop first."""
        clock = Clock.timer(ticker_factory, 10)
        clock.start()

        with pytest.raises(ClockStateError):
            clock.set_total_duration(20)
        assert clock.total == 10

    def test_set_total_duration_rebinds_expiry(self, ticker_factory: FakeTickerFactory):
        """A rebound clock expires at the new total."""
        clock = Clock.timer(ticker_factory, 10)
        clock.set_total_duration(2)
        clock.start()
        ticker_factory.tick(2)
        assert clock.expired

    def test_set_total_duration_rejects_non_positive(self, ticker_factory: FakeTickerFactory):
        """Durations are positive."""
        clock = Clock.timer(ticker_factory, 10)
        with pytest.raises(ValueError):
            clock.set_total_duration(0)

    def test_stopwatch_has_no_total(self, ticker_factory: FakeTickerFactory):
        """Only count-down clocks can be rebound."""
        clock = Clock.stopwatch(ticker_factory)
        with pytest.raises(ClockStateError):
            clock.set_total_duration(10)

    def test_invalid_construction(self, ticker_factory: FakeTickerFactory):
        """Mode and total must agree."""
        with pytest.raises(ValueError):
            Clock(ticker_factory, ClockMode.COUNT_DOWN)
        with pytest.raises(ValueError):
            Clock(ticker_factory, ClockMode.COUNT_DOWN, 0)
        with pytest.raises(ValueError):
            Clock(ticker_factory, ClockMode.COUNT_UP, 10)

    def test_changed_callback_fires_on_state_changes(self, ticker_factory: FakeTickerFactory):
        """The redraw trigger follows start, ticks and stop."""
        changes = []
        clock = Clock.timer(ticker_factory, 10)
        clock.set_changed_callback(lambda: changes.append(clock.elapsed))

        clock.start()
        ticker_factory.tick(2)
        clock.stop()

        assert changes == [0, 1, 2, 2]
