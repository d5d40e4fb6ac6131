"""Tests for the dynamic content controller."""

import asyncio
import random

import pytest

from practice_site.dynamic import (
    AsyncioScheduler,
    ContentState,
    DynamicContentController,
    simulated_delay,
)


def make_controller(scheduler, **kwargs) -> DynamicContentController:
    return DynamicContentController("Hello World!", scheduler, delay=2.0, **kwargs)


class TestDynamicContentController:
    """Tests for the idle -> loading -> loaded cycle."""

    def test_starts_idle(self, scheduler):
        controller = make_controller(scheduler)
        assert controller.state is ContentState.IDLE
        assert not controller.indicator_visible
        assert not controller.content_visible
        assert controller.load_count == 0

    def test_load_cycle(self, scheduler):
        """Test that the indicator is replaced by the content once."""
        controller = make_controller(scheduler)

        assert controller.trigger() is True
        assert controller.state is ContentState.LOADING
        assert controller.indicator_visible
        assert not controller.content_visible

        scheduler.advance(1.5)
        assert controller.is_loading

        scheduler.advance(0.5)
        assert controller.state is ContentState.LOADED
        assert not controller.indicator_visible
        assert controller.content_visible
        assert controller.content == "Hello World!"
        assert controller.load_count == 1

    def test_duplicate_trigger_while_loading(self, scheduler):
        """Test that at most one simulated request is in flight."""
        controller = make_controller(scheduler)

        assert controller.trigger() is True
        assert controller.trigger() is False
        assert scheduler.pending == 1

        scheduler.advance(2.0)
        assert controller.load_count == 1
        assert controller.state is ContentState.LOADED

        scheduler.advance(10.0)
        assert controller.load_count == 1

    def test_trigger_while_loaded_restarts(self, scheduler):
        controller = make_controller(scheduler)
        controller.trigger()
        scheduler.advance(2.0)

        assert controller.trigger() is True
        assert controller.state is ContentState.LOADING
        assert not controller.content_visible
        assert controller.indicator_visible

        scheduler.advance(2.0)
        assert controller.load_count == 2

    def test_reset_cancels_pending_load(self, scheduler):
        controller = make_controller(scheduler)
        controller.trigger()
        controller.reset()

        assert controller.state is ContentState.IDLE
        assert not controller.indicator_visible
        assert scheduler.pending == 0

        scheduler.advance(5.0)
        assert controller.load_count == 0
        assert controller.state is ContentState.IDLE

    def test_listeners_see_each_transition(self, scheduler):
        controller = make_controller(scheduler)
        seen = []
        controller.subscribe(lambda c: seen.append(c.state))

        controller.trigger()
        controller.trigger()
        scheduler.advance(2.0)

        assert seen == [ContentState.LOADING, ContentState.LOADED]

    def test_restart_passes_through_idle(self, scheduler):
        """Test that listeners see the reset step when reloading."""
        controller = make_controller(scheduler)
        seen = []
        controller.subscribe(lambda c: seen.append(c.state))

        controller.trigger()
        scheduler.advance(2.0)
        controller.trigger()
        scheduler.advance(2.0)

        assert seen == [
            ContentState.LOADING,
            ContentState.LOADED,
            ContentState.IDLE,
            ContentState.LOADING,
            ContentState.LOADED,
        ]

    def test_jitter_bounds(self, scheduler):
        controller = make_controller(scheduler, jitter=1.0, rng=random.Random(7))
        for _ in range(20):
            assert 2.0 <= controller.next_delay() <= 3.0

    def test_fixed_delay_without_jitter(self, scheduler):
        assert make_controller(scheduler).next_delay() == 2.0

    def test_negative_delay_rejected(self, scheduler):
        with pytest.raises(ValueError):
            DynamicContentController("x", scheduler, delay=-1)


class TestSimulatedDelay:
    """Tests for the shared latency helper."""

    def test_fixed_without_jitter(self):
        assert simulated_delay(1.5) == 1.5

    def test_jitter_added(self):
        rng = random.Random(3)
        for _ in range(20):
            assert 1.0 <= simulated_delay(1.0, 0.5, rng) <= 1.5


class TestAsyncioScheduler:
    """Tests with a real event loop."""

    def test_load_completes_on_event_loop(self):
        async def run():
            controller = DynamicContentController("Done", AsyncioScheduler(), delay=0.01)
            controller.trigger()
            assert controller.is_loading
            await asyncio.sleep(0.1)
            return controller

        controller = asyncio.run(run())
        assert controller.state is ContentState.LOADED
        assert controller.load_count == 1
