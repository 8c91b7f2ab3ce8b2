"""Tests for Timer countdown and stepping mode."""
import pytest
from glide import AnimationConfig, ManualClock, Timer


@pytest.fixture
def clock():
    return ManualClock(start=1_000)


class TestTimerBasics:
    """Countdown readings against a manual clock."""

    def test_lasting_is_absolute(self, clock):
        """Negative lasting is stored as its absolute value."""
        assert Timer(-250, clock=clock).lasting == 250

    def test_origin_defaults_to_now(self, clock):
        """Without an explicit origin the timer starts at the clock's now."""
        timer = Timer(100, clock=clock)
        assert timer.origin == 1_000
        assert timer.queue_elapsed() == 0

    def test_queue_tracks_elapsed(self, clock):
        """queue() follows the clock while under lasting."""
        timer = Timer(100, clock=clock)
        clock.advance(40)
        assert timer.queue() == 40
        assert timer.queue_elapsed() == 40

    def test_queue_clamps_to_lasting(self, clock):
        """queue() never exceeds lasting; queue_elapsed() does."""
        timer = Timer(100, clock=clock)
        clock.advance(150)
        assert timer.queue() == 100
        assert timer.queue_elapsed() == 150

    def test_future_origin(self, clock):
        """An origin in the future gives negative raw elapsed and zero queue."""
        timer = Timer(100, origin=1_050, clock=clock)
        assert timer.queue_elapsed() == -50
        assert timer.queue() == 0
        assert not timer.is_present()
        assert not timer.is_finished()

    def test_queue_as_percentage(self, clock):
        """Percentage is queue over lasting."""
        timer = Timer(200, clock=clock)
        clock.advance(50)
        assert timer.queue_as_percentage() == 0.25
        clock.advance(1_000)
        assert timer.queue_as_percentage() == 1.0

    def test_zero_lasting_percentage(self, clock):
        """A zero-lasting timer reports the configured sentinel."""
        assert Timer(0, clock=clock).queue_as_percentage() == 1.0
        config = AnimationConfig(zero_lasting_percentage=0.0)
        assert Timer(0, clock=clock, config=config).queue_as_percentage() == 0.0

    def test_monotonic_elapsed(self, clock):
        """Consecutive reads without stepping never decrease."""
        timer = Timer(100, clock=clock)
        previous = timer.queue_elapsed()
        for _ in range(10):
            clock.advance(3)
            current = timer.queue_elapsed()
            assert current >= previous
            previous = current


class TestTimerPredicates:
    """is_present / is_finished / run."""

    def test_present_within_lasting(self, clock):
        """Present from 0 through lasting inclusive."""
        timer = Timer(10, clock=clock)
        assert timer.is_present()
        clock.advance(10)
        assert timer.is_present()
        assert not timer.is_finished()

    def test_finished_past_lasting(self, clock):
        """Finished only once elapsed exceeds lasting."""
        timer = Timer(10, clock=clock)
        clock.advance(11)
        assert timer.is_finished()
        assert not timer.is_present()

    def test_run_invokes_only_when_finished(self, clock):
        """run() calls the action once the timer has finished."""
        timer = Timer(10, clock=clock)
        calls = []
        assert timer.run(lambda: calls.append("fired")) is False
        assert calls == []
        clock.advance(11)
        assert timer.run(lambda: calls.append("fired")) is True
        assert calls == ["fired"]

    def test_zero_lasting_run(self, clock):
        """A zero-lasting timer fires as soon as any time has passed."""
        timer = Timer(0, clock=clock)
        assert timer.run(lambda: None) is False
        clock.advance(1)
        assert timer.run(lambda: None) is True


class TestTimerReset:
    """reset() rebinds the origin."""

    def test_reset_restarts_countdown(self, clock):
        """After reset elapsed drops back to zero and lasting is kept."""
        timer = Timer(100, clock=clock)
        clock.advance(80)
        before = timer.queue_elapsed()
        timer.reset()
        after = timer.queue_elapsed()
        assert after >= 0
        assert after < before
        assert timer.lasting == 100
        assert timer.origin == clock.now()

    def test_reset_keeps_stepping(self, clock):
        """reset() preserves stepping mode and restarts simulated time."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.step(30)
        timer.reset()
        assert timer.stepping
        assert timer.last_step == 0
        assert timer.queue() == 1

    def test_restart_at_elapsed(self, clock):
        """restart(n) makes the timer read n right away."""
        timer = Timer(100, clock=clock)
        clock.advance(10)
        timer.restart(40)
        assert timer.queue_elapsed() == 40
        clock.advance(5)
        assert timer.queue() == 45

    def test_restart_while_stepping(self, clock):
        """restart(n) rebases simulated time; the next counted read steps on."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.step(10)
        timer.restart(40)
        assert timer.last_step == 40
        assert timer.queue(count_step=False) == 40
        assert timer.queue() == 41


class TestStepping:
    """Discrete stepping mode."""

    def test_enter_stepping_captures_elapsed(self, clock):
        """Simulated time starts from the wall-clock elapsed at entry."""
        timer = Timer(100, clock=clock)
        clock.advance(20)
        timer.enter_stepping()
        assert timer.stepping
        assert timer.last_step == 20

    def test_counted_reads_advance_one_ms(self, clock):
        """N consecutive queue() calls differ by exactly one step each."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        readings = [timer.queue() for _ in range(5)]
        assert readings == [1, 2, 3, 4, 5]

    def test_stepping_ignores_wall_clock(self, clock):
        """Wall-clock time passing between reads does not change simulated time."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        assert timer.queue() == 1
        clock.advance(50)
        assert timer.queue() == 2

    def test_uncounted_reads_do_not_advance(self, clock):
        """count_step=False reads wall time without stepping."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.queue()
        timer.queue()
        assert timer.queue_elapsed(count_step=False) == 2
        assert timer.queue_elapsed(count_step=False) == 2
        assert timer.last_step == 2

    def test_custom_step_size(self, clock):
        """Counted reads advance by the configured step size."""
        timer = Timer(100, clock=clock, config=AnimationConfig(step_size=10))
        timer.enter_stepping()
        assert [timer.queue() for _ in range(3)] == [10, 20, 30]

    def test_explicit_step(self, clock):
        """step(n) advances simulated time by n."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.step()
        timer.step(9)
        assert timer.last_step == 10
        assert timer.queue_elapsed(count_step=False) == 10

    def test_step_outside_stepping_is_ignored(self, clock):
        """step() does nothing when the timer follows the clock."""
        timer = Timer(100, clock=clock)
        timer.step(50)
        assert timer.queue_elapsed() == 0
        assert timer.last_step == 0

    def test_stepping_reaches_finish(self, clock):
        """Counted reads past lasting finish the timer."""
        timer = Timer(3, clock=clock)
        timer.enter_stepping()
        for _ in range(3):
            timer.queue()
        assert not timer.is_finished()
        timer.queue()
        assert timer.is_finished()
        assert timer.queue() == 3

    def test_quit_stepping_resumes_from_simulated_time(self, clock):
        """After quitting, wall time continues from the last step."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.step(40)
        timer.quit_stepping()
        assert not timer.stepping
        assert timer.queue_elapsed() == 40
        clock.advance(5)
        assert timer.queue_elapsed() == 45

    def test_enter_stepping_twice_keeps_progress(self, clock):
        """Re-entering stepping mode is a no-op."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        timer.step(7)
        timer.enter_stepping()
        assert timer.last_step == 7

    def test_repr_mentions_state(self, clock):
        """repr shows lasting and stepping state."""
        timer = Timer(100, clock=clock)
        timer.enter_stepping()
        assert "lasting=100" in repr(timer)
        assert "stepping=True" in repr(timer)
