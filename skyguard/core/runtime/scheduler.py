"""
scheduler.py
------------
Cooperative single-threaded scheduler for frame callbacks and periodic timers.

Responsibilities
----------------
- Queue one-shot "next frame" callbacks (request_frame / cancel_frame).
- Run wall-clock periodic timers (set_interval / clear_interval).
- Let the host pump both from one execution context.

The time source is injected, so the same code runs against pygame's clock
in the game and against a virtual clock (ManualScheduler) in tests.
"""

import itertools
from typing import Callable, Dict, Optional

from skyguard.core.debug.debug_logger import DebugLogger
from skyguard.core.runtime.game_settings import Physics


class _IntervalTimer:
    """Book-keeping for one periodic timer."""

    __slots__ = ("callback", "interval_ms", "deadline")

    def __init__(self, callback, interval_ms, deadline):
        self.callback = callback
        self.interval_ms = interval_ms
        self.deadline = deadline


class Scheduler:
    """
    Frame and interval scheduler driven by an external time source.

    Usage:
        scheduler = Scheduler(time_source=pygame.time.get_ticks)
        handle = scheduler.set_interval(spawn, 1000)
        scheduler.request_frame(game_loop)
        scheduler.pump()            # once per display frame
    """

    def __init__(self, time_source: Callable[[], float]):
        """
        Args:
            time_source: Zero-argument callable returning the current time in ms
        """
        self._time_source = time_source
        self._ids = itertools.count(1)
        self._timers: Dict[int, _IntervalTimer] = {}
        self._frames: Dict[int, Callable] = {}

    # ===========================================================
    # Clock
    # ===========================================================

    def now(self) -> float:
        """Current time in milliseconds."""
        return self._time_source()

    # ===========================================================
    # Frame Callbacks
    # ===========================================================

    def request_frame(self, callback: Callable[[float], None]) -> int:
        """Schedule callback(timestamp_ms) for the next frame. Returns a handle."""
        handle = next(self._ids)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: Optional[int]) -> None:
        """Cancel a pending frame request. Unknown or None handles are ignored."""
        if handle is None:
            return
        self._frames.pop(handle, None)

    def has_pending_frame(self) -> bool:
        return bool(self._frames)

    def run_frames(self) -> int:
        """
        Run every frame callback requested before this call.

        Callbacks requested while running are deferred to the next frame.

        Returns:
            int: Number of callbacks executed
        """
        if not self._frames:
            return 0

        pending = self._frames
        self._frames = {}
        timestamp = self.now()
        for callback in pending.values():
            callback(timestamp)
        return len(pending)

    # ===========================================================
    # Interval Timers
    # ===========================================================

    def set_interval(self, callback: Callable[[], None], interval_ms: float) -> int:
        """
        Register a periodic timer firing every interval_ms.

        Returns:
            int: Timer handle for clear_interval()
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        handle = next(self._ids)
        self._timers[handle] = _IntervalTimer(callback, interval_ms, self.now() + interval_ms)
        DebugLogger.trace(f"Interval #{handle} set ({interval_ms} ms)", category="timing")
        return handle

    def clear_interval(self, handle: Optional[int]) -> None:
        """Cancel a periodic timer. Unknown or None handles are ignored."""
        if handle is None:
            return
        if self._timers.pop(handle, None) is not None:
            DebugLogger.trace(f"Interval #{handle} cleared", category="timing")

    def active_timer_count(self) -> int:
        return len(self._timers)

    def run_due_timers(self, now: Optional[float] = None) -> int:
        """
        Fire every timer whose deadline is at or before now, in deadline order.

        Each due timer fires once per call. A timer that fell several
        intervals behind (stalled window, suspended host) skips the missed
        deadlines and is rescheduled on its original cadence after now.
        Timers cleared by an earlier callback do not fire.

        Returns:
            int: Number of timer callbacks executed
        """
        if now is None:
            now = self.now()

        due = sorted(
            ((handle, timer) for handle, timer in self._timers.items() if timer.deadline <= now),
            key=lambda item: item[1].deadline,
        )

        fired = 0
        for handle, timer in due:
            if handle not in self._timers:
                continue
            missed = (now - timer.deadline) // timer.interval_ms
            timer.deadline += timer.interval_ms * (1 + missed)
            timer.callback()
            fired += 1
        return fired

    def _next_due(self, now):
        """Return (handle, timer) with the earliest deadline <= now, or None."""
        best = None
        for handle, timer in self._timers.items():
            if timer.deadline > now:
                continue
            if best is None or timer.deadline < best[1].deadline:
                best = (handle, timer)
        return best

    # ===========================================================
    # Host Integration
    # ===========================================================

    def pump(self) -> None:
        """Fire due timers, then run pending frame callbacks."""
        self.run_due_timers()
        self.run_frames()

    def clear(self) -> None:
        """Drop every timer and frame request."""
        self._timers.clear()
        self._frames.clear()


class ManualScheduler(Scheduler):
    """
    Scheduler on a virtual clock for deterministic tests and headless runs.

    Time only moves through advance(), step_frame() or run_for().
    """

    def __init__(self, start_ms: float = 0.0):
        self._virtual_now = start_ms
        super().__init__(time_source=lambda: self._virtual_now)

    def advance(self, ms: float) -> int:
        """
        Move the virtual clock forward, firing timers at their exact deadlines.

        Frame callbacks are not run.

        Returns:
            int: Number of timer callbacks executed
        """
        if ms < 0:
            raise ValueError("Cannot move the clock backwards")

        target = self._virtual_now + ms
        fired = 0
        while True:
            due = self._next_due(target)
            if due is None:
                break
            handle, timer = due
            self._virtual_now = max(self._virtual_now, timer.deadline)
            timer.deadline += timer.interval_ms
            timer.callback()
            fired += 1

        self._virtual_now = target
        return fired

    def step_frame(self, frame_ms: float = Physics.FRAME_MS) -> int:
        """Advance one frame interval, then run pending frame callbacks."""
        self.advance(frame_ms)
        return self.run_frames()

    def run_for(self, duration_ms: float, frame_ms: float = Physics.FRAME_MS) -> int:
        """
        Simulate a fixed-timestep host for duration_ms.

        Returns:
            int: Number of frames stepped
        """
        frames = 0
        elapsed = 0.0
        while elapsed + frame_ms <= duration_ms:
            self.step_frame(frame_ms)
            elapsed += frame_ms
            frames += 1
        return frames
