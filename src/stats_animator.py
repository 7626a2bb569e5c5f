# stats_animator.py
import time

class ProgressAnimator:
    """
    Drives a one-shot, linear 0 -> 1 progress value over a fixed duration.

    Ticks are scheduled through an injected `schedule(interval_ms, callback)`
    function returning a source id, and cancelled with `cancel(source_id)`.
    In the application these are GLib.timeout_add and GLib.source_remove, so
    the callback's return value follows the GLib convention: True keeps the
    source alive, False removes it.
    """
    def __init__(self, on_progress, duration_ms=2000, schedule=None, cancel=None,
                 clock=time.monotonic, interval_ms=16):
        self._on_progress = on_progress
        self.duration_ms = duration_ms
        self._schedule = schedule
        self._cancel = cancel
        self._clock = clock
        self._interval_ms = interval_ms

        self._source_id = None
        self._run_token = 0
        self._start_time = None
        self._progress = 0.0

    @property
    def progress(self):
        return self._progress

    @property
    def is_running(self):
        return self._source_id is not None

    def start(self):
        self.stop()
        self._run_token += 1
        self._start_time = self._clock()
        self._set_progress(0.0)

        if self.duration_ms <= 0:
            self._set_progress(1.0)
            return

        token = self._run_token
        if self._schedule is not None:
            self._source_id = self._schedule(self._interval_ms, lambda *args: self._tick(token))

    def stop(self):
        if self._source_id is not None:
            if self._cancel is not None:
                self._cancel(self._source_id)
            self._source_id = None
        # Invalidates callbacks still queued from the cancelled run
        self._run_token += 1

    def tick(self):
        """Advances the current run to the clock's time. Returns True while more ticks are needed."""
        return self._tick(self._run_token)

    def _tick(self, token):
        if token != self._run_token or self._start_time is None:
            return False

        elapsed_ms = (self._clock() - self._start_time) * 1000.0
        progress = min(1.0, max(0.0, elapsed_ms / self.duration_ms))
        self._set_progress(progress)

        if progress >= 1.0:
            self._source_id = None
            self._start_time = None
            return False
        return True

    def _set_progress(self, value):
        self._progress = value
        self._on_progress(value)
