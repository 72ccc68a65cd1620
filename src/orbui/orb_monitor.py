from __future__ import annotations
import datetime as dt
import logging
from typing import Callable, List, Optional

from timeorb.engine import OrbEngine, OrbState

class OrbMonitor:
    """
    Re-samples the clock every period_ms and publishes OrbState to listeners.
    Mirrors the NetworkMonitor/WeatherMonitor API: `app` is anything with
    tkinter's after()/after_cancel().
    """
    def __init__(self, engine: OrbEngine, period_ms: int = 60000, sub_minute: bool = False,
                 clock: Callable[[], dt.datetime] = dt.datetime.now):
        self._engine = engine
        self._period_ms = max(250, int(period_ms))
        self._sub_minute = bool(sub_minute)
        self._clock = clock
        self._listeners: List[Callable[[OrbState], None]] = []
        self._current: Optional[OrbState] = None
        self._app = None
        self._job = None
        self._log = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._log.info("OrbMonitor init period=%dms sub_minute=%s", self._period_ms, self._sub_minute)

    @property
    def current(self) -> Optional[OrbState]:
        return self._current

    def add_listener(self, cb: Callable[[OrbState], None]) -> None:
        if cb not in self._listeners:
            self._listeners.append(cb)
            if self._current is not None:
                self._call(cb, self._current)

    def remove_listener(self, cb: Callable[[OrbState], None]) -> None:
        try:
            self._listeners.remove(cb)
        except ValueError:
            pass

    def start_monitoring(self, app) -> None:
        if self._app is not None:
            return
        self._app = app
        self._log.info("Starting monitor")
        self._tick()  # immediate first sample

    def stop(self) -> None:
        if self._app is not None and self._job is not None:
            try:
                self._app.after_cancel(self._job)
            except Exception as e:
                self._log.debug("after_cancel failed: %s", e)
        self._app = None; self._job = None
        self._log.info("Stopped monitor")

    def refresh(self) -> OrbState:
        """Compute the state for now, swap it in, notify when period, progress or colors change."""
        state = self._engine.at(self._clock(), sub_minute=self._sub_minute)
        prev = self._current
        self._current = state
        if prev is not None and prev.period is not state.period:
            self._log.info("Period changed %s -> %s", prev.period.value, state.period.value)
        if state.is_transitioning and (prev is None or not prev.is_transitioning):
            self._log.debug("Blending %s -> %s (%.2f)", state.period.value, state.next_period.value, state.progress)
        if prev is None or prev.colors != state.colors or prev.period is not state.period or prev.progress != state.progress:
            for cb in list(self._listeners):
                self._call(cb, state)
        return state

    # internals
    def _call(self, cb, state: OrbState) -> None:
        try:
            cb(state)
        except Exception as e:
            self._log.error("Listener error: %s", e)

    def _tick(self) -> None:
        try:
            self.refresh()
        except Exception as e:
            self._log.exception("Orb tick failed: %s", e)
        finally:
            self._schedule_next()

    def _schedule_next(self) -> None:
        if self._app is not None:
            try:
                self._job = self._app.after(self._period_ms, self._tick)
            except Exception as e:
                self._log.warning("Could not schedule next tick: %s", e)
