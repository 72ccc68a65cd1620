from __future__ import annotations
import datetime as dt
import logging
from dataclasses import dataclass

from timeorb.colors import interpolate_color, lerp
from timeorb.palette import DEFAULT_PALETTES, Palette, PaletteTable
from timeorb.periods import Period, PERIOD_ORDER, next_period, period_for_hour, shortest_period_hours, transition_progress


# =============================================================================
# OrbEngine
# -----------------------------------------------------------------------------
# Wall-clock time -> blended orb palette.
#
#   hour ──► period_for_hour ──► current period ──► next_period
#   hour, minute ──► transition_progress ──► weight in [0,1]
#   palettes[current], palettes[next], weight ──► blend_palettes ──► OrbState
#
# The palette table is handed in at construction and never mutated. compute()
# has no side effects; callers (OrbMonitor, apps/app.py) keep the latest
# result and replace it whole on every tick.
#
# Blend window defaults to 30 minutes and must fit inside the shortest period
# (dawn/dusk, 2h), otherwise progress could exceed 1 before the boundary.
# =============================================================================

def blend_palettes(current: Palette, target: Palette, progress: float) -> Palette:
    if progress <= 0:
        return current
    return Palette(
        primary=interpolate_color(current.primary, target.primary, progress),
        secondary=interpolate_color(current.secondary, target.secondary, progress),
        tertiary=interpolate_color(current.tertiary, target.tertiary, progress),
        glow=target.glow,  # target glow, not interpolated
        glow_opacity=lerp(current.glow_opacity, target.glow_opacity, progress),
    )

@dataclass(frozen=True)
class OrbState:
    period: Period
    next_period: Period
    progress: float
    colors: Palette
    hour: int
    minute: float

    @property
    def is_transitioning(self) -> bool:
        return self.progress > 0

class OrbEngine:
    def __init__(self, palettes: PaletteTable = DEFAULT_PALETTES, blend_minutes: int = 30,
                 blend_across_midnight: bool = False):
        missing = [p.value for p in PERIOD_ORDER if p not in palettes]
        if missing:
            raise ValueError(f"palette table missing periods: {', '.join(missing)}")
        if blend_minutes <= 0 or blend_minutes > shortest_period_hours() * 60:
            raise ValueError(f"blend window {blend_minutes}min must be within 1..{shortest_period_hours() * 60}")
        self.palettes = palettes
        self.blend_hours = blend_minutes / 60.0
        self.blend_across_midnight = bool(blend_across_midnight)
        self._log = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._log.debug("OrbEngine init blend=%dmin across_midnight=%s", blend_minutes, self.blend_across_midnight)

    def compute(self, hour: int, minute: float) -> OrbState:
        current = period_for_hour(hour)
        nxt = next_period(current)
        progress = transition_progress(hour, minute, self.blend_hours, wrap_night=self.blend_across_midnight)
        colors = blend_palettes(self.palettes[current], self.palettes[nxt], progress)
        return OrbState(period=current, next_period=nxt, progress=progress, colors=colors, hour=hour, minute=minute)

    def at(self, when: dt.datetime, sub_minute: bool = False) -> OrbState:
        minute = when.minute + (when.second / 60.0 if sub_minute else 0)
        return self.compute(when.hour, minute)
