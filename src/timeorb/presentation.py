from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from timeorb.colors import Color, Glow, interpolate_color
from timeorb.engine import OrbState
from timeorb.palette import Palette
from timeorb.periods import period_span

Stop = Tuple[float, Color]

@dataclass(frozen=True)
class OrbStyle:
    gradient: str
    box_shadow: str
    stops: List[Stop]
    glow: Glow
    glow_opacity: float
    is_transitioning: bool

def gradient_stops(palette: Palette) -> List[Stop]:
    return [
        (0.0, palette.primary),
        (0.4, palette.secondary),
        (0.8, palette.tertiary),
        (1.0, interpolate_color(palette.tertiary, palette.secondary, 0.5)),
    ]

def radial_gradient(palette: Palette, center: Tuple[int, int] = (35, 35)) -> str:
    stops = ', '.join(f'{c.to_hex()} {round(off * 100)}%' for off, c in gradient_stops(palette))
    return f'radial-gradient(circle at {center[0]}% {center[1]}%, {stops})'

def box_shadow(palette: Palette, blur_px: int = 120, spread_px: int = 60) -> str:
    return f'0 0 {blur_px}px {spread_px}px {palette.glow.to_css()}'

def style_for(state: OrbState, render=None) -> OrbStyle:
    """render: the `render` section of AppConfig, or None for the stock look."""
    center = (getattr(render, 'center_x_pct', 35), getattr(render, 'center_y_pct', 35))
    blur = getattr(render, 'glow_blur_px', 120); spread = getattr(render, 'glow_spread_px', 60)
    c = state.colors
    return OrbStyle(
        gradient=radial_gradient(c, center),
        box_shadow=box_shadow(c, blur, spread),
        stops=gradient_stops(c),
        glow=c.glow,
        glow_opacity=c.glow_opacity,
        is_transitioning=state.is_transitioning,
    )

def sample_gradient(stops: Sequence[Stop], t: float) -> Color:
    if not stops:
        raise ValueError("no gradient stops")
    if t <= stops[0][0]:
        return stops[0][1]
    for (o1, c1), (o2, c2) in zip(stops, stops[1:]):
        if t <= o2:
            return c1 if o2 == o1 else interpolate_color(c1, c2, (t - o1) / (o2 - o1))
    return stops[-1][1]

def flatten_glow(glow: Glow, background: Color, strength: float = 1.0) -> Color:
    # no alpha on a tk canvas: composite over the opaque background instead
    a = max(0.0, min(1.0, glow.alpha * strength))
    return interpolate_color(background, glow.color, a)

PERIOD_LABELS = {
    'dawn': 'Dawn', 'morning': 'Morning', 'midday': 'Midday', 'afternoon': 'Afternoon',
    'dusk': 'Dusk', 'evening': 'Evening', 'night': 'Night', 'lateNight': 'Late night',
}

def describe(state: OrbState) -> Tuple[str, str]:
    """(caption, detail) for the orb labels; at rest the detail is the period span, not the clock."""
    caption = PERIOD_LABELS.get(state.period.value, state.period.value)
    if state.is_transitioning:
        nxt = PERIOD_LABELS.get(state.next_period.value, state.next_period.value)
        return caption, f'shifting to {nxt.lower()} · {state.progress:.0%}'
    return caption, period_span(state.period)
