from __future__ import annotations
from enum import Enum
from typing import Dict, List

class Period(str, Enum):
    DAWN = 'dawn'
    MORNING = 'morning'
    MIDDAY = 'midday'
    AFTERNOON = 'afternoon'
    DUSK = 'dusk'
    EVENING = 'evening'
    NIGHT = 'night'
    LATE_NIGHT = 'lateNight'

# cyclic; night wraps back to lateNight
PERIOD_ORDER: List[Period] = [
    Period.LATE_NIGHT, Period.DAWN, Period.MORNING, Period.MIDDAY,
    Period.AFTERNOON, Period.DUSK, Period.EVENING, Period.NIGHT,
]

PERIOD_STARTS: Dict[Period, int] = {
    Period.LATE_NIGHT: 1,
    Period.DAWN: 5,
    Period.MORNING: 7,
    Period.MIDDAY: 11,
    Period.AFTERNOON: 14,
    Period.DUSK: 17,
    Period.EVENING: 19,
    Period.NIGHT: 22,
}

def period_for_hour(hour: int) -> Period:
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range 0-23: {hour!r}")
    if 5 <= hour < 7: return Period.DAWN
    if 7 <= hour < 11: return Period.MORNING
    if 11 <= hour < 14: return Period.MIDDAY
    if 14 <= hour < 17: return Period.AFTERNOON
    if 17 <= hour < 19: return Period.DUSK
    if 19 <= hour < 22: return Period.EVENING
    if hour >= 22 or hour < 1: return Period.NIGHT
    return Period.LATE_NIGHT

def next_period(period: Period) -> Period:
    return PERIOD_ORDER[(PERIOD_ORDER.index(period) + 1) % len(PERIOD_ORDER)]

def period_length_hours(period: Period) -> int:
    start = PERIOD_STARTS[period]; nxt = PERIOD_STARTS[next_period(period)]
    return (24 - start) + nxt if nxt < start else nxt - start

def shortest_period_hours() -> int:
    return min(period_length_hours(p) for p in PERIOD_ORDER)

def transition_progress(hour: int, minute: float, blend_hours: float = 0.5, wrap_night: bool = False) -> float:
    """
    Blend weight in [0,1] toward the next period.

    Zero until the last `blend_hours` of the current period, then linear up to
    1 at the boundary. With wrap_night=False the night period is left out of
    the midnight wraparound, so 00:00-00:59 never blends into lateNight.
    """
    if not 0 <= minute < 60:
        raise ValueError(f"minute out of range [0,60): {minute!r}")
    current = period_for_hour(hour)
    start = PERIOD_STARTS[current]
    length = period_length_hours(current)

    if hour < start and (wrap_night or current is not Period.NIGHT):
        elapsed = (24 - start) + hour + minute / 60
    else:
        elapsed = (hour - start) + minute / 60

    blend_start = length - blend_hours
    if elapsed >= blend_start:
        return (elapsed - blend_start) / blend_hours
    return 0.0

def period_span(period: Period) -> str:
    return f"{PERIOD_STARTS[period]:02d}:00-{PERIOD_STARTS[next_period(period)]:02d}:00"
