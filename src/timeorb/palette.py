from __future__ import annotations
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping
import logging, os, yaml

from timeorb.colors import Color, Glow
from timeorb.periods import Period, PERIOD_ORDER

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class Palette:
    primary: Color
    secondary: Color
    tertiary: Color
    glow: Glow
    glow_opacity: float

PaletteTable = Mapping[Period, Palette]

def _p(primary: str, secondary: str, tertiary: str, glow: str, glow_opacity: float) -> Palette:
    return Palette(Color.from_hex(primary), Color.from_hex(secondary), Color.from_hex(tertiary),
                   Glow.parse(glow), glow_opacity)

DEFAULT_PALETTES: PaletteTable = MappingProxyType({
    Period.DAWN:       _p('#FF9A8B', '#FF6B6B', '#FFA07A', 'rgba(255, 154, 139, 0.3)', 0.25),  # soft pink/peach
    Period.MORNING:    _p('#FF7B00', '#FF4500', '#FFB347', 'rgba(255, 123, 0, 0.35)', 0.35),   # warm orange/gold
    Period.MIDDAY:     _p('#FF4500', '#FF2200', '#FF6B35', 'rgba(255, 69, 0, 0.4)', 0.4),      # bright orange/red
    Period.AFTERNOON:  _p('#FF6B35', '#FF4500', '#FFA500', 'rgba(255, 107, 53, 0.35)', 0.35),  # warm amber
    Period.DUSK:       _p('#FF6B6B', '#E84393', '#FF9F43', 'rgba(232, 67, 147, 0.3)', 0.3),    # golden hour
    Period.EVENING:    _p('#E84393', '#9B59B6', '#FF6B6B', 'rgba(155, 89, 182, 0.3)', 0.28),   # purple/magenta
    Period.NIGHT:      _p('#6C5CE7', '#5B48D9', '#9B59B6', 'rgba(108, 92, 231, 0.25)', 0.22),  # deep blue/purple
    Period.LATE_NIGHT: _p('#5B48D9', '#4A3FC7', '#7C6DD9', 'rgba(91, 72, 217, 0.2)', 0.18),    # muted deep blues
})

def _merge_entry(base: Palette, entry: Dict[str, Any]) -> Palette:
    changes: Dict[str, Any] = {}
    for key in ('primary', 'secondary', 'tertiary'):
        if key in entry:
            changes[key] = Color.from_hex(str(entry[key]))
    if 'glow' in entry:
        changes['glow'] = Glow.parse(str(entry['glow']))
    if 'glow_opacity' in entry:
        op = float(entry['glow_opacity'])
        if not 0.0 <= op <= 1.0:
            raise ValueError(f"glow_opacity out of range: {op}")
        changes['glow_opacity'] = op
    return replace(base, **changes)

def load_palettes(path: str | None, base: PaletteTable = DEFAULT_PALETTES) -> PaletteTable:
    """Merge a YAML override file over `base`. Missing file -> `base` unchanged."""
    if not path or not os.path.exists(path):
        return base
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("Palette file %s is not a mapping; using defaults", path)
        return base
    table: Dict[Period, Palette] = dict(base)
    merged = 0
    for name, entry in data.items():
        try:
            period = Period(name)
        except ValueError:
            log.warning("Unknown period %r in %s; skipped", name, path)
            continue
        if not isinstance(entry, dict):
            log.warning("Palette for %s is not a mapping; skipped", name)
            continue
        try:
            table[period] = _merge_entry(table[period], entry)
            merged += 1
        except (TypeError, ValueError) as e:
            log.warning("Bad palette for %s: %s; keeping previous", name, e)
    log.info("Loaded palette overrides from %s (%d of %d entries merged)", path, merged, len(data))
    return MappingProxyType(table)

def palettes_to_dict(table: PaletteTable) -> Dict[str, Dict[str, Any]]:
    return {p.value: {'primary': table[p].primary.to_hex(),
                      'secondary': table[p].secondary.to_hex(),
                      'tertiary': table[p].tertiary.to_hex(),
                      'glow': table[p].glow.to_css(),
                      'glow_opacity': float(table[p].glow_opacity)} for p in PERIOD_ORDER}

def save_palettes(path: str, table: PaletteTable) -> None:
    d = os.path.dirname(path)
    if d: os.makedirs(d, exist_ok=True)
    with open(path, 'w') as f:
        yaml.safe_dump(palettes_to_dict(table), f, sort_keys=False)
