from __future__ import annotations
import math, re
from typing import NamedTuple

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6})$')
_RGBA_RE = re.compile(r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$')

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, text: str) -> 'Color':
        m = _HEX_RE.match(text.strip()) if isinstance(text, str) else None
        if not m:
            raise ValueError(f"not a #RRGGBB color: {text!r}")
        h = m.group(1)
        return cls(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))

    def to_hex(self) -> str:
        return f'#{self.r:02X}{self.g:02X}{self.b:02X}'

class Glow(NamedTuple):
    color: Color
    alpha: float

    @classmethod
    def parse(cls, text: str) -> 'Glow':
        """Accepts 'rgba(r, g, b, a)', 'rgb(r, g, b)' or '#RRGGBB' (alpha 1.0)."""
        if not isinstance(text, str):
            raise ValueError(f"not a glow color: {text!r}")
        s = text.strip()
        if s.startswith('#'):
            return cls(Color.from_hex(s), 1.0)
        m = _RGBA_RE.match(s)
        if not m:
            raise ValueError(f"not an rgba() color: {text!r}")
        r, g, b = (int(m.group(i)) for i in (1, 2, 3))
        a = float(m.group(4)) if m.group(4) is not None else 1.0
        if max(r, g, b) > 255 or not 0.0 <= a <= 1.0:
            raise ValueError(f"rgba() component out of range: {text!r}")
        return cls(Color(r, g, b), a)

    def to_css(self) -> str:
        c = self.color
        return f'rgba({c.r}, {c.g}, {c.b}, {self.alpha:g})'

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def interpolate_color(c1: Color, c2: Color, factor: float) -> Color:
    # factor is trusted; values outside [0,1] extrapolate
    return Color(_round_half_up(lerp(c1.r, c2.r, factor)),
                 _round_half_up(lerp(c1.g, c2.g, factor)),
                 _round_half_up(lerp(c1.b, c2.b, factor)))
