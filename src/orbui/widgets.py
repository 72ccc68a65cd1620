import tkinter as tk

from orbui.config import UIConfig
from timeorb.colors import Color
from timeorb.presentation import OrbStyle, flatten_glow, sample_gradient

REF_ORB_PX = 280  # glow blur/spread are given for an orb this size

class OrbCanvas(tk.Canvas):
    """Draws the orb and its glow. Tk has no gradients or alpha, so both are stacked ovals."""
    def __init__(self, parent, orb_px, render, command=None):
        self._orb = int(orb_px); self._render = render
        side = self._side()
        super().__init__(parent, width=side, height=side, bg=UIConfig.bg, bd=0, highlightthickness=0)
        self._bg = Color.from_hex(UIConfig.bg)
        self._style = None
        if command:
            self.bind('<Button-1>', lambda e: command())

    def _scale(self):
        return self._orb / REF_ORB_PX

    def _halo_px(self):
        return (self._render.glow_spread_px + self._render.glow_blur_px / 2) * self._scale()

    def _side(self):
        return int(self._orb + 2 * self._halo_px())

    def resize(self, orb_px):
        self._orb = int(orb_px)
        side = self._side()
        self.config(width=side, height=side)
        if self._style is not None:
            self.draw(self._style)

    def draw(self, style: OrbStyle):
        self._style = style
        self.delete('all')
        side = self._side(); c = side / 2; R = self._orb / 2
        # glow: outer rings fade into the background
        halo = R + self._halo_px(); n = max(2, UIConfig.glow_rings)
        for i in range(n):
            t = i / (n - 1)
            r = halo - (halo - R) * t
            col = flatten_glow(style.glow, self._bg, t * (0.5 + style.glow_opacity))
            self.create_oval(c - r, c - r, c + r, c + r, fill=col.to_hex(), outline='', tags='glow')
        # body: rings shrink toward the highlight point
        hx = side / 2 - R + self._orb * self._render.center_x_pct / 100
        hy = side / 2 - R + self._orb * self._render.center_y_pct / 100
        n = max(2, UIConfig.orb_steps)
        for i in range(n):
            t = 1 - i / n
            x = hx + (c - hx) * t; y = hy + (c - hy) * t; r = R * t
            col = sample_gradient(style.stops, t)
            self.create_oval(x - r, y - r, x + r, y + r, fill=col.to_hex(), outline='', tags='orb')
