import os
import sys
import signal
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import tkinter as tk
from orbui.config import UIConfig
from orbui.orb_monitor import OrbMonitor
from orbui.widgets import OrbCanvas
from timeorb.engine import OrbState
from timeorb.presentation import describe, style_for
from timeorb.runtime import load_config, build_runtime
from timeorb.logging_config import setup_logging, resolve_logging_from_env_and_cfg

class OrbWindow(tk.Tk):
    def __init__(self, config_path=None, fullscreen=None):
        super().__init__()
        self.title('Time of Day')
        self.config(bg=UIConfig.bg)

        self.cfg = load_config(config_path)
        enabled, level, log_file = resolve_logging_from_env_and_cfg(self.cfg)
        setup_logging(enabled=enabled, level=level, log_file=log_file)
        self._log = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        fs = self.cfg.ui.fullscreen if fullscreen is None else fullscreen
        self.attributes('-fullscreen', bool(fs))
        self.bind('<Escape>', lambda e: self.attributes('-fullscreen', False))
        self._log.info("OrbWindow starting (fullscreen=%s)", fs)

        self.engine = build_runtime(self.cfg)
        self.orb = OrbCanvas(self, self.cfg.ui.orb_size_px, self.cfg.render)
        self.orb.pack(expand=True, padx=UIConfig.safe_margin_px, pady=(UIConfig.safe_margin_px, 8))
        self.caption = tk.Label(self, text='--', fg=UIConfig.fg, bg=UIConfig.bg, font=UIConfig.period_font)
        self.caption.pack()
        self.detail = tk.Label(self, text='', fg=UIConfig.text_muted, bg=UIConfig.bg, font=UIConfig.detail_font)
        self.detail.pack(pady=(0, UIConfig.safe_margin_px))

        self.monitor = OrbMonitor(self.engine, period_ms=self.cfg.engine.refresh_ms, sub_minute=self.cfg.engine.sub_minute)
        self.monitor.add_listener(self._on_orb_update)
        self.monitor.start_monitoring(self)
        self.protocol('WM_DELETE_WINDOW', self.on_close)

    def _on_orb_update(self, state: OrbState) -> None:
        self.orb.draw(style_for(state, self.cfg.render))
        caption, detail = describe(state)
        self.caption.config(text=caption)
        self.detail.config(text=detail)

    def on_close(self):
        self.monitor.stop()
        self.destroy()

def main():
    p = argparse.ArgumentParser()
    p.add_argument('--config', default=None)
    g = p.add_mutually_exclusive_group()
    g.add_argument('--windowed', action='store_true'); g.add_argument('--fullscreen', action='store_true')
    a = p.parse_args()
    fs = True if a.fullscreen else (False if a.windowed else None)
    app = OrbWindow(config_path=a.config, fullscreen=fs)
    signal.signal(signal.SIGTERM, lambda *x: sys.exit(0))
    app.mainloop()

if __name__ == '__main__':
    main()
