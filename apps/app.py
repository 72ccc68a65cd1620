import os, sys, time, signal, json, argparse, logging, datetime as dt
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
from timeorb.runtime import load_config, build_runtime, state_now
from timeorb.presentation import style_for
from timeorb.palette import save_palettes
from timeorb.logging_config import setup_logging, resolve_logging_from_env_and_cfg

RUN = True
def handle_sig(sig, frame):
    global RUN; RUN = False

def state_json(state, cfg) -> dict:
    st = style_for(state, cfg.render); c = state.colors
    return {
        "time": f"{state.hour:02d}:{int(state.minute):02d}",
        "period": state.period.value,
        "next_period": state.next_period.value,
        "progress": round(state.progress, 4),
        "is_transitioning": state.is_transitioning,
        "colors": {"primary": c.primary.to_hex(), "secondary": c.secondary.to_hex(),
                   "tertiary": c.tertiary.to_hex(), "glow": c.glow.to_css(),
                   "glow_opacity": round(c.glow_opacity, 4)},
        "gradient": st.gradient,
        "box_shadow": st.box_shadow,
    }

def parse_hhmm(s: str) -> dt.datetime:
    try:
        t = dt.datetime.strptime(s, "%H:%M")
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM, got {s!r}")
    return dt.datetime.combine(dt.date.today(), t.time())

def main():
    p = argparse.ArgumentParser(description="Time-of-day orb colors (headless).")
    p.add_argument('--config', default=None, help="config YAML (default config/config.yaml)")
    p.add_argument('--at', type=parse_hhmm, default=None, help="print the state for HH:MM and exit")
    p.add_argument('--dump-palettes', metavar='PATH', default=None, help="write the active palette table as YAML and exit")
    a = p.parse_args()

    cfg = load_config(a.config)
    enabled, level, log_file = resolve_logging_from_env_and_cfg(cfg)
    setup_logging(enabled=enabled, level=level, log_file=log_file)
    log = logging.getLogger("apps.app")
    engine = build_runtime(cfg)

    if a.dump_palettes:
        save_palettes(a.dump_palettes, engine.palettes)
        log.info("Wrote palettes to %s", a.dump_palettes)
        return 0
    if a.at is not None:
        print(json.dumps(state_json(state_now(engine, cfg, a.at), cfg), indent=2))
        return 0

    signal.signal(signal.SIGINT, handle_sig); signal.signal(signal.SIGTERM, handle_sig)
    log.info("Starting orb loop (every %dms). Ctrl+C to exit.", cfg.engine.refresh_ms)
    last = None
    while RUN:
        state = state_now(engine, cfg)
        if last is None or state.colors != last.colors or state.period is not last.period:
            log.info("%s", json.dumps(state_json(state, cfg)))
        last = state
        # wake at least every 0.5s to check RUN
        deadline = time.monotonic() + cfg.engine.refresh_ms / 1000.0
        while RUN and time.monotonic() < deadline:
            time.sleep(min(0.5, max(0.0, deadline - time.monotonic())))
    log.info("Shutting down.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
