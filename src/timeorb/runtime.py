import os, yaml, datetime as dt
from timeorb.config import AppConfig
from timeorb.engine import OrbEngine, OrbState
from timeorb.palette import load_palettes
def load_config(path: str | None = None) -> AppConfig:
    for p in ([path] if path else []) + ['config/config.yaml','config.yaml']:
        if p and os.path.exists(p):
            with open(p,'r') as f:
                return AppConfig.model_validate(yaml.safe_load(f) or {})
    return AppConfig()
def build_runtime(cfg: AppConfig) -> OrbEngine:
    palettes=load_palettes(cfg.engine.palettes_file)
    return OrbEngine(palettes, blend_minutes=cfg.engine.blend_minutes, blend_across_midnight=cfg.engine.blend_across_midnight)
def state_now(engine: OrbEngine, cfg: AppConfig, now: dt.datetime | None = None) -> OrbState:
    return engine.at(now or dt.datetime.now(), sub_minute=cfg.engine.sub_minute)
