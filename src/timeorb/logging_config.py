from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler

ENV_ENABLED = "TIMEORB_LOGGING"
ENV_LEVEL = "TIMEORB_LOG_LEVEL"
ENV_FILE = "TIMEORB_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(shortname)s.%(funcName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_FALSY = ("0", "false", "no", "off")

class ShortFormatter(logging.Formatter):
    # %(shortname)s: class-level logger names shortened, timeorb.engine.OrbEngine -> OrbEngine
    def format(self, record: logging.LogRecord) -> str:
        record.shortname = record.name.rsplit('.', 1)[-1]
        return super().format(record)

def _level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    lvl = logging.getLevelName(str(level).upper())
    return lvl if isinstance(lvl, int) else logging.INFO

def setup_logging(enabled: bool = True, level: str | int = "INFO", log_file: str | None = None) -> None:
    """Root logger to stdout, plus a rotating file when log_file is set. Later calls are no-ops."""
    if getattr(setup_logging, "_configured", False):
        return
    setup_logging._configured = True
    if not enabled:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    formatter = ShortFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler(stream=sys.stdout)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]
    if log_file:
        try:
            folder = os.path.dirname(log_file)
            if folder:
                os.makedirs(folder, exist_ok=True)
            rotating = RotatingFileHandler(log_file, maxBytes=512_000, backupCount=3)
            rotating.setFormatter(formatter)
            handlers.append(rotating)
        except OSError as e:
            sys.stderr.write(f"log file {log_file} unavailable, console only: {e}\n")
    logging.basicConfig(level=_level(level), handlers=handlers, force=True)

def resolve_logging_from_env_and_cfg(cfg) -> tuple[bool, str, str | None]:
    """(enabled, level, file). Each TIMEORB_* variable that is set beats cfg.logging."""
    lcfg = getattr(cfg, "logging", None)

    env = os.getenv(ENV_ENABLED)
    if env is not None:
        enabled = env.strip().lower() not in _FALSY
    else:
        enabled = bool(getattr(lcfg, "enabled", True))

    level = os.getenv(ENV_LEVEL) or getattr(lcfg, "level", None) or "INFO"
    log_file = os.getenv(ENV_FILE) or getattr(lcfg, "file", None)
    return enabled, str(level), (str(log_file) if log_file else None)
