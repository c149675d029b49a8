import logging
import logging.handlers
import os
import sys
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from charhash.glyph.sdk import (
    DEFAULT_BG,
    DEFAULT_FG,
    DEFAULT_PAD,
    DEFAULT_SIZE,
    DEFAULT_STROKE,
)

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# ---------------- Logging ----------------


def get_logger(name="charhash"):
    logger = logging.getLogger(name)
    # dotted names inherit the handlers of the package logger
    if logger.handlers or "." in name:
        return logger
    logger.setLevel(logging.INFO)
    fmt = logging.Formatter(
        '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
    )
    # stdout is reserved for the SVG document
    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(fmt)
    logger.addHandler(sh)
    logger.propagate = False
    return logger


log = get_logger("charhash")

# ---------------- Config Models ----------------


class GlyphConfig(BaseModel):
    size: float = Field(DEFAULT_SIZE, gt=0, allow_inf_nan=False)
    stroke: float = Field(DEFAULT_STROKE, gt=0, allow_inf_nan=False)
    pad: float = Field(DEFAULT_PAD, ge=0, allow_inf_nan=False)
    fg: str = DEFAULT_FG
    bg: str = DEFAULT_BG
    log_level: str = "WARNING"
    log_file: Optional[str] = None


ENV_KEYS = {
    "CHARHASH_SIZE": "size",
    "CHARHASH_STROKE": "stroke",
    "CHARHASH_PAD": "pad",
    "CHARHASH_FG": "fg",
    "CHARHASH_BG": "bg",
    "CHARHASH_LOG_LEVEL": "log_level",
    "CHARHASH_LOG_FILE": "log_file",
}


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    return data


def _config_path(path: Optional[str]) -> Optional[str]:
    if path:
        return path
    if os.getenv("CHARHASH_CONFIG"):
        return os.getenv("CHARHASH_CONFIG")
    for name in ("glyph.yaml", "glyph.example.yaml"):
        candidate = os.path.join(BASE, "conf", name)
        if os.path.exists(candidate):
            return candidate
    return None


def _env_overlay() -> Dict[str, Any]:
    return {field: os.environ[key] for key, field in ENV_KEYS.items() if os.environ.get(key)}


def load_env() -> dict:
    load_dotenv(os.path.join(BASE, ".env"))
    return {k: v for k, v in os.environ.items()}


def load_config(path: Optional[str] = None) -> GlyphConfig:
    """
    Resolve CLI defaults: YAML file first, then CHARHASH_* environment overrides.

    An explicit ``path`` that does not exist is an error; the implicit
    locations are optional and fall back to built-in defaults.
    """
    load_env()
    resolved = _config_path(path)
    raw: Dict[str, Any] = {}
    if resolved:
        if not os.path.exists(resolved):
            raise FileNotFoundError(f"Config file not found: {resolved}")
        raw = load_yaml(resolved)
    raw.update(_env_overlay())

    try:
        cfg = GlyphConfig(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


def configure_logging(cfg: GlyphConfig) -> logging.Logger:
    logger = get_logger("charhash")
    logger.setLevel(getattr(logging, cfg.log_level.upper(), logging.WARNING))
    if cfg.log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(cfg.log_file, maxBytes=1_000_000, backupCount=3)
        fh.setFormatter(logger.handlers[0].formatter)
        logger.addHandler(fh)
    return logger
