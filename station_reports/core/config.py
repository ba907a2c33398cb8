"""Configuration loading and CLI helpers.

Centralized so that every entry point in the project uses the same config
resolution. Paths and report options live in config.yaml; the config file
itself can be redirected with ``STATION_REPORTS_CONFIG`` (read from the
environment or a local .env).
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STATION_REPORTS_CONFIG"

REPORT_NAMES = ("station_extremes", "daily_averages")
POLICY_NAMES = ("earliest_on_tie", "legacy")


# ======================================================================
# Config loading
# ======================================================================

def _default_config_path() -> Path:
    return Path(__file__).resolve().parent.parent / "config.yaml"


def load_config(config_path: Optional[str] = None) -> tuple[dict, Path]:
    """Load and return the YAML config dictionary and the path it came from.

    Resolution order: explicit ``config_path``, then ``STATION_REPORTS_CONFIG``
    (a .env in the working directory is honoured), then ``config.yaml`` next
    to the station_reports package.
    """
    if config_path:
        path = Path(config_path)
    else:
        load_dotenv(Path.cwd() / ".env")
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(os.path.expanduser(env_path)) if env_path else _default_config_path()

    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}. "
            f"Pass --config or set {CONFIG_ENV_VAR}."
        )
    with open(path) as f:
        config = yaml.safe_load(f) or {}
    logger.debug("Loaded config from %s", path)
    return config, path


# ======================================================================
# Typed view
# ======================================================================

@dataclass(frozen=True)
class ReportSettings:
    """Validated report options pulled out of the raw config dict."""

    input_path: Optional[Path] = None
    max_observations: Optional[int] = None
    include: tuple[str, ...] = REPORT_NAMES
    extreme_policy: str = "earliest_on_tie"
    export_dir: Optional[Path] = None
    log_level: str = "INFO"


def _resolve(base: Path, value: Optional[str]) -> Optional[Path]:
    """Resolve a config-relative path; None stays None."""
    if not value:
        return None
    p = Path(os.path.expanduser(value))
    return p if p.is_absolute() else (base / p).resolve()


def report_settings(config: dict, config_path: Optional[Path] = None) -> ReportSettings:
    """Build ``ReportSettings`` from a config dict.

    Relative paths are resolved against the directory of ``config_path``
    (or the working directory when no path is known).
    """
    base = config_path.parent if config_path else Path.cwd()
    input_cfg = config.get("input", {}) or {}
    reports_cfg = config.get("reports", {}) or {}
    export_cfg = config.get("export", {}) or {}
    logging_cfg = config.get("logging", {}) or {}

    include = tuple(reports_cfg.get("include") or REPORT_NAMES)
    unknown = [name for name in include if name not in REPORT_NAMES]
    if unknown:
        raise ValueError(f"Unknown report(s) in config: {unknown}; expected {list(REPORT_NAMES)}")

    policy = str(reports_cfg.get("extreme_policy", "earliest_on_tie")).lower()
    if policy not in POLICY_NAMES:
        raise ValueError(f"extreme_policy must be one of {list(POLICY_NAMES)}, got {policy!r}")

    max_obs = input_cfg.get("max_observations")
    if max_obs is not None:
        max_obs = int(max_obs)
        if max_obs < 0:
            raise ValueError(f"max_observations must be >= 0, got {max_obs}")

    return ReportSettings(
        input_path=_resolve(base, input_cfg.get("path")),
        max_observations=max_obs,
        include=include,
        extreme_policy=policy,
        export_dir=_resolve(base, export_cfg.get("dir")),
        log_level=str(logging_cfg.get("level", "INFO")),
    )


# ======================================================================
# CLI helpers
# ======================================================================

def standard_argparser(description: str) -> argparse.ArgumentParser:
    """Return an ``ArgumentParser`` with common flags."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: auto-detect)",
    )
    parser.add_argument("--log-level", default=None)
    return parser


def configure_logging(level_name: str = "INFO") -> None:
    """Set up root logging with a consistent format."""
    logging.basicConfig(
        level=getattr(logging, level_name.upper()),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )
