"""Build the runtime config from an optional YAML file and the environment."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from weatherrelay.config.schema import NotifySource, RelayConfig
from weatherrelay.errors import ConfigError

GEOCODE_ENV_VAR = "GEOCODE"
# Per-deployment variable: a full JMA document URL, or a bare region code.
AREA_ENV_VAR = "AREA"
WEBHOOK_ENV_VAR = "WEBHOOK"


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    require_webhook: bool = False,
) -> RelayConfig:
    """Load and validate config.

    Environment variables override YAML values. ``AREA`` holding a URL becomes
    ``overview_url`` (or ``forecast_url`` for a forecast document URL), and an
    overview URL switches notifications to the overview text unless the YAML
    picks a source. Raises ConfigError when the file is unreadable or invalid,
    when no fetch target is configured, or when the webhook URL is missing and
    ``require_webhook`` is set.
    """
    environ = os.environ if environ is None else environ
    raw = _read_yaml(path) if path is not None else {}

    area = environ.get(AREA_ENV_VAR, "")
    if _is_url(area):
        if "/overview_forecast/" in area:
            raw["overview_url"] = area
            raw.setdefault("notify_source", NotifySource.OVERVIEW.value)
        else:
            raw["forecast_url"] = area
    elif area:
        raw["region_code"] = area
    if environ.get(GEOCODE_ENV_VAR):
        raw["region_code"] = environ[GEOCODE_ENV_VAR]
    if environ.get(WEBHOOK_ENV_VAR):
        raw["webhook_url"] = environ[WEBHOOK_ENV_VAR]

    if not (raw.get("region_code") or raw.get("forecast_url") or raw.get("overview_url")):
        raise ConfigError("GEOCODE must be set")
    if require_webhook and not raw.get("webhook_url"):
        raise ConfigError("WEBHOOK must be set")

    try:
        return RelayConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def _read_yaml(path: str | Path) -> dict:
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Config {path} must be a mapping, got {type(raw).__name__}"
        )
    return raw


def _is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))
