"""
Runtime settings.

Defaults are the thresholds the analyzer page has always used. Each value can be
overridden with a ``DATAVIZ_*`` environment variable, and the Streamlit app
additionally passes anything found in ``st.secrets``.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

ENV_PREFIX = "DATAVIZ_"


@dataclass(frozen=True)
class Settings:
    bin_count: int = 20
    max_points: int = 50
    missing_threshold: float = 0.1
    skew_factor: float = 1.2
    categorical_ratio: float = 0.5
    preview_rows: int = 10
    log_level: str = "INFO"

    def __post_init__(self):
        if self.bin_count < 1:
            raise ValueError("bin_count must be at least 1")
        if self.max_points < 1:
            raise ValueError("max_points must be at least 1")
        if self.preview_rows < 0:
            raise ValueError("preview_rows must not be negative")


def _convert(raw: Any, target: type, source: str):
    if isinstance(raw, target) and not isinstance(raw, bool):
        return raw
    try:
        if target is str:
            return str(raw).strip()
        return target(str(raw).strip())
    except ValueError:
        raise ValueError(f"Invalid value for {source}: {raw!r}") from None


def load_settings(overrides: Optional[Mapping[str, Any]] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment, then apply explicit overrides.

    ``overrides`` is keyed by field name (``bin_count``) or by the environment
    variable name (``DATAVIZ_BIN_COUNT``); unknown keys are ignored so a whole
    secrets mapping can be passed through.
    """
    environ = os.environ if environ is None else environ
    values = {}
    for f in fields(Settings):
        env_name = ENV_PREFIX + f.name.upper()
        if env_name in environ:
            values[f.name] = _convert(environ[env_name], type(f.default), env_name)
    for key, raw in (overrides or {}).items():
        name = key[len(ENV_PREFIX):].lower() if key.upper().startswith(ENV_PREFIX) else key
        for f in fields(Settings):
            if f.name == name:
                values[f.name] = _convert(raw, type(f.default), key)
    return replace(Settings(), **values)
