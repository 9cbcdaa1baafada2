"""
Runtime configuration for the primitives front ends.

Precedence (later wins): dataclass defaults, YAML file, environment.

Environment:
- ``PRIMITIVES_EXP2_SCALING``: ``ldexp`` (default) or ``legacy``
- ``PRIMITIVES_STRICT_HEX``: boolean, reject non-hex characters
- ``PRIMITIVES_BASE32Z_CAPACITY``: int, clamped to [1, 4096]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from ..core.errors import ConfigError
from ..core.exp2 import Exp2Scaling
from ..encoding.base32z import DEFAULT_CAPACITY

MIN_CAPACITY = 1
MAX_CAPACITY = 4096

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class PrimitivesConfig:
    """
    Knobs for callers that cannot pass keyword arguments through.

    Defaults reproduce the library defaults exactly.
    """

    exp2_scaling: Exp2Scaling = Exp2Scaling.LDEXP
    strict_hex: bool = False
    base32z_capacity: int = DEFAULT_CAPACITY


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return default


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        return int(default)
    if v < lo:
        return int(lo)
    if v > hi:
        return int(hi)
    return int(v)


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _parse_scaling(value: Any, *, name: str) -> Exp2Scaling:
    if isinstance(value, Exp2Scaling):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    try:
        return Exp2Scaling(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in Exp2Scaling)
        raise ConfigError(f"{name} must be one of: {allowed}") from exc


def _require_mapping(obj: Any, *, name: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise ConfigError(f"{name} must be a mapping")
    return obj


def config_from_mapping(obj: Any, *, base: Optional[PrimitivesConfig] = None) -> PrimitivesConfig:
    """Overlay a parsed mapping (e.g. from YAML) onto *base*."""
    cfg = base or PrimitivesConfig()
    data = _require_mapping(obj, name="config")

    known = {"exp2_scaling", "strict_hex", "base32z_capacity"}
    unknown = sorted(str(k) for k in data.keys() if k not in known)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    if "exp2_scaling" in data:
        cfg = replace(cfg, exp2_scaling=_parse_scaling(data["exp2_scaling"], name="exp2_scaling"))
    if "strict_hex" in data:
        v = data["strict_hex"]
        if not isinstance(v, bool):
            raise ConfigError("strict_hex must be a bool")
        cfg = replace(cfg, strict_hex=v)
    if "base32z_capacity" in data:
        v = data["base32z_capacity"]
        if not isinstance(v, int) or isinstance(v, bool):
            raise ConfigError("base32z_capacity must be an int")
        if not (MIN_CAPACITY <= v <= MAX_CAPACITY):
            raise ConfigError(f"base32z_capacity must be in [{MIN_CAPACITY}, {MAX_CAPACITY}]")
        cfg = replace(cfg, base32z_capacity=v)
    return cfg


def load_config_file(path: Union[str, Path], *, base: Optional[PrimitivesConfig] = None) -> PrimitivesConfig:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {p}: {exc}") from exc
    try:
        obj = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"config file {p} is not valid YAML") from exc
    if obj is None:
        # Empty file.
        return base or PrimitivesConfig()
    return config_from_mapping(obj, base=base)


def config_from_env(base: Optional[PrimitivesConfig] = None) -> PrimitivesConfig:
    cfg = base or PrimitivesConfig()
    scaling = _env_str("PRIMITIVES_EXP2_SCALING", cfg.exp2_scaling.value)
    return PrimitivesConfig(
        exp2_scaling=_parse_scaling(scaling, name="PRIMITIVES_EXP2_SCALING"),
        strict_hex=_env_bool("PRIMITIVES_STRICT_HEX", cfg.strict_hex),
        base32z_capacity=_env_int(
            "PRIMITIVES_BASE32Z_CAPACITY", cfg.base32z_capacity, lo=MIN_CAPACITY, hi=MAX_CAPACITY
        ),
    )


def load_config(path: Union[str, Path, None] = None) -> PrimitivesConfig:
    """Defaults, then the YAML file at *path* (if given), then the environment."""
    cfg = PrimitivesConfig()
    if path is not None:
        cfg = load_config_file(path, base=cfg)
    return config_from_env(cfg)
