"""
UaPCA Configuration
===================

Numerical defaults live in defaults.yaml alongside this file. A user file
can overlay any subset of the keys.

Usage:
    from uapca.config import get_config, load_config, set_config

    config = get_config()                    # cached, defaults + $UAPCA_CONFIG
    set_config(load_config('strict.yaml'))   # swap in a different file
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


DEFAULTS_PATH = Path(__file__).parent / 'defaults.yaml'
ENV_VAR = 'UAPCA_CONFIG'


@dataclass(frozen=True)
class UaPCAConfig:
    """Numerical settings shared by fit, transform, tracer and sampler."""
    default_scale: float = 1.0
    psd_tolerance: float = 1e-10
    symmetry_tolerance: float = 1e-8

    def __post_init__(self):
        if self.psd_tolerance < 0:
            raise ValueError(f"psd_tolerance must be >= 0, got {self.psd_tolerance}")
        if self.symmetry_tolerance < 0:
            raise ValueError(
                f"symmetry_tolerance must be >= 0, got {self.symmetry_tolerance}"
            )


_active_config: Optional[UaPCAConfig] = None


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(UaPCAConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")

    return {k: float(v) for k, v in raw.items()}


def load_config(path: Union[str, Path, None] = None) -> UaPCAConfig:
    """
    Load configuration from defaults.yaml, overlaid with an optional file.

    Args:
        path: YAML file with any subset of the UaPCAConfig keys.

    Returns:
        UaPCAConfig
    """
    config = UaPCAConfig(**_read_yaml(DEFAULTS_PATH))

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config = replace(config, **_read_yaml(path))

    return config


def get_config() -> UaPCAConfig:
    """Return the active config, loading it on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_config(os.environ.get(ENV_VAR))
    return _active_config


def set_config(config: UaPCAConfig) -> None:
    """Replace the active config."""
    global _active_config
    _active_config = config


def clear_config_cache() -> None:
    """Forget the active config so the next get_config() reloads it."""
    global _active_config
    _active_config = None


__all__ = [
    'UaPCAConfig',
    'DEFAULTS_PATH',
    'ENV_VAR',
    'load_config',
    'get_config',
    'set_config',
    'clear_config_cache',
]
