"""
Configuration — layered defaults for the vectorizer.

Layers (later wins):
    1. Built-in DEFAULTS
    2. YAML file named by $MOTIFVEC_CONFIG

Nested YAML mappings are flattened to dotted keys:

    vectorizer:
      compression_ratio: 0.85

is read back as get_config().get('vectorizer.compression_ratio').

Usage:
    from motifvec.config import get_config

    config = get_config()
    ratio = config.get('vectorizer.compression_ratio', 0.8)
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


ENV_VAR = 'MOTIFVEC_CONFIG'

DEFAULTS: Dict[str, Any] = {
    'vectorizer.embedding_dim': 64,
    'vectorizer.entropy_threshold': 0.5,
    'vectorizer.compression_ratio': 0.8,
}


def _flatten(d: Dict[str, Any], prefix: str = '') -> Dict[str, Any]:
    flat = {}
    for key, value in d.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, dotted + '.'))
        else:
            flat[dotted] = value
    return flat


class Config:
    """Flat dotted-key configuration."""

    def __init__(self, values: Optional[Dict[str, Any]] = None, source: Optional[str] = None):
        self._values = dict(DEFAULTS)
        if values:
            self._values.update(_flatten(values))
        self.source = source

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)


def load_config(path: Optional[str] = None) -> Config:
    """
    Build a Config from defaults plus an optional YAML file.

    Args:
        path: YAML file. Defaults to $MOTIFVEC_CONFIG if set.

    Raises:
        FileNotFoundError: if an explicit or env path does not exist
        ValueError: if the YAML top level is not a mapping
    """
    if path is None:
        path = os.environ.get(ENV_VAR)
    if not path:
        return Config()

    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")

    with open(config_file) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping at the top level")

    return Config(raw, source=str(config_file))


_config: Optional[Config] = None


def get_config() -> Config:
    """Process-wide config, loaded on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() reloads."""
    global _config
    _config = None
