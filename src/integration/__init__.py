"""
Host-facing configuration for the primitives
"""

from .config import (
    PrimitivesConfig,
    config_from_env,
    config_from_mapping,
    load_config,
    load_config_file,
)

__all__ = [
    "PrimitivesConfig",
    "config_from_env",
    "config_from_mapping",
    "load_config",
    "load_config_file",
]
