"""
Configuration loading and validation.
"""

from hostfit.config.settings import HostfitConfig, load_config

__all__ = [
    "HostfitConfig",
    "load_config",
]
