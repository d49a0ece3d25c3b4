"""
Configuration layer for contentgraph.

Configuration is passed explicitly into each registry instance;
there is no module-level registry state.
"""

from contentgraph.config.settings import IdentityConfig, RegistryConfig

__all__ = [
    "IdentityConfig",
    "RegistryConfig",
]
