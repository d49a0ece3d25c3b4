from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Tuple

from contentgraph.utils.ids import HEX_PREFIX
from contentgraph.utils.time import unix_timestamp

# ---------------------------------------------------------------------
# Identity handling
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class IdentityConfig:
    """
    Decides which node ids and caller identities count as the
    zero/empty sentinel.
    """

    zero_sentinels: Tuple[str, ...] = ()
    hex_prefix: str = HEX_PREFIX


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RegistryConfig:
    """
    Root configuration object for a registry instance.

    - initial_owner becomes the system owner at construction
    - clock supplies record timestamps in unix seconds
    """

    initial_owner: str
    identity: IdentityConfig = field(default_factory=IdentityConfig)
    clock: Callable[[], int] = unix_timestamp
