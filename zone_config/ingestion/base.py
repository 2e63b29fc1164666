"""Abstract pool data provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

from zone_config.schemas.generated import PoolAsset


class PoolDataProvider(ABC):
    """Abstract base class for pool data providers."""

    name: str

    @abstractmethod
    async def get_pool_assets(self, chain_name: str) -> Optional[Dict[str, PoolAsset]]:
        """Return pool data keyed by denom, or None when unavailable for the chain."""
