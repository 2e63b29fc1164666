"""Pools API source implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx

from zone_config.core.logging import get_logger
from zone_config.schemas.generated import PoolAsset
from .base import PoolDataProvider

log = get_logger("ingestion.pools_api")


class ApiPoolDataProvider(PoolDataProvider):
    """Derives pool inclusion and price sources from a pools API.

    The API returns ``{pool_id: [{"denom": ..., "liquidity": ...}, ...]}``.
    A denom is included when it sits in at least one pool holding
    ``min_liquidity`` or more. Its price source points at the most liquid
    two-asset pool pairing it with a quote denom, earlier quotes preferred.
    """

    name = "pools_api"

    def __init__(
        self,
        urls: Dict[str, str],
        min_liquidity: float = 1000.0,
        quote_denoms: Sequence[str] = ("uosmo",),
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.urls = dict(urls)
        self.min_liquidity = min_liquidity
        self.quote_denoms = list(quote_denoms)
        self.timeout = timeout
        self.transport = transport

    async def get_pool_assets(self, chain_name: str) -> Optional[Dict[str, PoolAsset]]:
        url = self.urls.get(chain_name)
        if not url:
            log.warning(f"No pools API configured for {chain_name}")
            return None

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            log.error(f"Pools API request failed for {chain_name}: {exc}")
            return None

        if not isinstance(data, dict) or not data:
            log.error(f"Unexpected pools payload for {chain_name}: {type(data).__name__}")
            return None

        pool_assets = self.build_pool_assets(data)
        log.info(f"Derived pool data for {len(pool_assets)} denoms on {chain_name} from {len(data)} pools")
        return pool_assets

    def build_pool_assets(self, pools: Dict[str, Any]) -> Dict[str, PoolAsset]:
        included: List[str] = []
        best: Dict[str, Tuple[Tuple[int, float], str]] = {}

        for pool_id, tokens in pools.items():
            if not isinstance(tokens, list):
                continue
            denoms = [t["denom"] for t in tokens if isinstance(t, dict) and t.get("denom")]
            liquidity = max((self._safe_float(t.get("liquidity")) for t in tokens if isinstance(t, dict)), default=0.0)
            if liquidity < self.min_liquidity:
                continue

            for denom in denoms:
                if denom not in included:
                    included.append(denom)

            if len(denoms) != 2:
                continue
            for denom, other in ((denoms[0], denoms[1]), (denoms[1], denoms[0])):
                if denom in self.quote_denoms or other not in self.quote_denoms:
                    continue
                rank = (self.quote_denoms.index(other), -liquidity)
                current = best.get(denom)
                if current is None or rank < current[0]:
                    best[denom] = (rank, f"pool:{other}:{pool_id}")

        return {
            denom: PoolAsset(
                api_include=True,
                price_source=best[denom][1] if denom in best else None,
            )
            for denom in included
        }

    @staticmethod
    def _safe_float(value: Any) -> float:
        if value is None:
            return 0.0
        try:
            return float(value)
        except (ValueError, TypeError):
            return 0.0
