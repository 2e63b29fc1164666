"""End-to-end zone config generation for the configured chains."""

from __future__ import annotations

from typing import Dict, List, Optional

from zone_config.core.config import Settings
from zone_config.core.errors import EnrichmentUnavailable, ZoneConfigError
from zone_config.core.logging import get_logger
from zone_config.export.writer import ZoneConfigWriter
from zone_config.ingestion.base import PoolDataProvider
from zone_config.ingestion.chain_registry import ChainRegistryClient
from zone_config.ingestion.pools_api import ApiPoolDataProvider
from zone_config.ingestion.pools_file import FilePoolDataProvider
from zone_config.ingestion.zone_assets import ZoneAssetLoader
from zone_config.schemas.generated import GeneratedAsset, ZoneConfig
from zone_config.schemas.results import ChainRunResult
from .asset_resolver import resolve_asset

log = get_logger("zone_config_service")


class ZoneConfigService:
    """Generates zone configs chain by chain.

    Responsibilities:
    - Load each chain's zone asset list
    - Fetch pool data for the chain
    - Resolve every asset in input order
    - Write the zone config file
    - Isolate failures so one chain never stops the others
    """

    def __init__(
        self,
        chains: Dict[str, str],
        loader: ZoneAssetLoader,
        registry: ChainRegistryClient,
        pool_provider: PoolDataProvider,
        writer: ZoneConfigWriter,
        native_pool_lookup: bool = True,
    ):
        self.chains = dict(chains)
        self.loader = loader
        self.registry = registry
        self.pool_provider = pool_provider
        self.writer = writer
        self.native_pool_lookup = native_pool_lookup

    async def run(self, chain_name: str) -> ChainRunResult:
        """Generate the zone config for a single chain.

        Raises ZoneConfigError subclasses; nothing is written unless every
        asset resolved.
        """
        log.info(f"Generating zone config for {chain_name} ({self.chains.get(chain_name)})")

        zone_assets = self.loader.load(chain_name)

        pool_assets = await self.pool_provider.get_pool_assets(chain_name)
        if not pool_assets:
            raise EnrichmentUnavailable(chain_name, f"no pool data from {self.pool_provider.name}")

        assets: List[GeneratedAsset] = []
        for zone_asset in zone_assets:
            assets.append(
                resolve_asset(
                    chain_name,
                    zone_asset,
                    self.registry,
                    pool_assets,
                    native_pool_lookup=self.native_pool_lookup,
                )
            )

        result = self.writer.write(chain_name, ZoneConfig(chain_name=chain_name, assets=assets))
        if not result.success:
            return ChainRunResult(chain_name=chain_name, success=False, output_path=result.path, error=result.error)

        log.info(f"Zone config finished for {chain_name} | assets={len(assets)}")
        return ChainRunResult(
            chain_name=chain_name,
            success=True,
            assets_written=len(assets),
            output_path=result.path,
        )

    async def run_all(self, chain_names: Optional[List[str]] = None) -> Dict[str, ChainRunResult]:
        """Run every configured chain (or the given subset) one after another."""
        names = chain_names if chain_names is not None else list(self.chains)

        results: Dict[str, ChainRunResult] = {}
        for chain_name in names:
            try:
                results[chain_name] = await self.run(chain_name)
            except ZoneConfigError as exc:
                log.error(f"Zone config skipped for {chain_name}: {exc}")
                results[chain_name] = ChainRunResult(chain_name=chain_name, success=False, error=str(exc))
            except Exception as exc:  # noqa: BLE001
                log.exception(f"Unexpected failure generating zone config for {chain_name}: {exc}")
                results[chain_name] = ChainRunResult(chain_name=chain_name, success=False, error=str(exc))

        return results


def build_pool_provider(settings: Settings) -> PoolDataProvider:
    if settings.POOL_DATA_SOURCE == "file":
        return FilePoolDataProvider(settings.POOL_SNAPSHOT_DIR)
    return ApiPoolDataProvider(
        settings.POOLS_API_URLS,
        min_liquidity=settings.POOL_MIN_LIQUIDITY,
        quote_denoms=settings.PRICE_QUOTE_DENOMS,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def build_zone_config_service(settings: Settings) -> ZoneConfigService:
    """Wire the default collaborators from configuration."""
    chains = settings.ZONE_CHAINS
    return ZoneConfigService(
        chains=chains,
        loader=ZoneAssetLoader(settings.ASSETLISTS_ROOT, chains, settings.ZONE_ASSETS_FILENAME),
        registry=ChainRegistryClient(settings.CHAIN_REGISTRY_ROOT),
        pool_provider=build_pool_provider(settings),
        writer=ZoneConfigWriter(settings.ASSETLISTS_ROOT, chains),
        native_pool_lookup=settings.NATIVE_POOL_LOOKUP,
    )
