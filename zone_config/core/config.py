from typing import Dict, List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging; an empty LOG_DIR disables the file sink
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Input / output layout: <ASSETLISTS_ROOT>/<chain_id>/...
    ASSETLISTS_ROOT: str = "."
    ZONE_ASSETS_FILENAME: str = "osmosis.zone_assets.json"

    # Local checkout of the public chain registry
    CHAIN_REGISTRY_ROOT: str = "chain-registry"

    # Chains to generate, in processing order (chain name -> chain id)
    ZONE_CHAINS: Dict[str, str] = {
        "osmosis": "osmosis-1",
        "osmosistestnet": "osmo-test-5",
    }

    # Pool data
    POOL_DATA_SOURCE: Literal["api", "file"] = "api"
    POOLS_API_URLS: Dict[str, str] = {
        "osmosis": "https://api-osmosis.imperator.co/pools/v2/all?low_liquidity=false",
    }
    POOL_SNAPSHOT_DIR: str = "pools"
    POOL_MIN_LIQUIDITY: float = 1000.0
    PRICE_QUOTE_DENOMS: List[str] = ["uosmo"]
    NATIVE_POOL_LOOKUP: bool = True  # False = only cross-chain assets get pool data
    HTTP_TIMEOUT_SECONDS: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )


settings = Settings()
