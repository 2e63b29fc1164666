"""Shared fixtures for zone config tests"""

import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from zone_config.ingestion.base import PoolDataProvider
from zone_config.ingestion.chain_registry import ChainRegistryClient
from zone_config.schemas.generated import PoolAsset

CHAINS = {"osmosis": "osmosis-1", "osmosistestnet": "osmo-test-5"}

ATOM_PATH = "transfer/channel-0/uatom"
ATOM_IBC_DENOM = "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2"


def write_json(path: Path, payload) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class StaticPoolProvider(PoolDataProvider):
    """Pool provider returning fixed data per chain"""

    name = "static"

    def __init__(self, data: Dict[str, Optional[Dict[str, PoolAsset]]]):
        self.data = data
        self.calls: List[str] = []

    async def get_pool_assets(self, chain_name):
        self.calls.append(chain_name)
        return self.data.get(chain_name)


@pytest.fixture
def registry_root(tmp_path):
    """Chain registry checkout with a mainnet and a testnet chain"""
    root = tmp_path / "chain-registry"
    write_json(
        root / "osmosis" / "assetlist.json",
        {
            "chain_name": "osmosis",
            "assets": [
                {"base": "uosmo", "symbol": "OSMO", "coingecko_id": "osmosis"},
                {"base": "uion", "symbol": "ION", "coingecko_id": "ion"},
            ],
        },
    )
    write_json(
        root / "cosmoshub" / "assetlist.json",
        {
            "chain_name": "cosmoshub",
            "assets": [{"base": "uatom", "symbol": "ATOM", "coingecko_id": "cosmos"}],
        },
    )
    write_json(
        root / "axelar" / "assetlist.json",
        {
            "chain_name": "axelar",
            "assets": [{"base": "uusdc", "symbol": "USDC"}],
        },
    )
    write_json(
        root / "testnets" / "osmosistestnet" / "assetlist.json",
        {
            "chain_name": "osmosistestnet",
            "assets": [{"base": "uosmo", "symbol": "OSMO"}],
        },
    )
    return root


@pytest.fixture
def registry(registry_root):
    return ChainRegistryClient(str(registry_root))


@pytest.fixture
def assetlists_root(tmp_path):
    """Assetlists repo layout with zone asset files for both chains"""
    root = tmp_path / "assetlists"
    write_json(
        root / "osmosis-1" / "osmosis.zone_assets.json",
        {
            "chain_name": "osmosis",
            "assets": [
                {"base_denom": "uosmo", "chain_name": "osmosis", "osmosis_verified": True},
                {
                    "base_denom": "uatom",
                    "chain_name": "cosmoshub",
                    "path": ATOM_PATH,
                    "osmosis_verified": True,
                },
                {
                    "base_denom": "uion",
                    "chain_name": "osmosis",
                    "osmosis_verified": False,
                    "osmosis_unstable": True,
                },
            ],
        },
    )
    write_json(
        root / "osmo-test-5" / "osmosis.zone_assets.json",
        {
            "chain_name": "osmosistestnet",
            "assets": [{"base_denom": "uosmo", "chain_name": "osmosistestnet", "osmosis_verified": True}],
        },
    )
    return root
