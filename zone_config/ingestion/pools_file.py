"""Pool snapshot source implementation (offline runs)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from zone_config.core.logging import get_logger
from zone_config.schemas.generated import PoolAsset
from .base import PoolDataProvider

log = get_logger("ingestion.pools_file")


class FilePoolDataProvider(PoolDataProvider):
    """Reads ``<snapshot_dir>/<chain_name>.pools.json``: ``{denom: {api_include, price_source}}``."""

    name = "pools_file"

    def __init__(self, snapshot_dir: str):
        self.snapshot_dir = Path(snapshot_dir)

    def snapshot_path(self, chain_name: str) -> Path:
        return self.snapshot_dir / f"{chain_name}.pools.json"

    async def get_pool_assets(self, chain_name: str) -> Optional[Dict[str, PoolAsset]]:
        path = self.snapshot_path(chain_name)
        if not path.exists():
            log.warning(f"Pool snapshot not found: {path}")
            return None

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                log.error(f"Pool snapshot {path} is not a mapping")
                return None
            pool_assets = {denom: PoolAsset.model_validate(entry) for denom, entry in data.items()}
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            log.error(f"Failed to read pool snapshot {path}: {exc}")
            return None

        log.info(f"Loaded pool data for {len(pool_assets)} denoms from {path}")
        return pool_assets
