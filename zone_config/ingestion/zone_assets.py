"""Zone asset input loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from zone_config.core.errors import LoadError
from zone_config.core.logging import get_logger
from zone_config.schemas.zone import ZoneAsset, ZoneAssetList

log = get_logger("ingestion.zone_assets")


class ZoneAssetLoader:
    """Reads ``<root>/<chain_id>/<filename>`` for a configured chain."""

    def __init__(self, root: str, chains: Dict[str, str], filename: str = "osmosis.zone_assets.json"):
        self.root = Path(root)
        self.chains = dict(chains)
        self.filename = filename

    def input_path(self, chain_name: str) -> Path:
        chain_id = self.chains.get(chain_name)
        if not chain_id:
            raise LoadError(chain_name, "chain is not configured")
        return self.root / chain_id / self.filename

    def load(self, chain_name: str) -> List[ZoneAsset]:
        path = self.input_path(chain_name)
        if not path.exists():
            raise LoadError(chain_name, f"zone asset file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise LoadError(chain_name, f"cannot parse {path}: {exc}") from exc

        try:
            zone_assets = ZoneAssetList.model_validate(payload).assets
        except ValidationError as exc:
            raise LoadError(chain_name, f"invalid zone asset list {path}: {exc}") from exc

        log.info(f"Loaded {len(zone_assets)} zone assets for {chain_name} from {path}")
        return zone_assets
