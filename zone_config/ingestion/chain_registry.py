"""Chain registry client backed by a local checkout of the registry."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from zone_config.core.logging import get_logger

log = get_logger("ingestion.chain_registry")

ASSETLIST_FILENAME = "assetlist.json"


class ChainRegistryClient:
    """Looks up asset properties by chain name and base denom.

    Assetlists are read from ``<root>/<chain>/assetlist.json``, falling back
    to ``<root>/testnets/<chain>/assetlist.json``, and cached per chain.
    """

    def __init__(self, root: str):
        self.root = Path(root)
        self._cache: Dict[str, List[Dict[str, Any]]] = {}

    def get_asset_property(self, chain_name: str, base_denom: str, property_name: str) -> Optional[Any]:
        asset = self.get_asset(chain_name, base_denom)
        if asset is None:
            return None
        value = asset.get(property_name)
        if value is None:
            log.debug(f"No {property_name} for {base_denom} on {chain_name}")
        return value

    def get_asset(self, chain_name: str, base_denom: str) -> Optional[Dict[str, Any]]:
        for asset in self._load_assets(chain_name):
            if asset.get("base") == base_denom:
                return asset
        log.debug(f"Asset {base_denom} not found in registry for {chain_name}")
        return None

    def _assetlist_path(self, chain_name: str) -> Optional[Path]:
        for candidate in (
            self.root / chain_name / ASSETLIST_FILENAME,
            self.root / "testnets" / chain_name / ASSETLIST_FILENAME,
        ):
            if candidate.exists():
                return candidate
        return None

    def _load_assets(self, chain_name: str) -> List[Dict[str, Any]]:
        if chain_name in self._cache:
            return self._cache[chain_name]

        assets: List[Dict[str, Any]] = []
        path = self._assetlist_path(chain_name)
        if path is None:
            log.warning(f"No assetlist in chain registry for {chain_name}")
        else:
            try:
                payload = json.loads(path.read_text(encoding="utf-8"))
                raw = payload.get("assets") if isinstance(payload, dict) else None
                if isinstance(raw, list):
                    assets = [a for a in raw if isinstance(a, dict)]
            except (OSError, json.JSONDecodeError) as exc:
                log.error(f"Failed to read assetlist {path}: {exc}")

        self._cache[chain_name] = assets
        return assets
