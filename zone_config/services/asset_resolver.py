"""Resolution of one zone asset into a generated zone config asset.

Steps, in order:
1. Pick the reference asset (``canonical`` if set) and read its
   ``coingecko_id`` from the chain registry.
2. Apply ``override_properties`` over the derived values.
3. Hash the transfer path into ``ibc_denom`` when the asset comes from a
   chain other than the host chain.
4. Attach pool inclusion and price data for the resolved on-chain denom.
5. Copy the pass-through listing flags.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from zone_config.core.errors import ResolutionError
from zone_config.core.logging import get_logger
from zone_config.ingestion.chain_registry import ChainRegistryClient
from zone_config.schemas.generated import GeneratedAsset, PoolAsset, PoolPrice
from zone_config.schemas.zone import OverrideProperties, ZoneAsset
from .ibc_hash import calculate_ibc_hash

log = get_logger("services.asset_resolver")

# Registry properties copied onto the generated asset; each may be overridden.
REGISTRY_PROPERTIES = ("coingecko_id",)


def apply_overrides(derived: Dict[str, Any], overrides: Optional[OverrideProperties]) -> Dict[str, Any]:
    """Return ``derived`` with every set, non-empty override value on top."""
    merged = dict(derived)
    if overrides is None:
        return merged
    for key, value in overrides.model_dump(exclude_none=True).items():
        if value == "":
            continue
        merged[key] = value
    return merged


def parse_price_source(price_source: str) -> PoolPrice:
    """Split ``<protocol>:<denom>:<pool_id>`` into a pool price.

    Malformed strings are split best-effort; missing segments stay unset.
    """
    parts = price_source.split(":")
    if len(parts) != 3:
        log.warning(f"Malformed price source {price_source!r}")
    return PoolPrice(
        pool=parts[2] if len(parts) > 2 else None,
        denom=parts[1] if len(parts) > 1 else None,
    )


def resolve_asset(
    host_chain_name: str,
    zone_asset: ZoneAsset,
    registry: ChainRegistryClient,
    pool_assets: Mapping[str, PoolAsset],
    native_pool_lookup: bool = True,
) -> GeneratedAsset:
    """Resolve a zone asset listed on ``host_chain_name``.

    ``native_pool_lookup`` looks native assets up in the pool data by their
    base denom; when False only cross-chain assets (keyed by ``ibc_denom``)
    receive pool data.
    """
    reference = zone_asset.reference
    derived = {
        prop: registry.get_asset_property(reference.chain_name, reference.base_denom, prop)
        for prop in REGISTRY_PROPERTIES
    }
    properties = apply_overrides(derived, zone_asset.override_properties)

    ibc_denom = None
    if zone_asset.chain_name != host_chain_name:
        if not zone_asset.path:
            raise ResolutionError(
                host_chain_name,
                f"{zone_asset.base_denom} from {zone_asset.chain_name} has no transfer path",
            )
        ibc_denom = calculate_ibc_hash(zone_asset.path)

    pool_key = ibc_denom
    if pool_key is None and native_pool_lookup:
        pool_key = zone_asset.base_denom

    api_include = None
    price = None
    pool_asset = pool_assets.get(pool_key) if pool_key else None
    if pool_asset:
        api_include = pool_asset.api_include
        if pool_asset.price_source:
            price = parse_price_source(pool_asset.price_source)

    return GeneratedAsset(
        base_denom=zone_asset.base_denom,
        chain_name=zone_asset.chain_name,
        coingecko_id=properties.get("coingecko_id"),
        ibc_denom=ibc_denom,
        verified=zone_asset.osmosis_verified,
        api_include=api_include,
        price=price,
        peg_mechanism=zone_asset.peg_mechanism,
        unstable=zone_asset.osmosis_unstable,
        unlisted=zone_asset.osmosis_unlisted,
        additional_transfer=zone_asset.additional_transfer,
    )
