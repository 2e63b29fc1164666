# Services package
from zone_config.services.asset_resolver import apply_overrides, parse_price_source, resolve_asset
from zone_config.services.ibc_hash import calculate_ibc_hash
from zone_config.services.zone_config_service import ZoneConfigService, build_zone_config_service

__all__ = [
    "apply_overrides",
    "parse_price_source",
    "resolve_asset",
    "calculate_ibc_hash",
    "ZoneConfigService",
    "build_zone_config_service",
]
