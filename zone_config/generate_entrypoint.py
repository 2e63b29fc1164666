"""Zone config entrypoint - Standalone script for generating zone configs.

Usage:
    python -m zone_config.generate_entrypoint                   # All configured chains
    python -m zone_config.generate_entrypoint osmosis           # Single chain
    python -m zone_config.generate_entrypoint osmosis osmosistestnet
"""

import asyncio
import sys
from typing import Dict, List, Optional

from zone_config.core.config import settings
from zone_config.core.logging import get_logger
from zone_config.schemas.results import ChainRunResult
from zone_config.services.zone_config_service import build_zone_config_service

logger = get_logger("generate_entrypoint")


async def run_chains(chain_names: Optional[List[str]] = None) -> Dict[str, ChainRunResult]:
    """Generate zone configs for the given chains (default: all configured)."""
    service = build_zone_config_service(settings)
    return await service.run_all(chain_names)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for zone config generation.

    Exits 1 only for unknown chain names; per-chain failures are logged.
    """
    args = sys.argv[1:] if argv is None else argv
    logger.info("Zone config generation starting...")

    unknown = [name for name in args if name not in settings.ZONE_CHAINS]
    if unknown:
        logger.error(f"Unknown chain(s): {', '.join(unknown)}. Must be one of: {', '.join(settings.ZONE_CHAINS)}")
        sys.exit(1)

    results = asyncio.run(run_chains(args or None))

    for chain_name, result in results.items():
        if result.success:
            logger.info(f"{chain_name}: wrote {result.assets_written} assets to {result.output_path}")
        else:
            logger.error(f"{chain_name}: failed - {result.error}")

    logger.info("Zone config generation completed")


if __name__ == "__main__":
    main()
