"""Error taxonomy for zone config generation.

Every error is scoped to a single chain: the orchestrator records it and
moves on to the next configured chain.
"""

from __future__ import annotations


class ZoneConfigError(Exception):
    """Base class for per-chain generation failures."""

    def __init__(self, chain_name: str, message: str):
        super().__init__(f"{chain_name}: {message}")
        self.chain_name = chain_name


class LoadError(ZoneConfigError):
    """Zone asset input is missing, unparseable or invalid."""


class EnrichmentUnavailable(ZoneConfigError):
    """Pool data could not be obtained for the chain."""


class ResolutionError(ZoneConfigError):
    """A zone asset cannot be turned into a generated asset."""


class WriteError(ZoneConfigError):
    """The zone config output file could not be written."""
