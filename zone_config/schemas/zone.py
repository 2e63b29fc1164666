"""Input schemas: the curated zone asset listing of a chain."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class CanonicalRef(BaseModel):
    """Root identity of an asset, used for registry lookups."""

    chain_name: str
    base_denom: str

    model_config = ConfigDict(extra="ignore")


class OverrideProperties(BaseModel):
    """Explicit values that win over registry-derived ones."""

    coingecko_id: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class ZoneAsset(BaseModel):
    """One listed token on a chain's zone."""

    base_denom: str
    chain_name: str
    canonical: Optional[CanonicalRef] = None
    override_properties: Optional[OverrideProperties] = None
    path: Optional[str] = None
    # Listing flags, copied to the output as-is
    osmosis_verified: Any = None
    peg_mechanism: Any = None
    osmosis_unstable: Any = None
    osmosis_unlisted: Any = None
    additional_transfer: Any = None

    model_config = ConfigDict(extra="ignore")

    @property
    def reference(self) -> "CanonicalRef":
        """The (chain_name, base_denom) pair used for metadata lookup."""
        if self.canonical is not None:
            return self.canonical
        return CanonicalRef(chain_name=self.chain_name, base_denom=self.base_denom)


class ZoneAssetList(BaseModel):
    """Zone asset input document."""

    assets: List[ZoneAsset]

    model_config = ConfigDict(extra="ignore")
