"""Output schemas: the generated zone config document."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class PoolAsset(BaseModel):
    """Pool data for a single denom."""

    api_include: bool = False
    price_source: Optional[str] = None  # "<protocol>:<denom>:<pool_id>"


class PoolPrice(BaseModel):
    pool: Optional[str] = None
    denom: Optional[str] = None


class GeneratedAsset(BaseModel):
    """Normalized asset record written to the zone config.

    Field order is the serialized key order; unset fields are omitted.
    """

    base_denom: str
    chain_name: str
    coingecko_id: Optional[str] = None
    ibc_denom: Optional[str] = None
    verified: Any = None
    api_include: Optional[bool] = None
    price: Optional[PoolPrice] = None
    peg_mechanism: Any = None
    unstable: Any = None
    unlisted: Any = None
    additional_transfer: Any = None


class ZoneConfig(BaseModel):
    chain_name: str
    assets: List[GeneratedAsset]

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
