from pydantic import BaseModel

from zone_config.core.errors import WriteError


class WriteResult(BaseModel):
    chain_name: str
    success: bool
    path: str
    error: str | None = None

    def raise_for_error(self) -> None:
        """Raise WriteError if the write failed."""
        if not self.success:
            raise WriteError(self.chain_name, self.error or f"failed to write {self.path}")


class ChainRunResult(BaseModel):
    chain_name: str
    success: bool
    assets_written: int = 0
    output_path: str | None = None
    error: str | None = None
