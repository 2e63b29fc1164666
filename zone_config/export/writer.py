"""Zone config output writer."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict

from zone_config.core.logging import get_logger
from zone_config.schemas.generated import ZoneConfig
from zone_config.schemas.results import WriteResult

log = get_logger("export.writer")

OUTPUT_FILE_MODE = 0o644


class ZoneConfigWriter:
    """Writes ``<root>/<chain_id>/<chain_id>.zone_config.json`` atomically."""

    def __init__(self, root: str, chains: Dict[str, str]):
        self.root = Path(root)
        self.chains = dict(chains)

    def output_path(self, chain_name: str) -> Path:
        chain_id = self.chains[chain_name]
        return self.root / chain_id / f"{chain_id}.zone_config.json"

    @staticmethod
    def _output_mode(path: Path) -> int:
        """Keep the permissions of an existing output; new files are 0644."""
        try:
            return stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            return OUTPUT_FILE_MODE

    def write(self, chain_name: str, zone_config: ZoneConfig) -> WriteResult:
        if chain_name not in self.chains:
            log.error(f"Cannot write zone config: {chain_name} is not configured")
            return WriteResult(chain_name=chain_name, success=False, path="", error="chain is not configured")

        path = self.output_path(chain_name)
        text = json.dumps(zone_config.to_document(), indent=2, ensure_ascii=False) + "\n"

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                f.write(text)
            os.chmod(tmp_name, self._output_mode(path))
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log.error(f"Failed to write zone config for {chain_name} to {path}: {exc}")
            return WriteResult(chain_name=chain_name, success=False, path=str(path), error=str(exc))

        log.info(f"Wrote {len(zone_config.assets)} assets for {chain_name} to {path}")
        return WriteResult(chain_name=chain_name, success=True, path=str(path))
