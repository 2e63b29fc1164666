"""Entrypoint tests"""

import sys
from unittest.mock import AsyncMock, patch

import pytest

from zone_config import generate_entrypoint
from zone_config.schemas.results import ChainRunResult

RESULTS = {
    "osmosis": ChainRunResult(chain_name="osmosis", success=False, error="no pool data"),
    "osmosistestnet": ChainRunResult(chain_name="osmosistestnet", success=True, assets_written=1),
}


def run_as_console_script(argv):
    """Call main the way the installed console script does: sys.exit(main())"""
    with patch.object(sys, "argv", ["generate-zone-config", *argv]):
        with pytest.raises(SystemExit) as exc_info:
            sys.exit(generate_entrypoint.main())
    return exc_info.value.code


class TestEntrypoint:
    """Test command line handling"""

    def test_unknown_chain_exits(self):
        """Unknown chain names fail fast"""
        with pytest.raises(SystemExit) as exc_info:
            generate_entrypoint.main(["juno"])
        assert exc_info.value.code == 1

    def test_unknown_chain_console_script_status(self):
        assert run_as_console_script(["juno"]) == 1

    def test_success_exits_zero(self):
        """A fully successful run exits with status 0"""
        ok = {"osmosis": ChainRunResult(chain_name="osmosis", success=True, assets_written=3)}
        with patch.object(generate_entrypoint, "run_chains", AsyncMock(return_value=ok)):
            assert run_as_console_script(["osmosis"]) in (None, 0)

    def test_partial_failure_exits_zero(self):
        """Per-chain failures are logged, not turned into an exit code"""
        with patch.object(generate_entrypoint, "run_chains", AsyncMock(return_value=RESULTS)) as run_chains:
            assert run_as_console_script([]) in (None, 0)
        run_chains.assert_awaited_once_with(None)

    def test_main_returns_none(self):
        with patch.object(generate_entrypoint, "run_chains", AsyncMock(return_value=RESULTS)):
            assert generate_entrypoint.main([]) is None

    def test_selected_chains_forwarded(self):
        with patch.object(generate_entrypoint, "run_chains", AsyncMock(return_value={})) as run_chains:
            generate_entrypoint.main(["osmosis"])
        run_chains.assert_awaited_once_with(["osmosis"])
