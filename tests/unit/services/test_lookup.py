"""Tests for PlannedProduction lookup collaborators."""

from __future__ import annotations

import threading
from pathlib import Path

import orjson
import pytest

from cxplan.core.model import PlannedProductionOutput
from cxplan.services.lookup import (
    BlockingLookupAdapter,
    InMemoryPlannedProductionLookup,
    PlannedProductionLookup,
    SeedFileError,
)
from tests.conftest import VALID_BPNL, VALID_MATERIAL


class TestInMemoryLookup:
    """Dictionary-backed store."""

    async def test_lookup_registered(
        self,
        store: InMemoryPlannedProductionLookup,
        planned_output: PlannedProductionOutput,
    ) -> None:
        assert await store.lookup(VALID_BPNL, VALID_MATERIAL) is planned_output

    async def test_unknown_pair_returns_none(self, store: InMemoryPlannedProductionLookup) -> None:
        assert await store.lookup("BPNL0000000000ZZ", VALID_MATERIAL) is None
        assert await store.lookup(VALID_BPNL, "urn:example:other") is None

    async def test_remove(self, store: InMemoryPlannedProductionLookup) -> None:
        assert len(store) == 1
        assert store.remove(VALID_BPNL, VALID_MATERIAL) is True
        assert store.remove(VALID_BPNL, VALID_MATERIAL) is False
        assert len(store) == 0
        assert await store.lookup(VALID_BPNL, VALID_MATERIAL) is None

    def test_satisfies_protocol(self, store: InMemoryPlannedProductionLookup) -> None:
        assert isinstance(store, PlannedProductionLookup)


class TestSeedFile:
    """Loading the store from a JSON seed file."""

    def _write(self, tmp_path: Path, content: object) -> Path:
        path = tmp_path / "seed.json"
        path.write_bytes(orjson.dumps(content))
        return path

    async def test_load(self, tmp_path: Path, planned_output: PlannedProductionOutput) -> None:
        path = self._write(
            tmp_path,
            [
                {
                    "partnerBpnl": VALID_BPNL,
                    "materialNumberCx": VALID_MATERIAL,
                    "output": planned_output.to_json_dict(),
                }
            ],
        )

        store = InMemoryPlannedProductionLookup.from_file(path)

        assert len(store) == 1
        result = await store.lookup(VALID_BPNL, VALID_MATERIAL)
        assert result == planned_output

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SeedFileError, match="Cannot read"):
            InMemoryPlannedProductionLookup.from_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "seed.json"
        path.write_text("{not json")

        with pytest.raises(SeedFileError):
            InMemoryPlannedProductionLookup.from_file(path)

    def test_not_an_array(self, tmp_path: Path) -> None:
        with pytest.raises(SeedFileError, match="JSON array"):
            InMemoryPlannedProductionLookup.from_file(self._write(tmp_path, {"a": 1}))

    def test_missing_keys(self, tmp_path: Path) -> None:
        path = self._write(tmp_path, [{"partnerBpnl": VALID_BPNL, "output": {}}])

        with pytest.raises(SeedFileError, match="materialNumberCx"):
            InMemoryPlannedProductionLookup.from_file(path)

    def test_invalid_output(self, tmp_path: Path) -> None:
        path = self._write(
            tmp_path,
            [
                {
                    "partnerBpnl": VALID_BPNL,
                    "materialNumberCx": VALID_MATERIAL,
                    "output": {"positions": "nope"},
                }
            ],
        )

        with pytest.raises(SeedFileError, match="invalid output"):
            InMemoryPlannedProductionLookup.from_file(path)

    def test_seed_error_is_value_error(self) -> None:
        assert issubclass(SeedFileError, ValueError)


class TestBlockingLookupAdapter:
    """Synchronous backends run off the event loop."""

    async def test_runs_in_worker_thread(self, planned_output: PlannedProductionOutput) -> None:
        calls: list[tuple[str, str, int]] = []

        def blocking(partner: str, material: str) -> PlannedProductionOutput:
            calls.append((partner, material, threading.get_ident()))
            return planned_output

        adapter = BlockingLookupAdapter(blocking)

        result = await adapter.lookup(VALID_BPNL, VALID_MATERIAL)

        assert result is planned_output
        assert calls[0][:2] == (VALID_BPNL, VALID_MATERIAL)
        assert calls[0][2] != threading.get_ident()

    async def test_none_passes_through(self) -> None:
        adapter = BlockingLookupAdapter(lambda partner, material: None)

        assert await adapter.lookup(VALID_BPNL, VALID_MATERIAL) is None

    async def test_exception_propagates(self) -> None:
        def failing(partner: str, material: str) -> None:
            raise ConnectionError("backend down")

        with pytest.raises(ConnectionError):
            await BlockingLookupAdapter(failing).lookup(VALID_BPNL, VALID_MATERIAL)
