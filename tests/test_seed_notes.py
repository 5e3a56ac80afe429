"""Tests for scripts/seed_notes.py."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from quicknotes.errors import PersistenceError
from quicknotes.gateway import MemoryGateway
from quicknotes.store import NoteStore
from scripts.seed_notes import SAMPLE_NOTES, main, seed


@pytest.fixture(autouse=True)
def _keep_process_locale():
    """main() switches the process locale; leave it alone for other tests."""
    with patch("scripts.seed_notes.apply_locale"):
        yield


class TestSeed:
    def test_seed_creates_notes(self) -> None:
        store = NoteStore(MemoryGateway())
        store.load()
        ids = seed(store, 3)
        assert ids == [0, 1, 2]
        assert [n.text for n in store.list()] == SAMPLE_NOTES[:3][::-1]

    def test_seed_wraps_samples(self) -> None:
        store = NoteStore(MemoryGateway())
        store.load()
        seed(store, len(SAMPLE_NOTES) + 1)
        assert store.list()[0].text == SAMPLE_NOTES[0]

    def test_reset_clears_first(self) -> None:
        store = NoteStore(MemoryGateway())
        store.load()
        seed(store, 2)
        ids = seed(store, 1, reset=True)
        assert store.count == 1
        assert ids == [2]


class TestMain:
    def test_main_writes_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        code = main(["--backend", "file", "--path", str(path), "--count", "4"])
        assert code == 0
        data = json.loads(path.read_text())
        notes = json.loads(data["notes_list"])
        assert [n["id"] for n in notes] == [0, 1, 2, 3]

    def test_main_closes_gateway(self) -> None:
        gateway = MagicMock()
        gateway.get.return_value = None
        with patch("scripts.seed_notes.build_gateway", return_value=gateway):
            assert main(["--backend", "memory", "--count", "2"]) == 0
        gateway.close.assert_called_once()

    def test_main_closes_gateway_on_failure(self) -> None:
        gateway = MagicMock()
        gateway.get.return_value = None
        gateway.set.side_effect = PersistenceError("unreachable")
        with patch("scripts.seed_notes.build_gateway", return_value=gateway):
            assert main(["--backend", "redis", "--count", "1"]) == 1
        gateway.close.assert_called_once()
