"""Seed the note store with realistic notes for screenshots and demos.

Writes notes through the regular NoteStore API so ids, timestamps and
ordering follow the same rules as notes typed into the app.

Usage:
    python scripts/seed_notes.py [--backend file|redis|memory] [--path notes_prefs.json]
                                 [--count N] [--reset]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Allow running as a plain script from the project root.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from quicknotes.config import LOG_FORMAT, Settings, apply_locale  # noqa: E402
from quicknotes.errors import NoteStoreError  # noqa: E402
from quicknotes.gateway import build_gateway  # noqa: E402
from quicknotes.store import NoteStore  # noqa: E402

SAMPLE_NOTES: list[str] = [
    "Buy milk",
    "Call mom on Sunday",
    "Book dentist appointment for next week",
    "Ideas for the weekend: hike, farmers market, finish the novel",
    "Wi-Fi password for the cabin is on the fridge",
    "Return library books before Friday",
    "Gift ideas: headphones, cookbook, plant",
    "Renew passport (expires in March)",
    "Pick up dry cleaning",
    "Try the new ramen place downtown",
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed demo notes")
    parser.add_argument(
        "--backend",
        choices=["file", "redis", "memory"],
        help="Storage backend (default: QUICKNOTES_STORAGE_BACKEND or file)",
    )
    parser.add_argument("--path", type=Path, help="JSON file for the file backend")
    parser.add_argument("--redis-url", help="Redis URL for the redis backend")
    parser.add_argument(
        "--count",
        type=int,
        default=len(SAMPLE_NOTES),
        help=f"Number of notes to write (default: {len(SAMPLE_NOTES)})",
    )
    parser.add_argument(
        "--reset", action="store_true", help="Delete existing notes first"
    )
    return parser


def seed(store: NoteStore, count: int, reset: bool = False) -> list[int]:
    """Write ``count`` sample notes and return their ids."""
    if reset:
        for note in store.list():
            store.delete(note.id)
        print(f"  Cleared existing notes ({store.count} left)")

    ids: list[int] = []
    for i in range(count):
        text = SAMPLE_NOTES[i % len(SAMPLE_NOTES)]
        note = store.create(text)
        ids.append(note.id)
        print(f"  [{i + 1}/{count}] #{note.id}  {note.text}")
    return ids


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides: dict[str, object] = {}
    if args.backend:
        overrides["storage_backend"] = args.backend
    if args.path:
        overrides["storage_path"] = args.path
    if args.redis_url:
        overrides["redis_url"] = args.redis_url
    settings = Settings(**overrides)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    apply_locale()

    gateway = build_gateway(settings)
    try:
        store = NoteStore(
            gateway,
            notes_key=settings.notes_key,
            timestamp_format=settings.timestamp_format,
        )
        store.load()
        print(f"\n  Seeding {args.count} notes ({settings.storage_backend} backend)")

        try:
            seed(store, args.count, reset=args.reset)
        except NoteStoreError as e:
            print(f"  FAIL: {e}")
            return 1

        print(f"\n  Done! Store now holds {store.count} notes.")
        return 0
    finally:
        gateway.close()


if __name__ == "__main__":
    sys.exit(main())
