#!/usr/bin/env python3
"""Seed the default void masks into Supabase.

Usage:
    python scripts/seed_masks.py [--dry-run]
"""

from __future__ import annotations

import argparse

from debate_gym.constants import VOID_CONSTANTS
from debate_gym.db.void_store import get_void_store


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the default void masks")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="List the masks that would be created without writing them",
    )
    args = parser.parse_args()

    print(f"Seeding {len(VOID_CONSTANTS.DEFAULT_MASKS)} default masks ...")
    added = get_void_store().seed_default_masks(dry_run=args.dry_run)
    verb = "Would create" if args.dry_run else "Created"
    for name in added:
        print(f"  {verb} mask: {name}")
    print(f"Done. {len(added)} {'missing' if args.dry_run else 'added'}.")


if __name__ == "__main__":
    main()
