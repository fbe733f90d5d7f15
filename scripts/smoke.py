# scripts/smoke.py
"""
Smoke Test Script for the histocat catalog.

Renders one language in both note formats, then reads every block's
EVEN/TYPE/DATE prefix back and compares it with the source record.

Usage
-----
    $ python scripts/smoke.py
    $ python scripts/smoke.py --language fr-CA --show 5
"""

import argparse
import logging
import sys

from histocat.catalog import default_catalog
from histocat.core.grammar import read_header
from histocat.core.rendering import RenderingMode
from histocat.provider import HistoricEventsProvider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def main() -> int:
    """Execute the smoke test workflow; return a process exit code."""
    parser = argparse.ArgumentParser(description="Run histocat smoke test")
    parser.add_argument("--language", "-l", default="fr", help="Language tag to render")
    parser.add_argument("--show", "-s", type=int, default=3, help="Blocks to print per mode")
    args = parser.parse_args()

    catalog = default_catalog()
    dataset = catalog.dataset(args.language)
    if dataset is None:
        print(f"⚠️  No dataset for {args.language!r}; supported: {', '.join(catalog.languages())}")
        return 1

    provider = HistoricEventsProvider(catalog=catalog)
    failures = 0
    for mode in RenderingMode:
        blocks = provider.list_events(args.language, mode=mode)
        print(f"\n{'=' * 60}\n{mode.value}: {len(blocks)} blocks\n{'=' * 60}")
        for block in blocks[: args.show]:
            print(block, end="\n\n")

        for record, block in zip(dataset.events, blocks, strict=True):
            header = read_header(block, dataset.categories)
            if header.is_err():
                print(f"❌ {record.title}: {header.unwrap_err()}")
                failures += 1
                continue
            got = header.unwrap()
            if (got.title, got.category, got.date) != (record.title, record.category, record.date):
                print(f"❌ {record.title}: header mismatch {got}")
                failures += 1

    if failures:
        print(f"\n❌ {failures} round-trip failure(s)")
        return 1
    print("\n✅ All blocks round-trip")
    return 0


if __name__ == "__main__":
    sys.exit(main())
