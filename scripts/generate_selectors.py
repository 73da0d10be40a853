#!/usr/bin/env python3
"""Print the KNOWN_SELECTORS table for cosmic_gateway/starknet.py.

Usage:
    python scripts/generate_selectors.py
    python scripts/generate_selectors.py --check  # exit 1 if the table is stale
"""

import argparse
import sys

from cosmic_gateway.starknet import COSMIC_TRADER_FUNCTIONS, KNOWN_SELECTORS, compute_selector


def function_names() -> list[str]:
    names = []
    for group in COSMIC_TRADER_FUNCTIONS.values():
        names.extend(group)
    return names


def main():
    parser = argparse.ArgumentParser(description="Generate Cosmic Trader selectors")
    parser.add_argument("--check", action="store_true", help="Compare against the current table")
    args = parser.parse_args()

    generated = {name: compute_selector(name) for name in function_names()}

    if args.check:
        stale = [
            name for name, selector in generated.items()
            if KNOWN_SELECTORS.get(name) != selector
        ]
        extra = sorted(set(KNOWN_SELECTORS) - set(generated))
        if stale or extra:
            print(f"Stale entries: {stale}  Unknown entries: {extra}")
            sys.exit(1)
        print(f"All {len(generated)} selectors match")
        return

    print("KNOWN_SELECTORS: dict[str, str] = {")
    for name, selector in generated.items():
        print(f'    "{name}": "{selector}",')
    print("}")


if __name__ == "__main__":
    main()
