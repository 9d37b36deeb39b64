# =============================================
# File: upcycle/cli/suggest.py
# Purpose: CLI entrypoint to print synthesized upcycling ideas as JSON.
# Usage:
#   python -m upcycle.cli.suggest "mason jar" --material Glass --count 3 --seed 7
# =============================================
from __future__ import annotations
import argparse
import json
import random
import sys

from upcycle.services.synthesizer import synthesize_idea, synthesize_multiple
from upcycle.utils.rules import MATERIAL_TYPES


def main(argv=None):
    ap = argparse.ArgumentParser(description="Generate upcycling ideas for an item.")
    ap.add_argument("item", nargs="?", default=None, help="Item name (random representative item if omitted)")
    ap.add_argument("--material", default=None, help=f"Material type, one of: {', '.join(MATERIAL_TYPES)}")
    ap.add_argument("--count", type=int, default=1, help="Number of distinct ideas (default: 1)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    args = ap.parse_args(argv)

    rng = random.Random(args.seed)
    if args.count <= 1:
        idea = synthesize_idea(args.item, args.material, rng=rng)
        ideas = [idea] if idea else []
    else:
        ideas = synthesize_multiple(args.item or "", args.material, args.count, rng=rng)

    if not ideas:
        print("[ERR] generation failed", file=sys.stderr)
        sys.exit(1)

    print(json.dumps([i.model_dump() for i in ideas], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
