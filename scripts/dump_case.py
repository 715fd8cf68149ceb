from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from sleuth import config
from sleuth.cases.catalog import require_case


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump a case definition as JSON.")
    parser.add_argument("--case-id", type=int, default=config.DEFAULT_CASE_ID)
    parser.add_argument("--out", type=str, default=None)
    args = parser.parse_args()

    output = require_case(args.case_id).model_dump_json(indent=2)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote case dump to {args.out}")
        return

    print(output)


if __name__ == "__main__":
    main()
