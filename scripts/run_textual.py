from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from sleuth import config
from sleuth.ui.app import SleuthApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Textual wrapper for a single case.")
    parser.add_argument("--seed", type=int, default=config.SEED)
    parser.add_argument("--case-id", type=int, default=config.DEFAULT_CASE_ID)
    args = parser.parse_args()

    app = SleuthApp(case_id=args.case_id, seed=args.seed)
    app.run()


if __name__ == "__main__":
    main()
