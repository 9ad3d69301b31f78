from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from medrpg import config
from medrpg.ui.app import MedSchoolApp


def main() -> None:
    parser = argparse.ArgumentParser(description="MedSchoolRPG Textual interface.")
    parser.add_argument(
        "--quests",
        type=str,
        default=str(config.QUESTS_PATH),
        help="YAML file with the starter quests.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file (the terminal is owned by the UI).",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=args.log_level.upper())
    app = MedSchoolApp(quests_path=Path(args.quests))
    app.run()


if __name__ == "__main__":
    main()
