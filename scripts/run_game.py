from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from medrpg import config
from medrpg.cli import run_repl
from medrpg.state.quests import new_game


def main() -> None:
    parser = argparse.ArgumentParser(description="MedSchoolRPG terminal loop.")
    parser.add_argument(
        "--quests",
        type=str,
        default=str(config.QUESTS_PATH),
        help="YAML file with the starter quests.",
    )
    parser.add_argument(
        "--show-stats",
        action="store_true",
        help="Print stamina and knowledge after every command.",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    state = new_game(Path(args.quests))
    run_repl(state, show_stats=args.show_stats)


if __name__ == "__main__":
    main()
