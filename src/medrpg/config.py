"""Game tuning constants."""

from __future__ import annotations

from pathlib import Path

MAX_STAMINA = 100
START_STAMINA = 100
START_KNOWLEDGE = 0
TIRED_THRESHOLD = 20
REST_GAIN = 30

QUESTS_PATH = Path(__file__).resolve().parent / "data" / "quests.yml"

WELCOME_LINES = [
    "Welcome to MedSchoolRPG. Your journey begins...",
    "",
    "Type 'help' to see available commands.",
]
