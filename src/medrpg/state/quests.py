"""Starter quest loading and quest completion."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from medrpg import config
from medrpg.domain.enums import QuestKey
from medrpg.domain.models import Quest
from medrpg.state.store import GameState

logger = logging.getLogger(__name__)

_QUEST_CACHE: dict[Path, list[dict[str, Any]]] = {}


class QuestDataError(ValueError):
    """Raised when the starter quest file cannot be used."""


def _read_quest_rows(path: Path) -> list[dict[str, Any]]:
    if path in _QUEST_CACHE:
        return _QUEST_CACHE[path]
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise QuestDataError(f"Cannot read quest data from {path}: {exc}") from exc
    rows = (data or {}).get("quests") if isinstance(data, dict) else None
    if not isinstance(rows, list):
        raise QuestDataError(f"{path} has no 'quests' list.")
    _QUEST_CACHE[path] = rows
    return rows


def load_starter_quests(path: Path | None = None) -> list[Quest]:
    """Build fresh Quest objects from YAML, in file order."""
    quest_path = path or config.QUESTS_PATH
    quests: list[Quest] = []
    for row in _read_quest_rows(quest_path):
        if not isinstance(row, dict):
            raise QuestDataError(f"Quest entry must be a mapping, got {row!r}.")
        try:
            quests.append(Quest(**row))
        except ValidationError as exc:
            raise QuestDataError(f"Invalid quest entry {row!r}: {exc}") from exc
    return quests


def new_game(quests_path: Path | None = None) -> GameState:
    state = GameState(quests=load_starter_quests(quests_path))
    state.append_lines(config.WELCOME_LINES)
    return state


def complete_quest(state: GameState, key: QuestKey) -> Quest | None:
    quest = state.incomplete_quest(key)
    if quest is None:
        return None
    quest.complete()
    logger.info("Quest completed: %s", quest.title)
    return quest
