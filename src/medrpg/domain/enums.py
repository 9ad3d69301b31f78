"""Shared enums for quests and commands."""

from __future__ import annotations

from enum import StrEnum


class QuestKey(StrEnum):
    FIND_COFFEE_MUG = "find_coffee_mug"
    REVIEW_PATIENT_CHARTS = "review_patient_charts"


class CommandName(StrEnum):
    HELP = "help"
    STATUS = "status"
    QUESTS = "quests"
    FIND_COFFEE_MUG = "find coffee mug"
    STUDY = "study"
    REST = "rest"
    INVENTORY = "inventory"
