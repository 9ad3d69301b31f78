"""Domain models for quests."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from medrpg.domain.enums import QuestKey


class Quest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: UUID = Field(default_factory=uuid4)
    key: QuestKey
    title: str = Field(min_length=1)
    description: str = ""
    completed: bool = False

    def complete(self) -> None:
        self.completed = True
