"""Questionnaire navigation state persisted between sessions."""

from typing import Any

from pydantic import BaseModel, Field


class QuestionnaireState(BaseModel):
    """Where the user is in a knowledge-block journey and what they answered."""

    current_block_id: str = Field(alias="currentBlockId")
    questionnaire_history: list[str] = Field(alias="questionnaireHistory", default_factory=list)
    answers: dict[str, str] = {}
    context: dict[str, Any] = {}
    resources: list[str] = []

    class Config:
        populate_by_name = True
