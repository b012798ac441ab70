"""Catalog schemas - categories, questionnaires."""

from typing import Literal

from pydantic import BaseModel, Field


class CategorySchema(BaseModel):
    """Questionnaire category."""

    id: str
    name: str
    description: str = ""
    icon: str = ""
    path: str
    order: int = 0


class CategoriesSchema(BaseModel):
    """categories.json document."""

    categories: list[CategorySchema] = []


class OptionSchema(BaseModel):
    value: str
    label: str
    has_text_input: bool | None = Field(alias="hasTextInput", default=None)
    text_input_placeholder: str | None = Field(alias="textInputPlaceholder", default=None)

    class Config:
        populate_by_name = True


class QuestionSchema(BaseModel):
    type: Literal["text", "textarea", "radio", "checkbox"]
    label: str
    placeholder: str | None = None
    options: list[OptionSchema] | None = None


class LLMConfigSchema(BaseModel):
    """Prompt settings handed to the chat collaborator."""

    system_prompt: str = Field(alias="systemPrompt", default="")
    temperature: float = 0.7
    max_tokens: int = Field(alias="maxTokens", default=2048)

    class Config:
        populate_by_name = True


class QuestionnaireMetadataSchema(BaseModel):
    author: str | None = None
    version: str | None = None
    estimated_time: str | None = Field(alias="estimatedTime", default=None)
    difficulty: str | None = None
    tags: list[str] | None = None

    class Config:
        populate_by_name = True


class QuestionnaireSchema(BaseModel):
    """Questionnaire with its questions and LLM configuration."""

    id: str
    title: str
    description: str = ""
    questions: list[QuestionSchema] = []
    llm_config: LLMConfigSchema = Field(alias="llmConfig", default_factory=LLMConfigSchema)
    metadata: QuestionnaireMetadataSchema | None = None

    class Config:
        populate_by_name = True
