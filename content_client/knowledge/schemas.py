"""Knowledge schemas - blocks and branch paths."""

from pydantic import BaseModel


class PathSchema(BaseModel):
    """One branch of a knowledge block; `next` names another block id."""

    question: str | None = None
    options: list[str] | None = None
    next: str | None = None
    resources: list[str] | None = None


class KnowledgeBlockSchema(BaseModel):
    id: str
    title: str
    initial_question: str
    paths: dict[str, PathSchema] = {}
    context_variables: list[str] | None = None
