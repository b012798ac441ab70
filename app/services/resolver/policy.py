"""Per-entity-type resolution policy: remote fetch, parsing, TTL and mock."""

import asyncio
import json
import re
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

import yaml
from pydantic import ValidationError

from app.errors import ContentError, ParseError
from app.models.common import ErrorKind, Result
from app.models.content import EntityType, questionnaire_scope, split_questionnaire_scope
from app.repositories.bundled import BundledRepository
from app.services.resolver import defaults
from content_client import ContentClient, FetchResponse
from content_client.catalog import CategoriesSchema, QuestionnaireSchema
from content_client.knowledge import KnowledgeBlockSchema
from settings import TTL_POLICY

Fetcher = Callable[[ContentClient, BundledRepository, str], Awaitable[Result]]


class _ContentLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans, so branch keys like yes/no stay strings."""


_ContentLoader.yaml_implicit_resolvers = {
    first: [r for r in resolvers if r[0] != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_ContentLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


@dataclass(frozen=True)
class EntityPolicy:
    """How one entity type is fetched, validated, cached and mocked.

    ``fetch`` yields the decoded remote document; ``normalize`` turns a decoded
    document (remote or bundled) into the cached payload and raises ParseError.
    """

    entity_type: EntityType
    ttl_seconds: float
    fetch: Fetcher
    normalize: Callable[[Any], Any]
    mock: Callable[[str], Any]


# Decoders


def _decode_json(resp: FetchResponse) -> Any:
    try:
        return resp.json()
    except json.JSONDecodeError as e:
        raise ParseError(f"{resp.url}: invalid JSON ({e})") from e


def _decode_yaml(resp: FetchResponse) -> Any:
    try:
        return yaml.load(resp.body, Loader=_ContentLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"{resp.url}: invalid YAML ({e})") from e


def _decoded(result: Result, decode: Callable[[FetchResponse], Any]) -> Result:
    if not result.is_ok:
        return result
    try:
        return Result.ok(decode(result.value))
    except ContentError as e:
        return Result.from_exception(e)


# Normalizers


def _validate(schema, doc: Any):
    try:
        return schema.model_validate(doc)
    except ValidationError as e:
        raise ParseError(f"{schema.__name__}: {e.error_count()} validation error(s)") from e


def normalize_categories(doc: Any) -> list[dict]:
    if isinstance(doc, list):
        doc = {"categories": doc}
    data = _validate(CategoriesSchema, doc)
    return [c.model_dump() for c in data.categories]


def normalize_questionnaire(doc: Any) -> dict:
    return _validate(QuestionnaireSchema, doc).model_dump(by_alias=True, exclude_none=True)


def normalize_questionnaires(doc: Any) -> list[dict]:
    if not isinstance(doc, list):
        raise ParseError(f"Expected a questionnaire list, got {type(doc).__name__}")
    return [normalize_questionnaire(item) for item in doc]


def normalize_knowledge_block(doc: Any) -> dict:
    return _validate(KnowledgeBlockSchema, doc).model_dump(exclude_none=True)


def normalize_resource(doc: Any) -> str:
    if not isinstance(doc, str):
        raise ParseError(f"Expected resource text, got {type(doc).__name__}")
    return doc


# Fetchers


async def fetch_categories(client: ContentClient, _bundled: BundledRepository, _scope_id: str) -> Result:
    return _decoded(await client.categories(), _decode_json)


async def fetch_questionnaire(client: ContentClient, _bundled: BundledRepository, scope_id: str) -> Result:
    try:
        category_path, questionnaire_id = split_questionnaire_scope(scope_id)
    except ValueError as e:
        return Result.err(ErrorKind.NOT_FOUND, str(e))
    return _decoded(await client.questionnaire(category_path, questionnaire_id), _decode_json)


async def fetch_questionnaires(client: ContentClient, bundled: BundledRepository, scope_id: str) -> Result:
    """Fetch every questionnaire known for a category; partial success counts."""
    ids = bundled.questionnaire_ids(scope_id)
    if not ids:
        return Result.err(ErrorKind.NOT_FOUND, f"no questionnaires known for {scope_id}")
    results = await asyncio.gather(
        *(fetch_questionnaire(client, bundled, questionnaire_scope(scope_id, qid)) for qid in ids)
    )
    docs = [r.value for r in results if r.is_ok]
    if not docs:
        return results[0]
    return Result.ok(docs)


async def fetch_knowledge_block(client: ContentClient, _bundled: BundledRepository, scope_id: str) -> Result:
    return _decoded(await client.block(scope_id), _decode_yaml)


async def fetch_resource(client: ContentClient, _bundled: BundledRepository, scope_id: str) -> Result:
    return _decoded(await client.resource(scope_id), lambda resp: resp.body)


def default_policies(ttl_policy: Mapping[str, float] = TTL_POLICY) -> dict[EntityType, EntityPolicy]:
    """Policies for every entity type, with TTLs taken from ttl_policy."""
    specs = {
        EntityType.CATEGORIES: (fetch_categories, normalize_categories, defaults.mock_categories),
        EntityType.QUESTIONNAIRES: (fetch_questionnaires, normalize_questionnaires, defaults.mock_questionnaires),
        EntityType.QUESTIONNAIRE: (fetch_questionnaire, normalize_questionnaire, defaults.mock_questionnaire),
        EntityType.KNOWLEDGE_BLOCK: (fetch_knowledge_block, normalize_knowledge_block, defaults.mock_knowledge_block),
        EntityType.RESOURCE: (fetch_resource, normalize_resource, defaults.mock_resource),
    }
    return {
        entity_type: EntityPolicy(
            entity_type=entity_type,
            ttl_seconds=ttl_policy[entity_type.value],
            fetch=fetch,
            normalize=normalize,
            mock=mock,
        )
        for entity_type, (fetch, normalize, mock) in specs.items()
    }
