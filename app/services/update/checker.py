"""Update checker - manifest-driven background refresh of cached content."""

import asyncio
from dataclasses import dataclass, field

from loguru import logger
from pydantic import ValidationError

from app.errors import StorageError
from app.models.common import BaseEntity, ErrorKind, Result
from app.models.content import ROOT_SCOPE, EntityType, questionnaire_scope
from app.repositories.bundled import BundledRepository
from app.repositories.kv_store import KeyValueStore
from app.services.resolver import ContentResolver
from app.services.update.versioning import is_newer
from content_client import ContentClient
from content_client.manifest import ManifestSchema
from settings import VERSION_KEY


@dataclass
class UpdateInfo(BaseEntity):
    has_update: bool
    current_version: str | None
    remote_version: str


@dataclass
class DownloadReport(BaseEntity):
    refreshed: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    version_applied: str | None = None

    @property
    def complete(self) -> bool:
        return not self.failed


class UpdateChecker:
    """Compares the remote manifest with the last applied version and pre-warms the cache.

    Nothing here blocks or depends on resolution: a download only rewrites
    persistent cache entries for the next lookup. Checks never raise; a
    failed check and "no update" both yield None.
    """

    def __init__(
        self,
        resolver: ContentResolver,
        client: ContentClient,
        store: KeyValueStore,
        bundled: BundledRepository,
        version_key: str = VERSION_KEY,
    ):
        self._resolver = resolver
        self._client = client
        self._store = store
        self._bundled = bundled
        self._version_key = version_key
        self._task: asyncio.Task | None = None

    async def current_version(self) -> str | None:
        """Last applied content version, None if never applied or unreadable."""
        try:
            return await self._store.get(self._version_key)
        except StorageError as e:
            logger.warning("Cannot read content version: {}", e.message)
            return None

    async def fetch_manifest(self) -> ManifestSchema | None:
        result = await self._client.manifest()
        if not result.is_ok:
            logger.info("Manifest unavailable: {}", result.detail)
            return None
        try:
            return ManifestSchema.model_validate_json(result.value.body)
        except ValidationError as e:
            logger.warning("Manifest rejected: {} validation error(s)", e.error_count())
            return None

    async def check_for_updates(self) -> UpdateInfo | None:
        try:
            manifest = await self.fetch_manifest()
            if manifest is None:
                return None
            current = await self.current_version()
            if current is not None and not is_newer(current, manifest.version):
                logger.debug("Content up to date: {}", current)
                return None
        except Exception as e:
            logger.warning("Update check failed: {}", e)
            return None

        logger.info("Content update available: {} -> {}", current, manifest.version)
        return UpdateInfo(has_update=True, current_version=current, remote_version=manifest.version)

    async def download_update(self, info: UpdateInfo | None = None) -> DownloadReport:
        """Refresh categories and questionnaires into the cache, then record the version.

        Each indexed questionnaire is fetched once and the category list is
        stored from those results. Categories with no indexed questionnaires
        are skipped. The version marker is written only when every entity
        refreshed, so a partial download is retried on the next check.
        """
        if info is None:
            info = await self.check_for_updates()
            if info is None:
                return DownloadReport()

        report = DownloadReport()

        categories = await self._refresh(EntityType.CATEGORIES, ROOT_SCOPE, report)
        paths = list(self._bundled.category_paths())
        if categories.is_ok:
            paths += [c["path"] for c in categories.value if c["path"] not in paths]

        jobs = []
        for path in paths:
            ids = self._bundled.questionnaire_ids(path)
            if not ids:
                logger.debug("No questionnaires indexed for category {}, skipping", path)
                continue
            jobs.append(self._refresh_category(path, ids, report))
        await asyncio.gather(*jobs)

        if report.complete:
            try:
                await self._store.set(self._version_key, info.remote_version)
                report.version_applied = info.remote_version
            except StorageError as e:
                logger.warning("Cannot record content version: {}", e.message)

        logger.info(
            "Update download: {} refreshed, {} failed, version={}",
            len(report.refreshed),
            len(report.failed),
            report.version_applied,
        )
        logger.debug("Update report: {}", report.to_json())
        return report

    async def _refresh_category(self, path: str, ids: tuple[str, ...], report: DownloadReport) -> None:
        """Refresh each questionnaire once, then store the category list built from them."""
        results = await asyncio.gather(
            *(self._refresh(EntityType.QUESTIONNAIRE, questionnaire_scope(path, qid), report) for qid in ids)
        )
        docs = [r.value for r in results if r.is_ok]
        label = f"{EntityType.QUESTIONNAIRES.value}:{path}"
        if not docs:
            report.failed.append(label)
            return
        stored = await self._resolver.store(EntityType.QUESTIONNAIRES, path, docs)
        if stored.is_ok:
            report.refreshed.append(label)
        else:
            logger.debug("Storing {} failed: {}", label, stored.detail)
            report.failed.append(label)

    async def _refresh(self, entity_type: EntityType, scope_id: str, report: DownloadReport) -> Result:
        label = f"{entity_type.value}:{scope_id}"
        try:
            result = await self._resolver.refresh(entity_type, scope_id)
        except Exception as e:
            logger.warning("Refresh of {} failed: {}", label, e)
            report.failed.append(label)
            return Result.err(ErrorKind.NETWORK, str(e))
        if result.is_ok:
            report.refreshed.append(label)
        else:
            logger.debug("Refresh of {} failed: {}", label, result.detail)
            report.failed.append(label)
        return result

    def start(self, delay_seconds: float, auto_apply: bool = False) -> asyncio.Task:
        """Schedule one background check after a delay (call on launch)."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._scheduled(delay_seconds, auto_apply))
        return self._task

    async def _scheduled(self, delay_seconds: float, auto_apply: bool) -> DownloadReport | UpdateInfo | None:
        await asyncio.sleep(delay_seconds)
        info = await self.check_for_updates()
        if info is None or not auto_apply:
            return info
        return await self.download_update(info)

    async def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
