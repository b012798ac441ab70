#!/usr/bin/env python3
"""
Inspect and refresh the on-device content cache.

Usage:
    python sync_content.py check                  # Compare local and published versions
    python sync_content.py download               # Check, then refresh the cache if needed
    python sync_content.py download --force       # Refresh even when versions match
    python sync_content.py show categories _      # Resolve one entity and print its source
    python sync_content.py size                   # Bytes used by cached entries
    python sync_content.py clear                  # Delete cached entries (keeps journey state)
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container
from app.models.content import EntityType
from app.services.update import UpdateInfo
from settings.logging import setup_logging

logger = setup_logging()


async def run_check(container: Container) -> None:
    info = await container.updates.check_for_updates()
    current = await container.updates.current_version()
    if info is None:
        print(f"\n✅ Content up to date (or manifest unreachable). Local version: {current or '-'}\n")
    else:
        print(f"\n⬆️  Update available: {info.current_version or '-'} -> {info.remote_version}\n")


async def run_download(container: Container, force: bool) -> bool:
    info = await container.updates.check_for_updates()
    if info is None and force:
        manifest = await container.updates.fetch_manifest()
        if manifest is not None:
            current = await container.updates.current_version()
            info = UpdateInfo(has_update=True, current_version=current, remote_version=manifest.version)
    if info is None:
        print("\n✅ Nothing to download.\n")
        return True

    report = await container.updates.download_update(info)

    print("\n" + "=" * 60)
    print("CONTENT UPDATE REPORT")
    print("=" * 60)
    print(f"  Refreshed: {len(report.refreshed)}")
    for label in report.failed:
        print(f"  ⚠️  {label}")
    if report.complete:
        print(f"✅ Version {report.version_applied} applied")
    else:
        print("❌ Some entities failed. The version marker was not updated.")
    print("=" * 60 + "\n")
    return report.complete


async def run_show(container: Container, entity_type: str, scope_id: str) -> None:
    resolved = await container.resolver.resolve(EntityType(entity_type), scope_id)
    print(f"\nsource: {resolved.source.value}")
    if isinstance(resolved.payload, str):
        print(resolved.payload)
    else:
        print(json.dumps(resolved.payload, indent=2, ensure_ascii=False, default=str))


async def _main(args: list[str]) -> int:
    force = "--force" in args or "-f" in args
    args = [a for a in args if a not in ("--force", "-f")]
    if not args:
        print(__doc__)
        return 1

    command = args[0]
    async with Container(update_check_delay=None) as container:
        if command == "check":
            await run_check(container)
        elif command == "download":
            return 0 if await run_download(container, force) else 2
        elif command == "show" and len(args) == 3 and args[1] in {e.value for e in EntityType}:
            await run_show(container, args[1], args[2])
        elif command == "size":
            print(f"\nCache size: {await container.cache.size():,} bytes\n")
        elif command == "clear":
            removed = await container.resolver.clear_cache()
            logger.info("Removed {} cached entries", removed)
        else:
            print(__doc__)
            return 1
    return 0


def main():
    sys.exit(asyncio.run(_main(sys.argv[1:])))


if __name__ == "__main__":
    main()
