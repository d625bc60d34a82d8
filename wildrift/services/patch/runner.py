from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

from wildrift.config import get_database_path, get_fetch_timeout
from wildrift.services.mapping.loader import Dictionaries, build_mappings

from .base import PatchResolutionError
from .resolver import PatchResolver
from .updater import update_patch_info
from .version import compare_patch

logger = logging.getLogger("wildrift")


async def bootstrap(db_path: str, *, resolver: Optional[PatchResolver] = None) -> Dictionaries:
    """Update the stored patch, then build the name dictionaries."""
    await update_patch_info(db_path, resolver=resolver or PatchResolver(timeout=get_fetch_timeout()))
    dicts = build_mappings(db_path)
    logger.info(
        "CN: %s TW: %s",
        dicts.lookup("champions", "Lee Sin", "cn"),
        dicts.lookup("champions", "Lee Sin", "tw"),
    )
    return dicts


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Wild Rift patch tracker and name mapping")
    parser.add_argument("--db", default=None, help="Path to the JSON database (default: $WR_DATABASE_PATH)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("bootstrap", help="Update the patch, then build mappings")
    sub.add_parser("check", help="Resolve the latest patch and update the database if newer")

    lk = sub.add_parser("lookup", help="Translate an English entity name")
    lk.add_argument("entity_type", choices=["champions", "runes", "items", "summoners"])
    lk.add_argument("name", help="English name, e.g. 'Lee Sin'")
    lk.add_argument("--locale", choices=["cn", "tw"], default="cn")

    cmp_ = sub.add_parser("compare", help="Compare two patch tokens")
    cmp_.add_argument("a")
    cmp_.add_argument("b")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[WR] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_path = args.db or get_database_path()

    if args.cmd == "compare":
        c = compare_patch(args.a, args.b)
        print("<" if c < 0 else ">" if c > 0 else "=")
        return 0

    if args.cmd == "lookup":
        print(build_mappings(db_path).lookup(args.entity_type, args.name, args.locale))
        return 0

    try:
        if args.cmd == "check":
            resolver = PatchResolver(timeout=get_fetch_timeout())
            print(asyncio.run(update_patch_info(db_path, resolver=resolver)))
            return 0
        if args.cmd == "bootstrap":
            asyncio.run(bootstrap(db_path))
            return 0
    except PatchResolutionError as exc:
        logger.error("patch resolution failed: %s", exc)
        return 1

    parser.error("unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
