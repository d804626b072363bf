"""
Overwrite stores with their default records. Run from project root:
  python -m toolshare.scripts.reset_store {users|werkzeuge|all} --yes
Example:
  STORE_BACKEND=sql python -m toolshare.scripts.reset_store werkzeuge --yes
"""
import argparse
import logging
import sys

from toolshare.core.config import get_settings
from toolshare.services.collections import COLLECTIONS
from toolshare.services.registry import build_repositories

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reset Toolshare stores to their seed data.")
    parser.add_argument("store", choices=[*COLLECTIONS, "all"], help="Store to reset")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Confirm that existing records will be overwritten",
    )
    args = parser.parse_args(argv)

    if not args.yes:
        print("Refusing to overwrite existing records without --yes.", file=sys.stderr)
        return 1

    names = list(COLLECTIONS) if args.store == "all" else [args.store]
    settings = get_settings()
    try:
        repositories = build_repositories(
            settings,
            [COLLECTIONS[name] for name in names],
            initialize=False,
        )
        for name in names:
            records = repositories[name].reset()
            print(f"Reset '{name}' to {len(records)} default records.")
        return 0
    except Exception as e:
        logger.exception("Reset failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
