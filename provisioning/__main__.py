"""
Create and seed the movies API tables.

Usage:
    python -m provisioning --region eu-west-1
    python -m provisioning --region eu-west-1 --movies-table Movies-dev --cast-table MovieCast-dev
    python -m provisioning --region eu-west-1 --dry-run
"""
from __future__ import annotations

import sys
import json
import argparse

from provisioning.manifest import MOVIES_TABLE, MOVIE_CAST_TABLE, FUNCTIONS, function_environment
from provisioning.provisioner import logger, plan, provision


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="provisioning", description=__doc__.splitlines()[1])
    parser.add_argument("--region", required=True)
    parser.add_argument("--endpoint-url", default=None, help="e.g. http://localhost:4566 for LocalStack")
    parser.add_argument("--movies-table", default=MOVIES_TABLE.table_name)
    parser.add_argument("--cast-table", default=MOVIE_CAST_TABLE.table_name)
    parser.add_argument("--dry-run", action="store_true", help="print the resource plan and exit")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    table_names = {
        MOVIES_TABLE.logical_id: args.movies_table,
        MOVIE_CAST_TABLE.logical_id: args.cast_table,
    }

    if args.dry_run:
        print(json.dumps(plan(args.region, table_names), indent=2))
        return 0

    try:
        created = provision(args.region, table_names, endpoint_url=args.endpoint_url)
    except Exception as e:
        logger.exception(e)
        return 1

    for fn in FUNCTIONS:
        print(fn.logical_id, json.dumps(function_environment(fn, args.region, created)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
