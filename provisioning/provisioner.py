from __future__ import annotations
from typing import Any, Iterable

import boto3
import dynamodb
from botocore.exceptions import ClientError
from aws_lambda_powertools.logging import Logger

from provisioning import seed_data
from provisioning.manifest import *

logger = Logger(service="movies-provisioning")

SEEDS: dict[str, list[dict[str, Any]]] = {
    MOVIES_TABLE.logical_id: seed_data.MOVIES,
    MOVIE_CAST_TABLE.logical_id: seed_data.MOVIE_CASTS,
}


def dynamodb_resource(region: str, endpoint_url: str | None = None) -> Any:
    return boto3.resource("dynamodb", region_name=region, endpoint_url=endpoint_url)


def create_table(resource: Any, spec: TableSpec, table_name: str | None = None) -> tuple[Any, bool]:
    """Create the table and wait for it; returns (table, created)"""
    args = spec.create_table_args(table_name)
    try:
        table = resource.create_table(**args)
    except ClientError as e:
        if e.response["Error"]["Code"] != "ResourceInUseException":
            raise
        logger.info(f"table `{args['TableName']}` already exists")
        return resource.Table(args["TableName"]), False

    table.wait_until_exists()
    logger.info(f"table `{args['TableName']}` created")
    return table, True


def seed_table(table: Any, items: Iterable[dict[str, Any]]) -> int:
    count = 0
    with table.batch_writer() as batch:
        for item in items:
            batch.put_item(Item=dynamodb.marshal(item))
            count += 1
    logger.info({"table": table.name, "seeded": count})
    return count


def provision(
    region: str,
    table_names: dict[str, str] | None = None,
    endpoint_url: str | None = None,
    resource: Any = None,
) -> dict[str, str]:
    """Create every manifest table, seeding only the ones created by this call.

    Returns table logical id -> physical name, to be fed into
    `function_environment`.
    """
    table_names = table_names or {}
    resource = resource or dynamodb_resource(region, endpoint_url)

    created_names: dict[str, str] = dict()
    for spec in TABLES:
        table, created = create_table(resource, spec, table_names.get(spec.logical_id))
        if created:
            seed_table(table, SEEDS.get(spec.logical_id, []))
        created_names[spec.logical_id] = table.name

    return created_names


def plan(region: str, table_names: dict[str, str] | None = None) -> dict[str, Any]:
    table_names = table_names or {}
    return {
        "tables": [
            spec.create_table_args(table_names.get(spec.logical_id))
            for spec in TABLES
        ],
        "functions": [
            {
                "logicalId": fn.logical_id,
                "codeDir": fn.code_dir,
                "layers": [LAYER_DIR],
                "handler": fn.handler,
                "runtime": fn.runtime,
                "architecture": fn.architecture,
                "memorySize": fn.memory_size,
                "timeout": fn.timeout_seconds,
                "environment": function_environment(fn, region, table_names),
                "readTables": list(fn.read_tables),
                "url": {
                    "authType": fn.url.auth_type,
                    "cors": {"allowOrigins": list(fn.url.allow_origins)},
                },
            }
            for fn in FUNCTIONS
        ],
    }
