from __future__ import annotations
from typing import Any

import os
import dynamodb
from event_params import *
from lookup_result import *
from boto3.dynamodb.conditions import Key
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

logger = Logger()

CAST_TABLE_NAME = os.environ["CAST_TABLE_NAME"]
REGION = os.environ["REGION"]
cast_table = dynamodb.table(CAST_TABLE_NAME, REGION)

ROLE_INDEX_NAME = "roleIx"


@logger.inject_lambda_context
def lambda_handler(event: dict[str, Any], context: LambdaContext) -> ProxyResponse:
    logger.info(event)
    return to_response(handle(event, cast_table))


def handle(event: dict[str, Any], table: Any) -> LookupResult:
    movie_id = positive_int(param(event, "movieId"))
    if movie_id is None:
        return BadInput("Missing movie Id")
    if not dynamodb.is_storable_key(movie_id):
        return NotFound("No cast members found")

    result: list[dict[str, Any]] = list()
    try:
        args = query_args(
            movie_id,
            role_name=param(event, "roleName"),
            actor_name=param(event, "actorName"),
        )
        res = table.query(**args)
        result.extend(res["Items"])
        while "LastEvaluatedKey" in res:
            res = table.query(**args, ExclusiveStartKey=res["LastEvaluatedKey"])
            result.extend(res["Items"])
        logger.info({"count": len(result)})
    except Exception as e:
        logger.exception(e)
        return BackendFailure(e)

    if not result:
        return NotFound("No cast members found")

    return Found(dynamodb.unmarshal(result))


def query_args(movie_id: int, role_name: str | None = None, actor_name: str | None = None) -> dict[str, Any]:
    condition = Key("movieId").eq(movie_id)

    # roleName takes precedence over actorName
    if role_name:
        return {
            "IndexName": ROLE_INDEX_NAME,
            "KeyConditionExpression": condition & Key("roleName").begins_with(role_name),
        }
    if actor_name:
        return {
            "KeyConditionExpression": condition & Key("actorName").begins_with(actor_name),
        }
    return {
        "KeyConditionExpression": condition,
    }
