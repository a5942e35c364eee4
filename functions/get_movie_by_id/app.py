from __future__ import annotations
from typing import Any

import os
import dynamodb
from event_params import *
from lookup_result import *
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

logger = Logger()

TABLE_NAME = os.environ["TABLE_NAME"]
REGION = os.environ["REGION"]
movie_table = dynamodb.table(TABLE_NAME, REGION)


@logger.inject_lambda_context
def lambda_handler(event: dict[str, Any], context: LambdaContext) -> ProxyResponse:
    logger.info(event)
    return to_response(handle(event, movie_table))


def handle(event: dict[str, Any], table: Any) -> LookupResult:
    movie_id = positive_int(param(event, "movieId"))
    if movie_id is None:
        return BadInput("Missing movie Id")
    # too long to be a stored id, the lookup could not match anything
    if not dynamodb.is_storable_key(movie_id):
        return NotFound("Invalid movie Id")

    try:
        res = table.get_item(Key={
            "id": movie_id,
        })
        logger.info(res)
    except Exception as e:
        logger.exception(e)
        return BackendFailure(e)

    if "Item" not in res:
        return NotFound("Invalid movie Id")

    return Found(dynamodb.unmarshal(res["Item"]))
