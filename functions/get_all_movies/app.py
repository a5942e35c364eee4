from __future__ import annotations
from typing import Any

import os
import dynamodb
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
    result: list[dict[str, Any]] = list()
    try:
        res = table.scan()
        result.extend(res["Items"])
        while "LastEvaluatedKey" in res:
            res = table.scan(ExclusiveStartKey=res["LastEvaluatedKey"])
            result.extend(res["Items"])
        logger.info({"count": len(result)})
    except Exception as e:
        logger.exception(e)
        return BackendFailure(e)

    result.sort(key=lambda x: x["id"])

    return Found(dynamodb.unmarshal(result))
