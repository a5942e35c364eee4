"""Static description of the movies API resources.

Nothing here talks to AWS. The provisioner reads `TABLES` to create and seed
the tables; `FUNCTIONS` records how each handler is deployed (runtime,
environment, read-only grants and its public URL) for whatever tool packages
the code.
"""
from __future__ import annotations
from typing import Any, Literal

from dataclasses import dataclass, field

AttributeType = Literal["S", "N", "B"]


@dataclass(frozen=True)
class KeyAttribute:
    name: str
    type: AttributeType


@dataclass(frozen=True)
class LocalIndexSpec:
    index_name: str
    sort_key: KeyAttribute


@dataclass(frozen=True)
class TableSpec:
    logical_id: str
    table_name: str
    partition_key: KeyAttribute
    sort_key: KeyAttribute | None = None
    local_indexes: tuple[LocalIndexSpec, ...] = ()
    billing_mode: str = "PAY_PER_REQUEST"

    def key_schema(self) -> list[dict[str, str]]:
        schema = [{"AttributeName": self.partition_key.name, "KeyType": "HASH"}]
        if self.sort_key is not None:
            schema.append({"AttributeName": self.sort_key.name, "KeyType": "RANGE"})
        return schema

    def attribute_definitions(self) -> list[dict[str, str]]:
        attrs = [self.partition_key]
        if self.sort_key is not None:
            attrs.append(self.sort_key)
        attrs.extend(ix.sort_key for ix in self.local_indexes)
        return [{"AttributeName": a.name, "AttributeType": a.type} for a in attrs]

    def create_table_args(self, table_name: str | None = None) -> dict[str, Any]:
        args: dict[str, Any] = {
            "TableName": table_name or self.table_name,
            "KeySchema": self.key_schema(),
            "AttributeDefinitions": self.attribute_definitions(),
            "BillingMode": self.billing_mode,
        }
        if self.local_indexes:
            args["LocalSecondaryIndexes"] = [
                {
                    "IndexName": ix.index_name,
                    "KeySchema": [
                        {"AttributeName": self.partition_key.name, "KeyType": "HASH"},
                        {"AttributeName": ix.sort_key.name, "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
                for ix in self.local_indexes
            ]
        return args


@dataclass(frozen=True)
class FunctionUrlSpec:
    auth_type: Literal["NONE", "AWS_IAM"] = "NONE"
    allow_origins: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class FunctionSpec:
    logical_id: str
    code_dir: str
    # env var name -> logical id of the table it points at
    table_env: dict[str, str]
    handler: str = "app.lambda_handler"
    runtime: str = "python3.12"
    architecture: Literal["arm64", "x86_64"] = "arm64"
    memory_size: int = 128
    timeout_seconds: int = 10
    read_tables: tuple[str, ...] = ()
    url: FunctionUrlSpec = field(default_factory=FunctionUrlSpec)


MOVIES_TABLE = TableSpec(
    logical_id="MoviesTable",
    table_name="Movies",
    partition_key=KeyAttribute("id", "N"),
)

MOVIE_CAST_TABLE = TableSpec(
    logical_id="MovieCastTable",
    table_name="MovieCast",
    partition_key=KeyAttribute("movieId", "N"),
    sort_key=KeyAttribute("actorName", "S"),
    local_indexes=(
        LocalIndexSpec("roleIx", KeyAttribute("roleName", "S")),
    ),
)

TABLES: tuple[TableSpec, ...] = (MOVIES_TABLE, MOVIE_CAST_TABLE)

FUNCTIONS: tuple[FunctionSpec, ...] = (
    FunctionSpec(
        logical_id="GetMovieByIdFn",
        code_dir="functions/get_movie_by_id",
        table_env={"TABLE_NAME": MOVIES_TABLE.logical_id},
        read_tables=(MOVIES_TABLE.logical_id,),
    ),
    FunctionSpec(
        logical_id="GetAllMoviesFn",
        code_dir="functions/get_all_movies",
        table_env={"TABLE_NAME": MOVIES_TABLE.logical_id},
        read_tables=(MOVIES_TABLE.logical_id,),
    ),
    FunctionSpec(
        logical_id="GetMovieCastMembersFn",
        code_dir="functions/get_movie_cast_members",
        table_env={"CAST_TABLE_NAME": MOVIE_CAST_TABLE.logical_id},
        read_tables=(MOVIE_CAST_TABLE.logical_id,),
    ),
)

LAYER_DIR = "functions/layers/utils_layer"


def table_spec(logical_id: str) -> TableSpec:
    for spec in TABLES:
        if spec.logical_id == logical_id:
            return spec
    raise KeyError(f"no table `{logical_id}` in manifest")


def function_environment(fn: FunctionSpec, region: str, table_names: dict[str, str] | None = None) -> dict[str, str]:
    """Environment a deployed function gets.

    `table_names` maps table logical ids to the physical names actually
    created; tables missing from it fall back to the manifest name.
    """
    table_names = table_names or {}
    env = {
        name: table_names.get(logical_id, table_spec(logical_id).table_name)
        for name, logical_id in fn.table_env.items()
    }
    env["REGION"] = region
    return env
