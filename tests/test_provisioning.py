"""Manifest and provisioner tests; tables are created in moto."""
import json

import pytest

from conftest import REGION
from provisioning import seed_data
from provisioning.__main__ import main
from provisioning.manifest import (
    FUNCTIONS,
    MOVIE_CAST_TABLE,
    MOVIES_TABLE,
    function_environment,
    table_spec,
)
from provisioning.provisioner import create_table, provision, seed_table


class TestManifest:
    def test_movies_table_schema(self):
        args = MOVIES_TABLE.create_table_args()

        assert args["KeySchema"] == [{"AttributeName": "id", "KeyType": "HASH"}]
        assert args["AttributeDefinitions"] == [{"AttributeName": "id", "AttributeType": "N"}]
        assert "LocalSecondaryIndexes" not in args

    def test_cast_table_schema(self):
        args = MOVIE_CAST_TABLE.create_table_args("MovieCast-dev")

        assert args["TableName"] == "MovieCast-dev"
        assert args["KeySchema"] == [
            {"AttributeName": "movieId", "KeyType": "HASH"},
            {"AttributeName": "actorName", "KeyType": "RANGE"},
        ]
        assert args["LocalSecondaryIndexes"][0]["IndexName"] == "roleIx"
        assert {"AttributeName": "roleName", "AttributeType": "S"} in args["AttributeDefinitions"]

    @pytest.mark.parametrize("fn", FUNCTIONS, ids=lambda f: f.logical_id)
    def test_functions_are_read_only_on_their_tables(self, fn):
        assert set(fn.table_env.values()) == set(fn.read_tables)
        assert fn.timeout_seconds == 10
        assert fn.url.auth_type == "NONE"

    def test_function_environment(self):
        fn = next(f for f in FUNCTIONS if f.logical_id == "GetMovieCastMembersFn")

        assert function_environment(fn, "eu-west-1") == {
            "CAST_TABLE_NAME": "MovieCast",
            "REGION": "eu-west-1",
        }
        assert function_environment(fn, "eu-west-1", {"MovieCastTable": "Cast-dev"})["CAST_TABLE_NAME"] == "Cast-dev"

    def test_unknown_table(self):
        with pytest.raises(KeyError):
            table_spec("NoSuchTable")


class TestProvisioner:
    def test_provision_creates_and_seeds(self, dynamodb_resource):
        names = provision(REGION, resource=dynamodb_resource)

        assert names == {"MoviesTable": "Movies", "MovieCastTable": "MovieCast"}
        assert dynamodb_resource.Table("Movies").scan()["Count"] == len(seed_data.MOVIES)
        assert dynamodb_resource.Table("MovieCast").scan()["Count"] == len(seed_data.MOVIE_CASTS)

    def test_seeds_only_once(self, dynamodb_resource):
        provision(REGION, resource=dynamodb_resource)
        dynamodb_resource.Table("Movies").delete_item(Key={"id": 1234})

        provision(REGION, resource=dynamodb_resource)

        assert dynamodb_resource.Table("Movies").scan()["Count"] == len(seed_data.MOVIES) - 1

    def test_create_table_existing(self, dynamodb_resource):
        _, created = create_table(dynamodb_resource, MOVIES_TABLE, "Movies-dev")
        table, created_again = create_table(dynamodb_resource, MOVIES_TABLE, "Movies-dev")

        assert created is True
        assert created_again is False
        assert table.name == "Movies-dev"

    def test_seed_table_count(self, dynamodb_resource):
        table, _ = create_table(dynamodb_resource, MOVIES_TABLE, "Movies-seed")

        assert seed_table(table, [{"id": 1, "title": "A"}, {"id": 2, "title": "B"}]) == 2


class TestCli:
    def test_dry_run_prints_plan(self, capsys):
        assert main(["--region", "eu-west-1", "--dry-run", "--movies-table", "Movies-dev"]) == 0

        plan = json.loads(capsys.readouterr().out)
        assert [t["TableName"] for t in plan["tables"]] == ["Movies-dev", "MovieCast"]
        by_id = {f["logicalId"]: f for f in plan["functions"]}
        assert by_id["GetMovieByIdFn"]["environment"] == {"TABLE_NAME": "Movies-dev", "REGION": "eu-west-1"}
        assert by_id["GetAllMoviesFn"]["architecture"] == "arm64"

    def test_provisions_against_mock(self, aws, capsys):
        assert main(["--region", REGION]) == 0

        out = capsys.readouterr().out
        assert "GetMovieCastMembersFn" in out
        assert '"CAST_TABLE_NAME": "MovieCast"' in out
