"""
tests/conftest.py
~~~~~~~~~~~~~~~~~
Shared pytest fixtures.

moto mocks DynamoDB in-process, so no AWS account or LocalStack is needed.
Handler modules read their environment and build their table at import time,
so every test loads a fresh copy of the module inside the mock.
"""
from __future__ import annotations

import os
import importlib.util
from dataclasses import dataclass
from pathlib import Path

import pytest

os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_SECURITY_TOKEN"] = "testing"
os.environ["AWS_SESSION_TOKEN"] = "testing"
os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"
os.environ["POWERTOOLS_SERVICE_NAME"] = "movies-api-test"

ROOT = Path(__file__).resolve().parent.parent
REGION = "eu-west-1"


@dataclass
class FakeLambdaContext:
    function_name: str = "test-fn"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:eu-west-1:123456789012:function:test-fn"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


def make_event(query: dict[str, str] | None = None, path: dict[str, str] | None = None) -> dict:
    """Function URL style event; absent parameter maps are left out"""
    event: dict = {
        "version": "2.0",
        "rawPath": "/",
        "headers": {"accept": "application/json"},
        "requestContext": {"http": {"method": "GET", "path": "/"}},
        "isBase64Encoded": False,
    }
    if query is not None:
        event["queryStringParameters"] = query
    if path is not None:
        event["pathParameters"] = path
    return event


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def aws():
    from moto import mock_aws

    with mock_aws():
        yield


@pytest.fixture
def dynamodb_resource(aws):
    from provisioning.provisioner import dynamodb_resource

    return dynamodb_resource(REGION)


@pytest.fixture
def table_names(dynamodb_resource):
    """Movies and MovieCast tables, created and seeded"""
    from provisioning.provisioner import provision

    return provision(REGION, resource=dynamodb_resource)


@pytest.fixture
def load_app(table_names, monkeypatch):
    from provisioning.manifest import FUNCTIONS, function_environment

    def _load(logical_id: str, **env_overrides: str | None):
        fn = next(f for f in FUNCTIONS if f.logical_id == logical_id)
        env = function_environment(fn, REGION, table_names)
        env.update(env_overrides)
        for name, value in env.items():
            if value is None:
                monkeypatch.delenv(name, raising=False)
            else:
                monkeypatch.setenv(name, value)

        path = ROOT / fn.code_dir / "app.py"
        spec = importlib.util.spec_from_file_location(f"{path.parent.name}_app", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
