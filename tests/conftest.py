"""
Pytest configuration and fixtures for pager service tests.
Provides AWS mocking and a DynamoDB settings table with proper cleanup.
"""

import os
from collections.abc import Callable
from typing import Any

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("FORMATTER_SETTINGS_TABLE_NAME", "formatter-settings-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "EasyReadPagerTests")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "easy-read-pager")

import boto3  # noqa: E402
import pytest  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from moto import mock_aws  # noqa: E402

from core.models.config import PagerConfig  # noqa: E402


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_settings_table(dynamodb_resource):
    """Helper to create the formatter settings table."""
    table_name = os.getenv("FORMATTER_SETTINGS_TABLE_NAME")

    return dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "field_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "field_id", "AttributeType": "S"},
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the DynamoDB settings table for testing.

    moto drops the table when the mock context exits.
    """
    table_name = os.getenv("FORMATTER_SETTINGS_TABLE_NAME")

    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
    except ClientError:
        table = _create_settings_table(dynamodb_resource)
        table.wait_until_exists()

    yield table


@pytest.fixture
def dynamodb_put_item(dynamodb_table) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """
    Helper to insert a single item into DynamoDB.

    Usage:
        item = dynamodb_put_item({"field_id": "node.article.body", "settings": {...}})
    """

    def _put(item: dict[str, Any]) -> dict[str, Any]:
        dynamodb_table.put_item(Item=item)
        return item

    return _put


@pytest.fixture
def dynamodb_get_item(dynamodb_table) -> Callable[[str], dict[str, Any] | None]:
    """Helper to get a single settings item from DynamoDB."""

    def _get(field_id: str) -> dict[str, Any] | None:
        response: dict[str, Any] = dynamodb_table.get_item(Key={"field_id": field_id})
        item: dict[str, Any] | None = response.get("Item")
        return item

    return _get


@pytest.fixture
def default_config() -> PagerConfig:
    return PagerConfig()


@pytest.fixture
def custom_settings() -> dict[str, Any]:
    """Instance overrides as a site builder would save them."""
    return {
        "pageIndexName": "section",
        "navigateByNumbers": False,
        "maxPagesToShow": 3,
        "showPageSummary": True,
    }
