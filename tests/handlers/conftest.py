import json
from types import SimpleNamespace
from typing import Any

import pytest

FIELD_ID = "node.book.field_chapters"


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def field_id() -> str:
    return FIELD_ID


@pytest.fixture
def get_settings_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": f"/v1/fields/{FIELD_ID}/settings",
        "pathParameters": {"field_id": FIELD_ID},
        "queryStringParameters": None,
        "headers": {"x-api-key": "test-api-key"},
    }


@pytest.fixture
def update_settings_event(custom_settings) -> dict[str, Any]:
    return {
        "httpMethod": "PUT",
        "path": f"/v1/fields/{FIELD_ID}/settings",
        "pathParameters": {"field_id": FIELD_ID},
        "body": json.dumps({"settings": custom_settings}),
        "headers": {
            "Content-Type": "application/json",
            "x-api-key": "test-api-key",
        },
    }


@pytest.fixture
def render_text_event() -> dict[str, Any]:
    return {
        "httpMethod": "POST",
        "path": f"/v1/fields/{FIELD_ID}/render",
        "pathParameters": {"field_id": FIELD_ID},
        "queryStringParameters": {"page": "1", "sort": "asc"},
        "body": json.dumps(
            {
                "field_type": "text_long",
                "items": [
                    {"value": "<p>One</p>", "format": "basic_html"},
                    {"value": "<p>Two</p>", "format": "basic_html"},
                    {"value": "<p>Three</p>", "format": "basic_html"},
                ],
            }
        ),
        "headers": {
            "Content-Type": "application/json",
            "x-api-key": "test-api-key",
        },
    }
