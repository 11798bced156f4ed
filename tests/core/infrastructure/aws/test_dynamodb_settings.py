from typing import Any

import pytest
from botocore.exceptions import ClientError

from core.infrastructure.aws.dynamodb_settings import DynamoDBFormatterSettings
from core.models.errors import SettingsStoreError
from core.utils.constants import (
    ERROR_CODE_SETTINGS_DELETE_FAILED,
    ERROR_CODE_SETTINGS_FETCH_FAILED,
    ERROR_CODE_SETTINGS_INVALID_FORMAT,
    ERROR_CODE_SETTINGS_SAVE_FAILED,
)


def _client_error(operation: str) -> ClientError:
    return ClientError(
        {"Error": {"Code": "InternalServerError", "Message": "boom"}},
        operation,
    )


class FailingAdapter:
    def put_item(self, *, item: dict[str, Any]) -> dict[str, Any]:
        raise _client_error("PutItem")

    def get_item(self, *, key: dict[str, Any]) -> dict[str, Any]:
        raise _client_error("GetItem")

    def delete_item(self, *, key: dict[str, Any]) -> dict[str, Any]:
        raise _client_error("DeleteItem")


class TestFetchSettings:
    def test_missing_item_returns_none(self, dynamodb_table) -> None:
        repo = DynamoDBFormatterSettings()

        assert repo.fetch_settings(field_id="node.article.body") is None

    def test_numbers_come_back_as_int(self, dynamodb_table) -> None:
        repo = DynamoDBFormatterSettings()
        repo.save_settings(
            field_id="node.article.body",
            settings={"maxPagesToShow": 7, "navigateByNumbers": True},
        )

        settings = repo.fetch_settings(field_id="node.article.body")

        assert settings == {"maxPagesToShow": 7, "navigateByNumbers": True}
        assert isinstance(settings["maxPagesToShow"], int)

    def test_malformed_item(self, dynamodb_put_item) -> None:
        dynamodb_put_item({"field_id": "broken", "settings": "not-a-map"})
        repo = DynamoDBFormatterSettings()

        with pytest.raises(SettingsStoreError) as exc_info:
            repo.fetch_settings(field_id="broken")

        assert exc_info.value.error_code == ERROR_CODE_SETTINGS_INVALID_FORMAT

    def test_client_error(self) -> None:
        repo = DynamoDBFormatterSettings(adapter=FailingAdapter())

        with pytest.raises(SettingsStoreError) as exc_info:
            repo.fetch_settings(field_id="f")

        assert exc_info.value.error_code == ERROR_CODE_SETTINGS_FETCH_FAILED
        assert exc_info.value.details == {"field_id": "f"}


class TestSaveSettings:
    def test_item_shape(self, dynamodb_table, dynamodb_get_item) -> None:
        repo = DynamoDBFormatterSettings()
        repo.save_settings(field_id="f", settings={"pageIndexName": "section"})

        item = dynamodb_get_item("f")

        assert item is not None
        assert item["settings"] == {"pageIndexName": "section"}
        assert item["updated_at"].endswith("+00:00")

    def test_blank_field_id(self) -> None:
        repo = DynamoDBFormatterSettings(adapter=FailingAdapter())

        with pytest.raises(ValueError):
            repo.save_settings(field_id="  ", settings={})

    def test_client_error(self) -> None:
        repo = DynamoDBFormatterSettings(adapter=FailingAdapter())

        with pytest.raises(SettingsStoreError) as exc_info:
            repo.save_settings(field_id="f", settings={})

        assert exc_info.value.error_code == ERROR_CODE_SETTINGS_SAVE_FAILED


class TestRemoveSettings:
    def test_removes_item(self, dynamodb_put_item, dynamodb_get_item) -> None:
        dynamodb_put_item({"field_id": "f", "settings": {}})
        repo = DynamoDBFormatterSettings()

        repo.remove_settings(field_id="f")

        assert dynamodb_get_item("f") is None

    def test_client_error(self) -> None:
        repo = DynamoDBFormatterSettings(adapter=FailingAdapter())

        with pytest.raises(SettingsStoreError) as exc_info:
            repo.remove_settings(field_id="f")

        assert exc_info.value.error_code == ERROR_CODE_SETTINGS_DELETE_FAILED
