"""DynamoDB-backed implementation of FormatterSettingsRepository."""

from decimal import Decimal
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.models.errors import SettingsStoreError
from core.repositories.settings_repository import FormatterSettingsRepository
from core.utils.constants import (
    ERROR_CODE_SETTINGS_DELETE_FAILED,
    ERROR_CODE_SETTINGS_FETCH_FAILED,
    ERROR_CODE_SETTINGS_INVALID_FORMAT,
    ERROR_CODE_SETTINGS_SAVE_FAILED,
)
from core.utils.time import utc_now_iso

Settings = dict[str, Any]

logger = Logger(UTC=True)


def _from_dynamodb(value: Any) -> Any:
    """DynamoDB returns every number as Decimal."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


class DynamoDBFormatterSettings(FormatterSettingsRepository):
    """DynamoDB-backed formatter settings storage with error handling.

    One item per field instance, keyed by ``field_id``. All boto3 errors
    are caught and translated into SettingsStoreError with stable codes.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter()

    def fetch_settings(self, *, field_id: str) -> Settings | None:
        """Fetch stored overrides for a field instance.

        Raises:
            SettingsStoreError: If fetch fails or the item is malformed
        """
        logger.debug("Fetching formatter settings", extra={"field_id": field_id})

        try:
            response = self._db.get_item(key={"field_id": field_id})
        except ClientError as exc:
            logger.error("DynamoDB get_item failed", extra={"field_id": field_id})
            raise SettingsStoreError(
                message="Unable to retrieve formatter settings",
                error_code=ERROR_CODE_SETTINGS_FETCH_FAILED,
                details={"field_id": field_id},
            ) from exc

        item = response.get("Item")
        if item is None:
            return None

        settings = item.get("settings")
        if not isinstance(settings, dict):
            logger.error(
                "Invalid formatter settings format",
                extra={"field_id": field_id},
            )
            raise SettingsStoreError(
                message="Invalid formatter settings format",
                error_code=ERROR_CODE_SETTINGS_INVALID_FORMAT,
                details={"field_id": field_id},
            )

        return {key: _from_dynamodb(value) for key, value in settings.items()}

    def save_settings(self, *, field_id: str, settings: Settings) -> None:
        """Create or replace the settings of a field instance.

        Raises:
            ValueError: If field_id is blank
            SettingsStoreError: If the write fails
        """
        if not field_id or not field_id.strip():
            raise ValueError("field_id must be a non-empty string")

        logger.debug("Saving formatter settings", extra={"field_id": field_id})

        try:
            self._db.put_item(
                item={
                    "field_id": field_id,
                    "settings": settings,
                    "updated_at": utc_now_iso(),
                }
            )
            logger.info("Formatter settings saved", extra={"field_id": field_id})

        except ClientError as exc:
            logger.error("DynamoDB put_item failed", extra={"field_id": field_id})
            raise SettingsStoreError(
                message="Unable to save formatter settings at this time",
                error_code=ERROR_CODE_SETTINGS_SAVE_FAILED,
                details={"field_id": field_id},
            ) from exc

    def remove_settings(self, *, field_id: str) -> None:
        """Remove stored settings for a field instance.

        Raises:
            SettingsStoreError: If deletion fails
        """
        logger.debug("Removing formatter settings", extra={"field_id": field_id})

        try:
            self._db.delete_item(key={"field_id": field_id})
            logger.info("Formatter settings removed", extra={"field_id": field_id})

        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra={"field_id": field_id})
            raise SettingsStoreError(
                message="Unable to delete formatter settings",
                error_code=ERROR_CODE_SETTINGS_DELETE_FAILED,
                details={"field_id": field_id},
            ) from exc
