"""
Business logic for per-field formatter settings.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_settings import DynamoDBFormatterSettings
from core.models.config import PagerConfig
from core.pager.settings_form import validate_settings
from core.repositories.settings_repository import FormatterSettingsRepository

logger = Logger(UTC=True)


class FormatterSettingsService:
    """Application service resolving and storing formatter settings.

    This service coordinates:
    - Fetching stored instance overrides
    - Merging them over the defaults into a PagerConfig
    - Validating and persisting submitted settings
    """

    def __init__(self, repository: FormatterSettingsRepository | None = None) -> None:
        self.repository: FormatterSettingsRepository = (
            repository or DynamoDBFormatterSettings()
        )

    def get_config(self, field_id: str) -> PagerConfig:
        """
        Effective configuration for a field instance.

        Fields without stored settings use the defaults.

        Raises:
            SettingsStoreError: If the store cannot be read
            InvalidConfigurationError: If stored settings no longer validate
        """
        stored = self.repository.fetch_settings(field_id=field_id)

        if stored is None:
            logger.debug(
                "No stored settings, using defaults",
                extra={"field_id": field_id},
            )

        return validate_settings(stored)

    def update_settings(self, field_id: str, values: dict[str, Any]) -> PagerConfig:
        """
        Validate submitted settings and store them.

        Raises:
            InvalidConfigurationError: If the settings are invalid
            SettingsStoreError: If the write fails
        """
        config = validate_settings(values)
        self.repository.save_settings(field_id=field_id, settings=config.to_settings())

        logger.info(
            "Formatter settings updated",
            extra={"field_id": field_id, "settings": config.to_settings()},
        )

        return config

    def reset_settings(self, field_id: str) -> PagerConfig:
        """Drop stored overrides so the field falls back to the defaults."""
        self.repository.remove_settings(field_id=field_id)
        return validate_settings(None)
