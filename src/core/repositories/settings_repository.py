"""Abstract contract for formatter settings persistence."""

from abc import ABC, abstractmethod
from typing import Any

Settings = dict[str, Any]


class FormatterSettingsRepository(ABC):
    """Contract for storing and retrieving per-field formatter settings.

    Implementations could be DynamoDB, a config file, a CMS config API, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def fetch_settings(self, *, field_id: str) -> Settings | None:
        """Fetch the stored overrides for a field instance.

        Args:
            field_id: Field instance identifier

        Returns:
            Settings dict (instance overrides only) or None if not configured

        Raises:
            SettingsStoreError: If fetch fails
        """

    @abstractmethod
    def save_settings(self, *, field_id: str, settings: Settings) -> None:
        """Create or replace the settings of a field instance.

        Args:
            field_id: Field instance identifier
            settings: Validated settings keyed by settings key

        Raises:
            SettingsStoreError: If the write fails
        """

    @abstractmethod
    def remove_settings(self, *, field_id: str) -> None:
        """Remove stored settings, reverting the field to defaults.

        Raises:
            SettingsStoreError: If deletion fails
        """
