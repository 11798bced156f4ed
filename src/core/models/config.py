"""Pager configuration model and settings merging."""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.utils.constants import (
    DEFAULT_MAX_PAGES_TO_SHOW,
    DEFAULT_PAGE_INDEX_NAME,
    DEFAULT_PAGER_SETTINGS,
    DEFAULT_VIEW_MODE,
    NOT_FOUND_POLICY_RAISE,
    PAGE_INDEX_NAME_PATTERN,
    RECURSION_POLICY_RAISE,
)

# Older settings exports used this key for the index parameter.
LEGACY_SETTING_KEYS: dict[str, str] = {
    "indexParameterName": "pageIndexName",
}


class PagerConfig(BaseModel):
    """Effective pagination settings for one field instance.

    Fields are populated from formatter settings keys (``pageIndexName``,
    ``navigateByNumbers`` ...) or from their Python names.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    index_parameter_name: StrictStr = Field(
        default=DEFAULT_PAGE_INDEX_NAME,
        alias="pageIndexName",
        min_length=1,
        pattern=PAGE_INDEX_NAME_PATTERN,
        description="Query parameter carrying the current page index",
    )
    show_prev_next: bool = Field(
        default=True,
        alias="navigatePreviousNext",
        description="Display Previous & Next links",
    )
    show_first_last: bool = Field(
        default=True,
        alias="navigateFirstLast",
        description="Display First & Last links",
    )
    show_numbered: bool = Field(
        default=True,
        alias="navigateByNumbers",
        description="Display numeric page links",
    )
    max_pages_to_show: int = Field(
        default=DEFAULT_MAX_PAGES_TO_SHOW,
        alias="maxPagesToShow",
        description="Maximum number of numbered links (0 = no limit)",
    )
    show_page_summary: bool = Field(
        default=False,
        alias="showPageSummary",
        description='Display a "Page X of N" summary',
    )
    not_found_policy: Literal["raise", "empty"] = Field(
        default=NOT_FOUND_POLICY_RAISE,
        alias="notFoundPolicy",
        description="Raise on a missing page or render nothing",
    )
    recursion_policy: Literal["raise", "skip"] = Field(
        default=RECURSION_POLICY_RAISE,
        alias="recursionPolicy",
        description="Raise on runaway nested rendering or skip the branch",
    )
    view_mode: StrictStr = Field(
        default=DEFAULT_VIEW_MODE,
        alias="view_mode",
        min_length=1,
        description="View mode used to render referenced entities",
    )

    @field_validator("max_pages_to_show")
    @classmethod
    def clamp_max_pages(cls, value: int) -> int:
        """Negative caps are treated as 'no limit'."""
        return max(value, 0)

    def to_settings(self) -> dict[str, Any]:
        """Serialize back to formatter settings keys."""
        return self.model_dump(by_alias=True)


def _canonical_key(key: str) -> str:
    if key in LEGACY_SETTING_KEYS:
        return LEGACY_SETTING_KEYS[key]

    field = PagerConfig.model_fields.get(key)
    if field is not None and field.alias:
        return field.alias

    return key


def merge_settings(overrides: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Layer instance overrides on top of the default pager settings.

    Override keys may use either the settings key or the Python field name;
    both are normalized to the settings key before merging.
    """
    merged: dict[str, Any] = dict(DEFAULT_PAGER_SETTINGS)

    for key, value in (overrides or {}).items():
        merged[_canonical_key(key)] = value

    return merged


def load_pager_config(settings: Mapping[str, Any] | None = None) -> PagerConfig:
    """Build the effective PagerConfig for a field instance.

    Raises:
        pydantic.ValidationError: If any merged setting is invalid
    """
    return PagerConfig.model_validate(merge_settings(settings))
