"""
Formatter settings form, summary and validation.

These helpers back the formatter-configuration UI: they describe the form
elements a site builder edits, summarize the current settings, and validate
submitted values before they are stored.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from core.models.config import PagerConfig, load_pager_config
from core.models.errors import InvalidConfigurationError
from core.utils.translation import DEFAULT_TRANSLATOR, Translator
from core.utils.validators import sanitize_validation_errors

logger = Logger(UTC=True)

FormElement = dict[str, Any]


def describe_settings_form(
    config: PagerConfig,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> dict[str, FormElement]:
    """
    Describe the pager settings form for one field instance.

    Args:
        config: Current effective settings, used as default values
        translator: Translator for titles and descriptions

    Returns:
        Mapping of settings key to form element definition. The
        ``maxPagesToShow`` element is only visible while numeric
        navigation is enabled.
    """
    t = translator.translate

    return {
        "showPageSummary": {
            "type": "checkbox",
            "title": t("Display page summary"),
            "description": t('Show a summary like "Page X of N".'),
            "default_value": config.show_page_summary,
        },
        "pageIndexName": {
            "type": "textfield",
            "title": t("Index field name"),
            "default_value": config.index_parameter_name,
            "required": True,
        },
        "navigatePreviousNext": {
            "type": "checkbox",
            "title": t("Display Previous & Next"),
            "default_value": config.show_prev_next,
        },
        "navigateFirstLast": {
            "type": "checkbox",
            "title": t("Display First & Last"),
            "default_value": config.show_first_last,
        },
        "navigateByNumbers": {
            "type": "checkbox",
            "title": t("Display numeric page navigation"),
            "default_value": config.show_numbered,
        },
        "maxPagesToShow": {
            "type": "number",
            "title": t("Maximum number of pages to display"),
            "default_value": config.max_pages_to_show,
            "min": 0,
            "states": {
                "visible": {"navigateByNumbers": {"checked": True}},
            },
        },
        "notFoundPolicy": {
            "type": "select",
            "title": t("When the requested page does not exist"),
            "options": {
                "raise": t("Respond with page not found"),
                "empty": t("Render nothing"),
            },
            "default_value": config.not_found_policy,
        },
        "recursionPolicy": {
            "type": "select",
            "title": t("When nested rendering loops"),
            "options": {
                "raise": t("Abort rendering"),
                "skip": t("Skip the looping item"),
            },
            "default_value": config.recursion_policy,
        },
        "view_mode": {
            "type": "textfield",
            "title": t("View mode"),
            "description": t("View mode used to render referenced entities."),
            "default_value": config.view_mode,
            "required": True,
        },
    }


def summarize_settings(
    config: PagerConfig,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> list[str]:
    """Short, human-readable lines describing the current settings."""
    t = translator.translate
    summary = [
        t("Pagination settings (Max pages: @max)", max=config.max_pages_to_show),
        t("Index parameter: @name", name=config.index_parameter_name),
    ]

    controls = []
    if config.show_first_last:
        controls.append(t("First & Last"))
    if config.show_prev_next:
        controls.append(t("Previous & Next"))
    if config.show_numbered:
        controls.append(t("Page numbers"))

    if controls:
        summary.append(t("Navigation: @controls", controls=", ".join(controls)))
    else:
        summary.append(t("Navigation: none"))

    if config.show_page_summary:
        summary.append(t("Page summary shown"))

    return summary


def validate_settings(values: Mapping[str, Any] | None) -> PagerConfig:
    """
    Merge submitted settings with the defaults and validate them.

    Raises:
        InvalidConfigurationError: If any setting is invalid, e.g. an empty
            or non identifier-safe ``pageIndexName``
    """
    try:
        return load_pager_config(values)
    except PydanticValidationError as exc:
        errors = sanitize_validation_errors(list(exc.errors()))
        logger.warning(
            "Formatter settings rejected",
            extra={"errors": errors},
        )
        raise InvalidConfigurationError(
            message="Invalid formatter settings",
            details={"errors": errors},
        ) from exc
