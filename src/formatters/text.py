"""Paginated formatter for text, text_long and text_with_summary fields."""

from collections.abc import Sequence
from typing import Any

from core.models.config import PagerConfig
from core.models.field import TextItem
from core.models.pagination import PagerView
from core.utils.request import QueryUrlBuilder, RequestParams
from core.utils.translation import DEFAULT_TRANSLATOR, Translator

from .common import build_pager_view, empty_view, resolve_plan


def processed_text(item: TextItem) -> dict[str, Any]:
    """Render element for one text item."""
    return {
        "type": "processed_text",
        "text": item.value,
        "format": item.format,
        "langcode": item.langcode,
    }


def view_text_field(
    items: Sequence[TextItem],
    *,
    config: PagerConfig,
    request: RequestParams,
    url_builder: QueryUrlBuilder,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> PagerView:
    """
    Show one text item of a multi-value text field.

    Raises:
        IndexOutOfRangeError: If the requested page does not exist and the
            not-found policy is "raise"
    """
    plan = resolve_plan(len(items), config, request)
    if plan is None:
        return empty_view(len(items), config)

    selected = None
    if plan.resolved_index is not None:
        selected = processed_text(items[plan.resolved_index])

    return build_pager_view(
        plan,
        config,
        url_builder=url_builder,
        translator=translator,
        selected_content=selected,
    )
