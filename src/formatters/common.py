"""
Shared pagination view assembly for all paginated formatters.

Each formatter adapter counts its selectable items, asks for a plan, picks
the content for the resolved index and then assembles the view-model here.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.models.config import PagerConfig
from core.models.errors import IndexOutOfRangeError
from core.models.pagination import NavLink, PagerPlan, PagerView
from core.pager.planner import PaginationPlanner
from core.utils.constants import LINK_PAGE, NOT_FOUND_POLICY_EMPTY
from core.utils.request import QueryUrlBuilder, RequestParams
from core.utils.translation import DEFAULT_TRANSLATOR, Translator

logger = Logger(UTC=True)


def resolve_plan(
    total_items: int,
    config: PagerConfig,
    request: RequestParams,
) -> PagerPlan | None:
    """
    Plan the current render from the request's index parameter.

    Returns:
        The plan, or None when the requested page does not exist and the
        configuration asks for an empty result instead of an error.

    Raises:
        IndexOutOfRangeError: If the page does not exist and
            ``not_found_policy`` is "raise"
    """
    raw_index = request.get_param(config.index_parameter_name)

    try:
        return PaginationPlanner.plan(total_items, raw_index, config)
    except IndexOutOfRangeError as exc:
        if config.not_found_policy == NOT_FOUND_POLICY_EMPTY:
            logger.info(
                "Requested page does not exist, rendering nothing",
                extra=exc.details,
            )
            return None
        raise


def assemble_links(
    plan: PagerPlan,
    config: PagerConfig,
    *,
    url_builder: QueryUrlBuilder,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> list[NavLink]:
    """Attach hrefs, translated labels and HTML attributes to planned links."""
    t = translator.translate
    links: list[NavLink] = []

    for link in plan.links:
        href = url_builder.build(config.index_parameter_name, link.target_index)

        if link.kind == LINK_PAGE:
            if link.is_current:
                update: dict[str, Any] = {
                    "href": href,
                    "attributes": {"class": ["active"], "aria-current": "page"},
                }
            else:
                update = {
                    "href": href,
                    "accessibility_label": t("Go to page @number", number=link.label),
                }
        else:
            label = t(str(link.label))
            aria_label = t(link.accessibility_label) if link.accessibility_label else None
            update = {
                "href": href,
                "label": label,
                "accessibility_label": aria_label,
                "attributes": {"aria-label": aria_label} if aria_label else {},
            }

        links.append(link.model_copy(update=update))

    return links


def page_summary(
    plan: PagerPlan,
    config: PagerConfig,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> str | None:
    """'Page X of N' text, only while the field actually paginates."""
    if not config.show_page_summary or plan.total_items < 2 or plan.resolved_index is None:
        return None

    return translator.translate(
        "Page @current of @total",
        current=plan.resolved_index + 1,
        total=plan.total_items,
    )


def empty_view(total_items: int, config: PagerConfig) -> PagerView:
    """View for a page that does not exist under the 'empty' policy."""
    return PagerView(total_items=total_items, config=config)


def build_pager_view(
    plan: PagerPlan,
    config: PagerConfig,
    *,
    url_builder: QueryUrlBuilder,
    translator: Translator = DEFAULT_TRANSLATOR,
    selected_content: Any = None,
    item_attributes: dict[str, Any] | None = None,
    resource_url: str | None = None,
) -> PagerView:
    """Assemble the view-model handed to the template layer."""
    return PagerView(
        total_items=plan.total_items,
        resolved_index=plan.resolved_index,
        navigation_links=assemble_links(
            plan,
            config,
            url_builder=url_builder,
            translator=translator,
        ),
        config=config,
        selected_content=selected_content,
        summary=page_summary(plan, config, translator),
        item_attributes=item_attributes or {},
        resource_url=resource_url,
    )
