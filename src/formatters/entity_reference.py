"""
Paginated formatters for entity_reference and entity_reference_revisions
fields.

Both render one referenced entity at a time through the host's view
builder. Rendering goes through a RenderContext so an entity that embeds
the same field cannot recurse without bound.
"""

from collections.abc import Sequence
from typing import Any

from aws_lambda_powertools import Logger

from core.models.config import PagerConfig
from core.models.errors import RecursionLimitExceededError
from core.models.field import ContentEntity, EntityReference, FieldContext
from core.models.pagination import PagerView
from core.pager.recursion_guard import RenderContext
from core.repositories.entity_repository import EntityViewRepository
from core.utils.constants import RECURSION_POLICY_SKIP
from core.utils.request import QueryUrlBuilder, RequestParams
from core.utils.translation import DEFAULT_TRANSLATOR, Translator

from .common import build_pager_view, empty_view, resolve_plan

logger = Logger(UTC=True)


def get_entities_to_view(
    references: Sequence[EntityReference],
    repository: EntityViewRepository,
    *,
    by_revision: bool = False,
) -> list[tuple[EntityReference, ContentEntity]]:
    """
    Load referenced entities, dropping any that are missing or inaccessible.

    Returns:
        (reference, entity) pairs in field order
    """
    entities: list[tuple[EntityReference, ContentEntity]] = []

    for reference in references:
        if by_revision:
            if not reference.target_revision_id:
                logger.warning(
                    "Reference has no revision ID",
                    extra={
                        "target_type": reference.target_type,
                        "target_id": reference.target_id,
                    },
                )
                continue
            entity = repository.load_revision(
                entity_type=reference.target_type,
                revision_id=reference.target_revision_id,
            )
        else:
            entity = repository.load(
                entity_type=reference.target_type,
                entity_id=reference.target_id,
            )

        if entity is None:
            logger.debug(
                "Skipping unavailable reference",
                extra={
                    "target_type": reference.target_type,
                    "target_id": reference.target_id,
                },
            )
            continue

        entities.append((reference, entity))

    return entities


def build_render_key(field: FieldContext, entity: ContentEntity) -> str:
    """Identify one field-to-entity render for recursion diagnostics."""
    return ":".join(
        (
            field.host_entity_type,
            field.host_bundle,
            field.field_name,
            field.host_entity_id,
            entity.entity_type,
            entity.entity_id,
        )
    )


def resource_url(entity: ContentEntity) -> str | None:
    """Canonical URL of a saved entity, None if new or without a canonical link."""
    if entity.is_new or not entity.canonical_url:
        return None
    return entity.canonical_url


def item_attributes(reference: EntityReference, entity: ContentEntity) -> dict[str, Any]:
    """
    Structured data attributes for the selected item.

    Only items that already carry attributes (e.g. RDFa mappings) get a
    ``resource`` attribute, and an existing one is never replaced.
    """
    attributes = dict(reference.attributes)
    url = resource_url(entity)

    if attributes and url is not None:
        attributes.setdefault("resource", url)

    return attributes


def _view_entities(
    field: FieldContext,
    references: Sequence[EntityReference],
    *,
    by_revision: bool,
    config: PagerConfig,
    request: RequestParams,
    url_builder: QueryUrlBuilder,
    repository: EntityViewRepository,
    render_context: RenderContext | None,
    translator: Translator,
) -> PagerView:
    entities = get_entities_to_view(references, repository, by_revision=by_revision)

    plan = resolve_plan(len(entities), config, request)
    if plan is None:
        return empty_view(len(entities), config)

    if plan.resolved_index is None:
        return build_pager_view(
            plan,
            config,
            url_builder=url_builder,
            translator=translator,
        )

    reference, entity = entities[plan.resolved_index]
    context = render_context if render_context is not None else RenderContext()
    render_key = build_render_key(field, entity)

    try:
        with context.nested(render_key):
            content = repository.render(
                entity,
                view_mode=config.view_mode,
                langcode=entity.langcode,
                render_context=context,
            )
    except RecursionLimitExceededError:
        if config.recursion_policy != RECURSION_POLICY_SKIP:
            raise

        logger.warning(
            "Recursive rendering detected, branch skipped",
            extra={
                "render_key": render_key,
                "entity_type": entity.entity_type,
                "entity_id": entity.entity_id,
            },
        )
        return build_pager_view(
            plan,
            config,
            url_builder=url_builder,
            translator=translator,
        )

    attributes = item_attributes(reference, entity)

    return build_pager_view(
        plan,
        config,
        url_builder=url_builder,
        translator=translator,
        selected_content=content,
        item_attributes=attributes,
        resource_url=attributes.get("resource"),
    )


def view_entity_reference_field(
    field: FieldContext,
    references: Sequence[EntityReference],
    *,
    config: PagerConfig,
    request: RequestParams,
    url_builder: QueryUrlBuilder,
    repository: EntityViewRepository,
    render_context: RenderContext | None = None,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> PagerView:
    """
    Show one referenced entity, rendered in the configured view mode.

    Pass the ``render_context`` received by the repository's ``render`` when
    calling this from inside a nested render; omit it at the top level.

    Raises:
        IndexOutOfRangeError: If the requested page does not exist and the
            not-found policy is "raise"
        RecursionLimitExceededError: If nesting is too deep and the
            recursion policy is "raise"
    """
    return _view_entities(
        field,
        references,
        by_revision=False,
        config=config,
        request=request,
        url_builder=url_builder,
        repository=repository,
        render_context=render_context,
        translator=translator,
    )


def view_entity_reference_revisions_field(
    field: FieldContext,
    references: Sequence[EntityReference],
    *,
    config: PagerConfig,
    request: RequestParams,
    url_builder: QueryUrlBuilder,
    repository: EntityViewRepository,
    render_context: RenderContext | None = None,
    translator: Translator = DEFAULT_TRANSLATOR,
) -> PagerView:
    """Same as view_entity_reference_field, loading the referenced revisions."""
    return _view_entities(
        field,
        references,
        by_revision=True,
        config=config,
        request=request,
        url_builder=url_builder,
        repository=repository,
        render_context=render_context,
        translator=translator,
    )
