from collections.abc import Callable
from typing import Any

import pytest

from core.models.field import ContentEntity, EntityReference, FieldContext, TextItem
from core.pager.recursion_guard import RenderContext
from core.repositories.entity_repository import EntityViewRepository
from core.utils.request import QueryUrlBuilder

RenderFn = Callable[[ContentEntity, RenderContext], Any]


class InMemoryEntityRepository(EntityViewRepository):
    """Entity store and view builder backed by a dict."""

    def __init__(
        self,
        entities: list[ContentEntity] | None = None,
        render_fn: RenderFn | None = None,
    ) -> None:
        self.entities = {(e.entity_type, e.entity_id): e for e in entities or []}
        self.revisions = {
            (e.entity_type, e.revision_id): e for e in entities or [] if e.revision_id
        }
        self.render_fn = render_fn
        self.rendered: list[tuple[str, str, str]] = []

    def load(self, *, entity_type: str, entity_id: str) -> ContentEntity | None:
        return self.entities.get((entity_type, entity_id))

    def load_revision(
        self,
        *,
        entity_type: str,
        revision_id: str,
    ) -> ContentEntity | None:
        return self.revisions.get((entity_type, revision_id))

    def render(
        self,
        entity: ContentEntity,
        *,
        view_mode: str,
        langcode: str,
        render_context: RenderContext,
    ) -> Any:
        self.rendered.append((entity.entity_id, view_mode, langcode))
        if self.render_fn is not None:
            return self.render_fn(entity, render_context)
        return {"#entity": entity.entity_id, "#view_mode": view_mode}


def make_node(entity_id: str, **kwargs: Any) -> ContentEntity:
    return ContentEntity(
        entity_type="node",
        entity_id=entity_id,
        canonical_url=f"/node/{entity_id}",
        **kwargs,
    )


@pytest.fixture
def text_items() -> list[TextItem]:
    return [
        TextItem(value=f"<p>Chapter {n}</p>", format="basic_html", langcode="en")
        for n in range(1, 6)
    ]


@pytest.fixture
def nodes() -> list[ContentEntity]:
    return [make_node(str(n), revision_id=str(n * 10), langcode="en") for n in range(1, 4)]


@pytest.fixture
def node_references(nodes) -> list[EntityReference]:
    return [
        EntityReference(
            target_type=node.entity_type,
            target_id=node.entity_id,
            target_revision_id=node.revision_id,
        )
        for node in nodes
    ]


@pytest.fixture
def entity_repository(nodes) -> InMemoryEntityRepository:
    return InMemoryEntityRepository(nodes)


@pytest.fixture
def field_context() -> FieldContext:
    return FieldContext(
        host_entity_type="node",
        host_bundle="book",
        host_entity_id="100",
        field_name="field_chapters",
        langcode="en",
    )


@pytest.fixture
def url_builder() -> QueryUrlBuilder:
    return QueryUrlBuilder("/node/1", {"page": "2", "sort": "asc"})


@pytest.fixture
def node_factory() -> Callable[..., ContentEntity]:
    return make_node


@pytest.fixture
def repository_factory() -> type[InMemoryEntityRepository]:
    return InMemoryEntityRepository
