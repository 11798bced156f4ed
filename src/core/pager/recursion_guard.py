"""Per-render protection against self-referencing entity rendering."""

from collections.abc import Iterator
from contextlib import contextmanager

from aws_lambda_powertools import Logger

from core.models.errors import RecursionLimitExceededError
from core.utils.constants import MAX_RENDER_DEPTH

logger = Logger(UTC=True)


class RenderContext:
    """
    Depth counter scoped to one top-level render.

    A new context is created for every top-level render and passed down
    through the entity renderer to nested formatter calls. Depth returns to
    zero once the outermost ``nested`` block exits, and separate contexts
    never share a counter.
    """

    def __init__(self, max_depth: int = MAX_RENDER_DEPTH) -> None:
        self.max_depth = max_depth
        self.depth = 0

    @contextmanager
    def nested(self, render_key: str = "") -> Iterator[int]:
        """
        Enter one nested render level.

        Yields:
            The depth of the entered level (1 for the outermost).

        Raises:
            RecursionLimitExceededError: If entering would exceed max_depth
        """
        if self.depth + 1 > self.max_depth:
            logger.error(
                "Recursive rendering detected",
                extra={"render_key": render_key, "depth": self.depth + 1},
            )
            raise RecursionLimitExceededError(
                message="Recursive rendering detected. Aborting rendering.",
                details={"render_key": render_key, "max_depth": self.max_depth},
            )

        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1
