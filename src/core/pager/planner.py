"""
Index resolution and navigation link planning.
"""

import math
import re
import sys
from typing import Any

from core.models.config import PagerConfig
from core.models.errors import IndexOutOfRangeError
from core.models.pagination import NavLink, PagerPlan
from core.utils.constants import (
    LINK_FIRST,
    LINK_LAST,
    LINK_NEXT,
    LINK_PAGE,
    LINK_PREVIOUS,
)

_LEADING_INTEGER = re.compile(r"^\s*([+-]?)(\d+)")

# Longer digit runs saturate instead of being converted.
_MAX_INDEX_DIGITS = 18


class PaginationPlanner:
    """
    Pure planner for single-item pagination.

    Given the number of selectable items, the raw page index taken from the
    request and the effective configuration, it validates the index and
    computes the ordered navigation links.

    Typical usage:
    1. Resolve the raw index from the request
    2. Reject indexes outside the item range
    3. Build First / Previous / numbered / Next / Last links

    The planner keeps no state between calls and never performs I/O.
    Labels are returned untranslated; translation and hrefs are added
    when the view is assembled.
    """

    @staticmethod
    def resolve_index(raw_index: Any) -> int:
        """
        Parse a raw index value into an integer.

        Absent, empty, boolean or unparsable input resolves to 0. Strings are
        read up to their leading (optionally signed) integer, so ``" 3 "`` and
        ``"3abc"`` both give 3. Digit runs too long to convert saturate to
        ``sys.maxsize`` (or its negative). The result is NOT range-checked.

        Example:
            resolve_index("2") → 2
            resolve_index(None) → 0
            resolve_index("abc") → 0
            resolve_index("-1") → -1
        """
        if raw_index is None or isinstance(raw_index, bool):
            return 0

        if isinstance(raw_index, int):
            return raw_index

        if isinstance(raw_index, float):
            return int(raw_index) if math.isfinite(raw_index) else 0

        if isinstance(raw_index, bytes):
            raw_index = raw_index.decode("utf-8", errors="ignore")

        if not isinstance(raw_index, str):
            return 0

        match = _LEADING_INTEGER.match(raw_index)
        if not match:
            return 0

        sign, digits = match.groups()
        if len(digits.lstrip("0")) > _MAX_INDEX_DIGITS:
            return -sys.maxsize if sign == "-" else sys.maxsize

        return int(sign + digits)

    @classmethod
    def plan(
        cls,
        total_items: int,
        raw_index: Any,
        config: PagerConfig,
    ) -> PagerPlan:
        """
        Validate the requested index and compute the navigation links.

        Args:
            total_items: Number of selectable items or chunks
            raw_index: Untyped index value from the request
            config: Effective pager configuration

        Returns:
            PagerPlan with the resolved index and ordered links. With fewer
            than two items no links are produced and the raw index is ignored.

        Raises:
            ValueError: If total_items is negative
            IndexOutOfRangeError: If the index is outside [0, total_items - 1]
        """
        if total_items < 0:
            raise ValueError("total_items must be zero or a positive integer")

        if total_items < 2:
            return PagerPlan(
                total_items=total_items,
                resolved_index=0 if total_items else None,
            )

        index = cls.resolve_index(raw_index)
        if not 0 <= index < total_items:
            raise IndexOutOfRangeError(
                message="Page not found",
                details={
                    "index": index,
                    "total_items": total_items,
                    "parameter": config.index_parameter_name,
                },
            )

        return PagerPlan(
            total_items=total_items,
            resolved_index=index,
            links=cls.build_links(total_items, index, config),
        )

    @staticmethod
    def page_window(total_items: int, current_index: int, max_pages: int) -> range:
        """
        Indexes that get a numbered link.

        A cap of 0, or one at least as large as the item count, lists every
        page. Otherwise the window is centred on the current page and shifted
        to stay inside the item range, so the current page is always listed.

        Example:
            page_window(10, 0, 5) → range(0, 5)
            page_window(10, 9, 5) → range(5, 10)
            page_window(10, 5, 5) → range(3, 8)
        """
        if max_pages <= 0 or max_pages >= total_items:
            return range(total_items)

        start = current_index - max_pages // 2
        start = max(0, min(start, total_items - max_pages))
        return range(start, start + max_pages)

    @classmethod
    def build_links(
        cls,
        total_items: int,
        current_index: int,
        config: PagerConfig,
    ) -> list[NavLink]:
        """Build the ordered link list for an already validated index."""
        last_index = total_items - 1
        links: list[NavLink] = []

        if config.show_first_last and current_index > 0:
            links.append(
                NavLink(
                    kind=LINK_FIRST,
                    label="First",
                    target_index=0,
                    accessibility_label="Go to the first page",
                )
            )

        if config.show_prev_next and current_index > 0:
            links.append(
                NavLink(
                    kind=LINK_PREVIOUS,
                    label="Previous",
                    target_index=max(current_index - 1, 0),
                    accessibility_label="Go to the previous page",
                )
            )

        if config.show_numbered:
            for index in cls.page_window(
                total_items, current_index, config.max_pages_to_show
            ):
                links.append(
                    NavLink(
                        kind=LINK_PAGE,
                        label=index + 1,
                        target_index=index,
                        is_current=index == current_index,
                    )
                )

        if config.show_prev_next and current_index < last_index:
            links.append(
                NavLink(
                    kind=LINK_NEXT,
                    label="Next",
                    target_index=min(current_index + 1, last_index),
                    accessibility_label="Go to the next page",
                )
            )

        if config.show_first_last and current_index < last_index:
            links.append(
                NavLink(
                    kind=LINK_LAST,
                    label="Last",
                    target_index=last_index,
                    accessibility_label="Go to the last page",
                )
            )

        return links
