import logging
from typing import Any, Mapping

from fastapi import Request

from offset_pagination.core.config import Settings
from offset_pagination.utils.pagination import OffsetLimitPaginator
from offset_pagination.utils.values import Boundary, EnumValue, IntValue, RangeValue

logger = logging.getLogger(__name__)


def build_paginator(config: Settings) -> OffsetLimitPaginator:
    allowed = config.allowed_limits
    if allowed:
        limit_value = EnumValue.of(IntValue(), *allowed)
    else:
        limit_value = RangeValue(
            IntValue(),
            Boundary.including(config.PAGINATION_MIN_LIMIT),
            Boundary.including(config.PAGINATION_MAX_LIMIT),
        )
    paginator = OffsetLimitPaginator.create(config.PAGINATION_DEFAULT_LIMIT, limit_value)
    logger.info(f"Paginator configured. default_limit={paginator.limit} limits={limit_value!r}")
    return paginator


def read_page_input(query_params: Mapping[str, Any], key: str = "page") -> dict[str, Any] | None:
    """Collect ``page[offset]=..&page[limit]=..`` style parameters into a dict.

    Returns None when the query string carries no ``page[...]`` parameter.
    """
    prefix = f"{key}["
    page: dict[str, Any] = {}
    for name, value in query_params.items():
        if name.startswith(prefix) and name.endswith("]"):
            page[name[len(prefix):-1]] = value
    return page or None


def get_paginator(request: Request) -> OffsetLimitPaginator:
    base: OffsetLimitPaginator = request.app.state.paginator
    raw = read_page_input(request.query_params, request.app.state.pagination_query_key)
    return base.with_input(raw)
