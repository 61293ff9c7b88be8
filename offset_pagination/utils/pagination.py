import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from offset_pagination.utils.constraints import Limit, Offset, QueryConstraint
from offset_pagination.utils.exceptions import InvalidPaginationError
from offset_pagination.utils.values import BoundValidator, parse_int

logger = logging.getLogger(__name__)

# largest offset a signed 64-bit SQL parameter can carry
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class OffsetLimitPaginator:
    """Validated offset/limit pair.

    Build the base state once with ``create`` and derive a state per request
    with ``with_input``. Derived states share the base state's limit validator.

    An unacceptable limit silently falls back to the current one, while a
    malformed offset is rejected with ``InvalidPaginationError``.
    """

    limit_value: BoundValidator = field(repr=False, compare=False)
    limit: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise InvalidPaginationError("Offset must be non-negative")
        if not self.limit_value.accepts(self.limit):
            raise InvalidPaginationError("Limit must be one of the allowed limits")

    @classmethod
    def create(cls, default_limit: int, limit_value: BoundValidator) -> "OffsetLimitPaginator":
        if isinstance(default_limit, bool) or not isinstance(default_limit, int) or default_limit < 1:
            raise InvalidPaginationError("Default limit must be a positive integer")
        if not limit_value.accepts(default_limit):
            raise InvalidPaginationError("Default limit must be one of the allowed limits")
        return cls(limit_value=limit_value, limit=default_limit)

    def with_input(self, raw: Any) -> "OffsetLimitPaginator":
        """Return a new state with ``raw`` applied.

        ``raw`` is expected to look like ``{"offset": 20, "limit": "10"}``.
        Anything that is not a mapping leaves the state as it is.
        """
        if not isinstance(raw, Mapping):
            return replace(self)

        limit = self.limit
        raw_limit = raw.get("limit")
        if raw_limit is not None:
            if self.limit_value.accepts(raw_limit):
                limit = self.limit_value.convert(raw_limit)
            else:
                logger.debug(f"Limit rejected, keeping current. limit={raw_limit!r} current={self.limit}")

        offset = self.offset
        raw_offset = raw.get("offset")
        if raw_offset is not None:
            parsed = parse_int(raw_offset)
            if parsed is None:
                raise InvalidPaginationError("Offset must be a numeric value")
            if parsed < 0:
                raise InvalidPaginationError("Offset must be non-negative")
            offset = min(parsed, MAX_OFFSET)

        return replace(self, limit=limit, offset=offset)

    def query_constraints(self) -> list[QueryConstraint]:
        constraints: list[QueryConstraint] = [Limit(self.limit)]
        # offset 0 is the same as no offset
        if self.offset > 0:
            constraints.append(Offset(self.offset))
        return constraints

    def as_dict(self) -> dict[str, int]:
        return {"offset": self.offset, "limit": self.limit}
