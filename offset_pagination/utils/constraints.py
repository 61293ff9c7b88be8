from dataclasses import dataclass
from typing import ClassVar

from offset_pagination.core.enums import ConstraintKind


@dataclass(frozen=True)
class Limit:
    kind: ClassVar[ConstraintKind] = ConstraintKind.LIMIT
    value: int


@dataclass(frozen=True)
class Offset:
    kind: ClassVar[ConstraintKind] = ConstraintKind.OFFSET
    value: int


QueryConstraint = Limit | Offset
