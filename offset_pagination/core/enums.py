from enum import Enum


class ConstraintKind(str, Enum):
    LIMIT = "limit"
    OFFSET = "offset"
