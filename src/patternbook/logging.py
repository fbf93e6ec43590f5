from enum import Enum


class StrEnum(str, Enum):
    pass


class OperationStep(StrEnum):
    VISIT_NODE = "VISIT_NODE"
    LINK_NODE = "LINK_NODE"
    UNLINK_NODE = "UNLINK_NODE"
    SHIFT_ELEMENT = "SHIFT_ELEMENT"


VERBOSE = 5
