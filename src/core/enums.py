from enum import Enum


class PartKind(Enum):
    IN_HOUSE = "in_house"
    OUTSOURCED = "outsourced"
    INDETERMINATE = "indeterminate"


class ItemKind(Enum):
    PART = "Part"
    PRODUCT = "Product"
