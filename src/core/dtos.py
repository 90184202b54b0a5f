from datetime import UTC, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.enums import ItemKind, PartKind


class DTOBase(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        alias_generator=lambda s: "".join(
            ["_" + c.lower() if c.isupper() else c for c in s]
        ).lstrip("_"),
        str_strip_whitespace=True,
    )


class SessionContext(DTOBase):
    """Acting user and timestamp stamped onto every write."""

    user_id: int
    at: datetime

    @classmethod
    def now(cls, user_id: int) -> "SessionContext":
        return cls(user_id=user_id, at=datetime.now(UTC))


class PartBase(DTOBase):
    id: int = 0
    name: str
    price: float
    stock: int
    min: int
    max: int

    # Identity is the id alone; association multisets count parts by it.
    def __eq__(self, other):
        if isinstance(other, PartBase):
            return self.id == other.id
        return NotImplemented

    def __hash__(self):
        return hash(self.id)


class InHousePartDTO(PartBase):
    kind: Literal["in_house"] = PartKind.IN_HOUSE.value
    machine_id: int

    # Zero reads back as "no machine id", so it can never be stored.
    @field_validator("machine_id")
    @classmethod
    def _nonzero_machine_id(cls, v: int) -> int:
        if v == 0:
            raise ValueError("machine_id must be non-zero")
        return v


class OutsourcedPartDTO(PartBase):
    kind: Literal["outsourced"] = PartKind.OUTSOURCED.value
    company_name: str = Field(min_length=1)


PartDTO = Annotated[InHousePartDTO | OutsourcedPartDTO, Field(discriminator="kind")]


class ProductDTO(DTOBase):
    id: int = 0
    name: str
    price: float
    stock: int
    min: int
    max: int
    associated_parts: list[PartDTO] = Field(default_factory=list)

    @field_validator("associated_parts", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v


class ReportItemDTO(DTOBase):
    id: int
    name: str
    kind: ItemKind
    stock: int
    last_updated: datetime | None = None
