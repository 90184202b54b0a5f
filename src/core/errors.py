"""Error taxonomy shared by repositories and services.

Nothing here is retried automatically; every failure goes back to the caller.
"""

from __future__ import annotations


class InventoryError(Exception):
    pass


class NotFoundError(InventoryError):
    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class IndeterminateVariantError(InventoryError):
    """Stored part row carries neither a machine id nor a company name."""

    def __init__(self, part_id: int):
        super().__init__(f"Part {part_id} is neither in-house nor outsourced")
        self.part_id = part_id


class PolicyViolationError(InventoryError):
    pass


class InvalidSearchInputError(InventoryError):
    pass


class StorageError(InventoryError):
    pass
