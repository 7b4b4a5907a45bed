"""Domain errors raised by services and mapped to HTTP responses in main."""


class NotFoundError(Exception):
    """A requested entity id has no matching row."""

    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class BusinessRuleError(Exception):
    """Input is well formed but violates a cross-entity rule."""


class VehicleInUseError(BusinessRuleError):
    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__("Cannot delete vehicle associated with transports")


class HydrationError(RuntimeError):
    """A joined row is missing the columns required to build its root entity."""
