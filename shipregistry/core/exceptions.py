class ShipRegistryError(Exception):
    """Base class for errors raised by the ship service."""


class ShipValidationError(ShipRegistryError):
    """Ship fields are missing or out of range, or the id is not a positive integer."""

    def __init__(self, message: str = "Invalid ship"):
        super().__init__(message)
        self.message = message


class ShipNotFoundError(ShipRegistryError):
    """No ship is stored under the requested id."""

    def __init__(self, ship_id: int):
        super().__init__(f"Ship {ship_id} not found")
        self.ship_id = ship_id
