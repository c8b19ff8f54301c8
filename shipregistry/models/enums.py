import enum

# --- SHIP TYPES ---
class ShipType(str, enum.Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"

# --- LISTING ORDER ---
class ShipOrder(str, enum.Enum):
    ID = "ID"
    NAME = "NAME"
    PLANET = "PLANET"
    DATE = "DATE"
    SPEED = "SPEED"
    CREW_SIZE = "CREW_SIZE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        """Ship attribute the listing is sorted by."""
        return _ORDER_FIELDS[self]

_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.NAME: "name",
    ShipOrder.PLANET: "planet",
    ShipOrder.DATE: "prod_date",
    ShipOrder.SPEED: "speed",
    ShipOrder.CREW_SIZE: "crew_size",
    ShipOrder.RATING: "rating",
}
