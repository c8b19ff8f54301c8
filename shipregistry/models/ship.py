from sqlalchemy import Column, Integer, String, Boolean, DateTime, Float, Enum as SQLEnum

from shipregistry.core.database import Base
from shipregistry.models.enums import ShipType

class Ship(Base):
    __tablename__ = "ship"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    name = Column(String(50), nullable=False)        # e.g. "Orion III"
    planet = Column(String(50), nullable=False)      # e.g. "Mars"
    ship_type = Column(SQLEnum(ShipType, name="shiptype"), nullable=True)

    # Naive UTC; only the year feeds the rating
    prod_date = Column(DateTime, nullable=False, index=True)
    is_used = Column(Boolean, nullable=False, default=False)

    speed = Column(Float, nullable=False)
    crew_size = Column(Integer, nullable=False)

    # Derived from speed, prod_date and is_used on every write
    rating = Column(Float, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Ship id={self.id} name={self.name!r} planet={self.planet!r}>"
