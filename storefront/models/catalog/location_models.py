from sqlalchemy import Column, Integer, String
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class Location(Base, TimestampMixin):
    """Pickup/delivery city where a pair is physically stocked."""

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True)
    slug = Column(String(50), nullable=False, unique=True, index=True)
    name = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Location id={self.id} slug={self.slug}>"
