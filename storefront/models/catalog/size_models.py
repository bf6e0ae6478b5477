from sqlalchemy import Column, Integer, String
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class Size(Base, TimestampMixin):
    __tablename__ = "sizes"

    id = Column(Integer, primary_key=True)
    label = Column(String(30), nullable=False, unique=True)  # "C8", "J1", "M10-W12"
    sort_order = Column(Integer, nullable=False, default=0, index=True)

    def __repr__(self):
        return f"<Size id={self.id} label={self.label}>"
