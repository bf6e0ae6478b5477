from sqlalchemy import Column, Integer, String
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class ShoeModel(Base, TimestampMixin):
    __tablename__ = "models"

    id = Column(Integer, primary_key=True)
    name = Column(String(150), nullable=False, unique=True, index=True)

    def __repr__(self):
        return f"<ShoeModel id={self.id} name={self.name}>"
