from sqlalchemy import Column, Integer, String
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class Color(Base, TimestampMixin):
    __tablename__ = "colors"

    id = Column(Integer, primary_key=True)
    name_en = Column(String(100), nullable=False, unique=True, index=True)  # English canonical, translated at render time

    def __repr__(self):
        return f"<Color id={self.id} name_en={self.name_en}>"
