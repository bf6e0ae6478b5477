from sqlalchemy import Column, Integer, String
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class Feedback(Base, TimestampMixin):
    """Free-text comment left by a shopper on the public page."""

    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True)
    message = Column(String, nullable=False)
    lang = Column(String(2), nullable=False, default="es")
    context = Column(String(255), nullable=True)
    user_agent = Column(String(512), nullable=True)

    def __repr__(self):
        return f"<Feedback id={self.id} lang={self.lang}>"
