from sqlalchemy import Column, Integer, String, Index
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin


class AdminActivity(Base, TimestampMixin):
    """Immutable audit log. APPEND-ONLY. Never updated, never deleted."""

    __tablename__ = "admin_activity"

    id = Column(Integer, primary_key=True)
    code = Column(String(50), nullable=False, index=True)
    message = Column(String, nullable=False)

    __table_args__ = (Index("ix_admin_activity_code_created", "code", "created_at"),)

    def __repr__(self):
        return f"<AdminActivity id={self.id} code={self.code}>"
