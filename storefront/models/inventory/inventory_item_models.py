from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, Enum as SAEnum, Index
from sqlalchemy.orm import relationship
from storefront.core.db import Base
from storefront.models.base.mixins import TimestampMixin
from storefront.models.enums.inventory_status import InventoryStatus


class InventoryItem(Base, TimestampMixin):
    """One physical pair. Quantity is expressed as row count, never as a column."""

    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True)
    model_id = Column(Integer, ForeignKey("models.id", ondelete="RESTRICT"), nullable=False, index=True)
    color_id = Column(Integer, ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False, index=True)
    size_id = Column(Integer, ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=True, index=True)
    location_id = Column(Integer, ForeignKey("locations.id", ondelete="RESTRICT"), nullable=False, index=True)

    # legacy text column, kept in sync with sizes.label
    size = Column(String(30), nullable=False)

    price_mxn = Column(Numeric(10, 2), nullable=False)
    status = Column(
        SAEnum(
            InventoryStatus,
            name="inventory_status",
            native_enum=False,
            length=20,
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=InventoryStatus.AVAILABLE,
        index=True,
    )

    customer_name = Column(String(150), nullable=True)
    customer_whatsapp = Column(String(50), nullable=True)
    notes = Column(String, nullable=True)

    shoe_model = relationship("ShoeModel", lazy="joined")
    color = relationship("Color", lazy="joined")
    size_option = relationship("Size", lazy="joined")
    location = relationship("Location", lazy="joined")

    __table_args__ = (
        Index("ix_inventory_items_status_location", "status", "location_id"),
        Index("ix_inventory_items_status_updated", "status", "updated_at"),
    )

    def __repr__(self):
        return f"<InventoryItem id={self.id} status={self.status} size={self.size}>"
