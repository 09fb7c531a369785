from sqlalchemy import String, Boolean, Integer, Float, Text
from sqlalchemy.orm import Mapped, mapped_column
from app.db import Base
from app.models.common import IdMixin, TSMMixin

# ── Delivery zones ───────────────────────────────────────────────────────────
# Money columns hold minor units (grosz / cents). Coordinates are a JSON text
# array of [latitude, longitude] pairs, implicitly closed.
class DeliveryZone(Base, IdMixin, TSMMixin):
    __tablename__ = "delivery_zone"
    name: Mapped[str] = mapped_column(String(120), default="Unnamed Zone")
    coordinates: Mapped[str] = mapped_column(Text, default="[]")
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    delivery_price: Mapped[int] = mapped_column(Integer, default=0)
    min_order_value: Mapped[int] = mapped_column(Integer, default=0)
    free_delivery_from: Mapped[int | None] = mapped_column(Integer)
    courier_rate: Mapped[int | None] = mapped_column(Integer)
    area: Mapped[float] = mapped_column(Float, default=0.0)   # km²
    color: Mapped[str] = mapped_column(String(16), default="#3b82f6")
    position: Mapped[int] = mapped_column(Integer, default=0)  # resolution order, first match wins
