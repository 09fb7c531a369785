from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import List
from app.db import get_db
from app.models.core import DeliveryZone as DeliveryZoneRow
from app.schemas.zones import DeliveryZone
from app.services.halfhalf import HalfHalfRegistry
from app.services.zones import zone_from_record

def get_half_half(request: Request) -> HalfHalfRegistry:
    return request.app.state.half_half

def zone_rows(db: Session):
    # resolution order: first match wins
    return (db.query(DeliveryZoneRow)
              .order_by(DeliveryZoneRow.position.asc(), DeliveryZoneRow.created_at.asc())
              .all())

def load_zones(db: Session = Depends(get_db)) -> List[DeliveryZone]:
    return [zone_from_record(r) for r in zone_rows(db)]
