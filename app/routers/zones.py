# app/routers/zones.py
import json
import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from app.config import settings
from app.db import get_db
from app.deps import load_zones, zone_rows
from app.models.core import DeliveryZone as DeliveryZoneRow
from app.schemas.common import Msg
from app.schemas.zones import (
    DeliveryZone, DeliveryZoneIn, DeliveryZoneOut, DeliveryZonePatch, ResolveIn, ResolveOut,
)
from app.services.geometry import polygon_area, polygon_centroid_latitude
from app.services.money import money
from app.services.zones import compute_delivery_fee, meets_minimum_order, resolve_zone

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/delivery-zones", tags=["delivery-zones"])


def _area(coords: list) -> float:
    ref = settings.MAP_CENTER_LAT
    if ref is None:
        ref = polygon_centroid_latitude(coords)
    return polygon_area(coords, ref)

def _out(z: DeliveryZoneRow) -> DeliveryZoneOut:
    return DeliveryZoneOut(
        id=z.id, name=z.name, coordinates=json.loads(z.coordinates or "[]"),
        is_active=z.is_active, delivery_price=z.delivery_price, min_order_value=z.min_order_value,
        free_delivery_from=z.free_delivery_from, courier_rate=z.courier_rate,
        color=z.color, position=z.position, area=z.area,
    )

def _get_or_404(db: Session, zone_id: str) -> DeliveryZoneRow:
    z = db.get(DeliveryZoneRow, zone_id)
    if not z:
        raise HTTPException(404, detail="delivery zone not found")
    return z


@router.get("/", response_model=List[DeliveryZoneOut])
def list_zones(db: Session = Depends(get_db)):
    return [_out(z) for z in zone_rows(db)]

@router.post("/", response_model=DeliveryZoneOut, status_code=201)
def create_zone(body: DeliveryZoneIn, db: Session = Depends(get_db)):
    data = body.model_dump()
    if len(body.coordinates) < 3:
        # stored anyway; the resolver never matches it
        logger.warning("delivery zone %r saved with %d vertices", body.name, len(body.coordinates))
    data["coordinates"] = json.dumps(body.coordinates)
    z = DeliveryZoneRow(**data, area=_area(body.coordinates))
    db.add(z); db.commit(); db.refresh(z)
    return _out(z)

@router.post("/resolve", response_model=ResolveOut)
def resolve(body: ResolveIn, zones: List[DeliveryZone] = Depends(load_zones)):
    zone = resolve_zone(body.coordinate, zones)
    return ResolveOut(
        zone=zone,
        delivery_fee=money(compute_delivery_fee(body.items_subtotal, zone)),
        below_minimum=not meets_minimum_order(body.items_subtotal, zone),
    )

@router.get("/{zone_id}", response_model=DeliveryZoneOut)
def get_zone(zone_id: str, db: Session = Depends(get_db)):
    return _out(_get_or_404(db, zone_id))

@router.patch("/{zone_id}", response_model=DeliveryZoneOut)
def update_zone(zone_id: str, body: DeliveryZonePatch, db: Session = Depends(get_db)):
    z = _get_or_404(db, zone_id)
    for k, v in body.model_dump(exclude_unset=True).items():
        if v is None and k not in ("free_delivery_from", "courier_rate"):
            continue
        if k == "coordinates":
            z.coordinates = json.dumps(v)
            z.area = _area(v)
        else:
            setattr(z, k, v)
    db.commit(); db.refresh(z)
    return _out(z)

@router.delete("/{zone_id}", response_model=Msg)
def delete_zone(zone_id: str, db: Session = Depends(get_db)):
    z = _get_or_404(db, zone_id)
    db.delete(z); db.commit()
    return Msg(message="delivery zone deleted")
