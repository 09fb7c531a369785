from fastapi import APIRouter, Depends
from typing import List

from app.deps import get_half_half
from app.services.halfhalf import HalfHalfRegistry, HalfHalfRule

router = APIRouter(prefix="/half-half", tags=["half-half"])

@router.get("/", response_model=List[HalfHalfRule])
def get_rules(registry: HalfHalfRegistry = Depends(get_half_half)):
    return registry.get()

@router.put("/", response_model=List[HalfHalfRule])
def put_rules(body: List[HalfHalfRule], registry: HalfHalfRegistry = Depends(get_half_half)):
    registry.update(body)
    return registry.get()
