# conftest.py
import os

# in-memory database shared by every session in the test process
os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("HALF_HALF_RULES", "[]")

import pytest
from fastapi.testclient import TestClient

from app.db import Base, engine
from app.main import app
from app.schemas.menu import AddonGroup, AddonItem, Dish, Ingredient, Size
from app.schemas.zones import DeliveryZone
from app.services.halfhalf import HalfHalfRegistry

# Square around central Warsaw, [lat, lng]
SQUARE = [[52.20, 20.95], [52.20, 21.05], [52.26, 21.05], [52.26, 20.95]]
INSIDE = {"latitude": 52.23, "longitude": 21.00}
OUTSIDE = {"latitude": 50.06, "longitude": 19.94}


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.state.half_half = HalfHalfRegistry()
    with TestClient(app) as c:
        yield c


EXTRAS = AddonGroup(id="g-extra", name="Extras", items=[
    AddonItem(id="a-ham", group_id="g-extra", name="Ham", price=3.0),
    AddonItem(id="a-olive", group_id="g-extra", name="Olives", price=2.0),
])


@pytest.fixture
def margherita():
    return Dish(
        id="d-marg", name="Margherita", category_id="c-pizza", base_price=20.0,
        sizes=[Size(id="s-30", name="30cm", price=36.0), Size(id="s-40", name="40cm", price=40.0)],
        ingredients=[Ingredient(id="i-cheese", name="Cheese"), Ingredient(id="i-basil", name="Basil")],
        addon_groups=[EXTRAS],
    )


@pytest.fixture
def pepperoni():
    return Dish(
        id="d-pep", name="Pepperoni", category_id="c-pizza", base_price=24.0,
        sizes=[Size(id="s-30", name="30cm", price=38.0), Size(id="s-40", name="40cm", price=44.0)],
        addon_groups=[EXTRAS],
    )


@pytest.fixture
def soup():
    return Dish(id="d-soup", name="Tomato soup", category_id="c-soup", base_price=12.5)


@pytest.fixture
def square_zone():
    return DeliveryZone(id="z-1", name="Centre", coordinates=SQUARE,
                        delivery_price=7.0, min_order_value=40.0, free_delivery_from=120.0)


def jprint(step, r):
    """Assert a 2xx response and return its JSON body."""
    assert 200 <= r.status_code < 300, f"{step} -> {r.status_code}: {r.text}"
    return r.json()
