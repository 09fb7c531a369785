# test_api.py
from conftest import INSIDE, OUTSIDE, SQUARE, jprint

BIG = [[52.0, 20.5], [52.0, 21.5], [52.5, 21.5], [52.5, 20.5]]


def _zone(client, **kw):
    body = {"name": "Centre", "coordinates": SQUARE, "delivery_price": 700,
            "min_order_value": 4000, "free_delivery_from": 12000}
    body.update(kw)
    return jprint("POST /delivery-zones", client.post("/delivery-zones/", json=body))


def _simple(dish, **kw):
    return {"kind": "simple", "dish": dish.model_dump(), **kw}


def test_healthz_and_request_id(client):
    r = client.get("/healthz", headers={"X-Request-ID": "abc"})
    assert jprint("GET /healthz", r) == {"ok": True}
    assert r.headers["X-Request-ID"] == "abc"


def test_zone_crud(client):
    z = _zone(client)
    assert z["area"] > 0
    assert z["delivery_price"] == 700

    listed = jprint("GET /delivery-zones", client.get("/delivery-zones/"))
    assert [x["id"] for x in listed] == [z["id"]]

    r = client.patch(f"/delivery-zones/{z['id']}", json={"is_active": False, "free_delivery_from": None})
    upd = jprint("PATCH /delivery-zones", r)
    assert upd["is_active"] is False
    assert upd["free_delivery_from"] is None
    assert upd["area"] == z["area"]

    r = client.patch(f"/delivery-zones/{z['id']}", json={"coordinates": BIG})
    assert jprint("PATCH coordinates", r)["area"] > z["area"]

    jprint("DELETE /delivery-zones", client.delete(f"/delivery-zones/{z['id']}"))
    assert client.get(f"/delivery-zones/{z['id']}").status_code == 404


def test_zone_validation(client):
    r = client.post("/delivery-zones/", json={"name": "", "coordinates": SQUARE, "delivery_price": 700})
    assert r.status_code == 422
    r = client.post("/delivery-zones/", json={"name": "X", "coordinates": SQUARE, "delivery_price": -1})
    assert r.status_code == 422


def test_resolve_uses_major_units_and_position(client):
    _zone(client, name="Wide", coordinates=BIG, delivery_price=1500, free_delivery_from=None, position=1)
    _zone(client, position=0)
    out = jprint("resolve", client.post("/delivery-zones/resolve",
                                        json={"coordinate": INSIDE, "items_subtotal": 55}))
    assert out["zone"]["name"] == "Centre"
    assert out["delivery_fee"] == 7.0
    assert out["below_minimum"] is False

    out = jprint("resolve outside", client.post("/delivery-zones/resolve",
                                                json={"coordinate": OUTSIDE, "items_subtotal": 55}))
    assert out["zone"] is None and out["delivery_fee"] == 0.0

    out = jprint("resolve no coordinate", client.post("/delivery-zones/resolve", json={"items_subtotal": 5}))
    assert out["zone"] is None


def test_quote_item(client, margherita):
    item = _simple(margherita, selected_size={"name": "30cm", "price": 36.0},
                   paid_addons=[{"id": "a-ham", "name": "Ham", "price": 3.0, "quantity": 2}], quantity=2)
    out = jprint("quote item", client.post("/quote/item", json={"item": item}))
    assert out == {"name": "Margherita 30cm", "quantity": 2, "unit_price": 42.0, "line_total": 84.0}


def test_quote_item_without_size_is_rejected(client, margherita):
    r = client.post("/quote/item", json={"item": _simple(margherita)})
    assert r.status_code == 422
    assert "size" in r.json()["detail"]


def test_quote_order_with_stored_zone(client, soup):
    _zone(client)
    order = {"type": "DELIVERY", "coordinate": INSIDE, "items": [_simple(soup, quantity=4)]}
    out = jprint("quote order", client.post("/quote/order", json=order))
    assert out["items_subtotal"] == 50.0
    assert out["delivery_fee"] == 7.0
    assert out["total"] == 57.0
    assert out["zone_name"] == "Centre"

    order["coordinate"] = OUTSIDE
    assert jprint("quote outside", client.post("/quote/order", json=order))["total"] == 50.0

    order["type"] = "TAKEAWAY"
    order["coordinate"] = INSIDE
    assert jprint("quote takeaway", client.post("/quote/order", json=order))["delivery_fee"] == 0.0


def test_half_half_requires_configured_rule(client, margherita, pepperoni):
    hh = {"kind": "half_half", "selected_size": {"name": "40cm", "price": 40.0},
          "left_half": {"dish": margherita.model_dump()},
          "right_half": {"dish": pepperoni.model_dump()}}
    assert client.post("/quote/item", json={"item": hh}).status_code == 422

    rules = [{"category_id": "c-pizza", "available": True, "dish_ids": ["d-marg", "d-pep"]}]
    jprint("PUT /half-half", client.put("/half-half/", json=rules))
    assert jprint("GET /half-half", client.get("/half-half/"))[0]["dish_ids"] == ["d-marg", "d-pep"]

    out = jprint("quote half-half", client.post("/quote/item", json={"item": hh}))
    assert out["unit_price"] == 40.0


def test_half_half_missing_side(client, margherita):
    hh = {"kind": "half_half", "selected_size": {"name": "40cm", "price": 40.0},
          "left_half": {"dish": margherita.model_dump()}}
    r = client.post("/quote/item", json={"item": hh})
    assert r.status_code == 422


def test_order_payload(client, soup):
    order = {"type": "DINE_IN", "items": [_simple(soup, quantity=0, notes="no croutons")]}
    out = jprint("payload", client.post("/quote/order/payload", json=order))
    assert out["total"] == 12.5
    assert out["items"][0]["quantity"] == 1
    assert out["items"][0]["price"] == 12.5
    assert out["items"][0]["notes"] == "no croutons"


def test_add_line_merges(client, margherita):
    size = {"name": "30cm", "price": 36.0}
    a = _simple(margherita, selected_size=size, paid_addons=[{"id": "x"}, {"id": "y"}])
    b = _simple(margherita, selected_size=size, paid_addons=[{"id": "y"}, {"id": "x"}])
    out = jprint("add line", client.post("/quote/lines/add", json={"lines": [a], "item": b}))
    assert len(out["lines"]) == 1
    assert out["lines"][0]["quantity"] == 2


def test_zone_vertex_must_be_a_pair(client):
    bad = [[52.20], [52.20, 21.05], [52.26, 21.05]]
    r = client.post("/delivery-zones/", json={"name": "Bad", "coordinates": bad, "delivery_price": 700})
    assert r.status_code == 422
    z = _zone(client)
    r = client.patch(f"/delivery-zones/{z['id']}", json={"coordinates": bad})
    assert r.status_code == 422
    assert jprint("GET zone", client.get(f"/delivery-zones/{z['id']}"))["coordinates"] == SQUARE


def test_quote_rejects_addon_outside_dish_groups(client, margherita, soup):
    item = _simple(soup, paid_addons=[{"id": "a-ham", "name": "Ham", "price": 3.0}])
    r = client.post("/quote/item", json={"item": item})
    assert r.status_code == 422
    assert "not offered" in r.json()["detail"]

    order = {"type": "TAKEAWAY", "items": [item]}
    assert client.post("/quote/order", json=order).status_code == 422


def test_quote_enforces_group_maximum(client, margherita):
    extras = margherita.addon_groups[0].model_copy(update={"max_select": 1})
    dish = margherita.model_copy(update={"addon_groups": [extras]})
    item = _simple(dish, selected_size={"name": "30cm", "price": 36.0},
                   paid_addons=[{"id": "a-ham", "price": 3.0, "quantity": 2}])
    r = client.post("/quote/item", json={"item": item})
    assert r.status_code == 422
    assert "at most 1" in r.json()["detail"]
