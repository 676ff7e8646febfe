"""Product routes: create / get / patch / delete over the in-memory store.

Invariants:
    - Create echoes the id with 201; duplicate ids are 400 and leave the stored doc alone
    - Missing ids: GET is 404, PATCH reports 0/0, DELETE reports 0 (never errors)
    - PATCH only touches the named fields
"""


async def test_create_then_get_round_trips(client, sample_product):
    res = await client.post("/products", json=sample_product)
    assert res.status_code == 201
    assert res.json() == {"ok": True, "id": "SKU-9001"}

    res = await client.get("/products/SKU-9001")
    assert res.status_code == 200
    assert res.json() == sample_product


async def test_create_duplicate_id_is_400_and_keeps_original(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.post("/products", json={**sample_product, "name": "Impostor", "price": 1})
    assert res.status_code == 400
    assert "duplicate key" in res.json()["error"]

    stored = (await client.get("/products/SKU-9001")).json()
    assert stored["name"] == "Travel Adapter"
    assert stored["price"] == 10.00


async def test_create_without_id_gets_generated_object_id(client, fake_db):
    res = await client.post("/products", json={"name": "No key"})
    assert res.status_code == 201
    generated = res.json()["id"]
    assert isinstance(generated, str) and len(generated) == 24
    assert str(fake_db["products"].docs[0]["_id"]) == generated


async def test_create_rejects_non_object_body(client, fake_db):
    res = await client.post("/products", json=[{"_id": "SKU-1"}])
    assert res.status_code == 400
    assert "error" in res.json()
    assert fake_db["products"].docs == []


async def test_create_rejects_malformed_json(client):
    res = await client.post(
        "/products", content=b"{not json", headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert "error" in res.json()


async def test_get_missing_product_is_404(client):
    res = await client.get("/products/SKU-404")
    assert res.status_code == 404
    assert res.json() == {"error": "Not found"}


async def test_patch_changes_only_named_fields(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.patch("/products/SKU-9001", json={"price": 12.5, "tags": ["travel", "sale"]})
    assert res.status_code == 200
    assert res.json() == {"matched": 1, "modified": 1}

    doc = (await client.get("/products/SKU-9001")).json()
    assert doc["price"] == 12.5
    assert doc["tags"] == ["travel", "sale"]
    unchanged = {k: v for k, v in sample_product.items() if k not in ("price", "tags")}
    assert {k: doc[k] for k in unchanged} == unchanged


async def test_patch_with_same_values_matches_without_modifying(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.patch("/products/SKU-9001", json={"price": 10.00})
    assert res.json() == {"matched": 1, "modified": 0}


async def test_patch_missing_product_reports_zero_counts(client):
    res = await client.patch("/products/SKU-404", json={"price": 1})
    assert res.status_code == 200
    assert res.json() == {"matched": 0, "modified": 0}


async def test_patch_empty_body_is_a_noop(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.patch("/products/SKU-9001", json={})
    assert res.json() == {"matched": 1, "modified": 0}

    res = await client.patch("/products/SKU-404", json={})
    assert res.json() == {"matched": 0, "modified": 0}


async def test_delete_existing_then_missing(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.delete("/products/SKU-9001")
    assert res.status_code == 200
    assert res.json() == {"deleted": 1}

    res = await client.delete("/products/SKU-9001")
    assert res.status_code == 200
    assert res.json() == {"deleted": 0}


async def test_create_with_oversized_int_is_400(client, fake_db):
    res = await client.post("/products", json={"_id": "SKU-BIG", "qty": 10**20})
    assert res.status_code == 400
    assert "8-byte ints" in res.json()["error"]
    assert fake_db["products"].docs == []


async def test_create_with_nul_byte_in_key_is_400(client, fake_db):
    res = await client.post("/products", json={"_id": "SKU-NUL", "bad\u0000key": 1})
    assert res.status_code == 400
    assert "error" in res.json()
    assert fake_db["products"].docs == []


async def test_patch_with_unencodable_value_is_generic_500(client, sample_product):
    await client.post("/products", json=sample_product)

    res = await client.patch("/products/SKU-9001", json={"qty": 10**20})
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert (await client.get("/products/SKU-9001")).json() == sample_product
