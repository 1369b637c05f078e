import pytest


async def add_record(client, headers, meal_id, food_id, quantity=150, unit="g"):
    return await client.post(
        "/food-records",
        json={"meal_record_id": meal_id, "food_id": food_id, "quantity": quantity, "unit": unit},
        headers=headers,
    )


async def test_create_computes_nutrients(client, make_user, make_meal, make_food):
    _, headers = await make_user()
    meal = await make_meal(headers)
    food = await make_food(headers)

    res = await add_record(client, headers, meal["id"], food["id"])
    assert res.status_code == 201
    record = res.json()["data"]
    assert record["food_name"] == "Apple"
    assert record["calories"] == pytest.approx(78)
    assert record["carbohydrates"] == pytest.approx(21)
    assert record["unit"] == "g"


async def test_create_requires_existing_meal_and_food(client, make_user, make_meal, make_food):
    _, headers = await make_user()
    meal = await make_meal(headers)
    food = await make_food(headers)

    assert (await add_record(client, headers, 999, food["id"])).status_code == 404
    assert (await add_record(client, headers, meal["id"], 999)).status_code == 404
    assert (await add_record(client, headers, meal["id"], food["id"], quantity=0)).status_code == 400


async def test_create_in_foreign_meal_forbidden(client, make_user, make_meal, make_food):
    _, alice = await make_user()
    _, bob = await make_user(email="bob@mailbox.org", nickname="bob")
    meal = await make_meal(alice)
    food = await make_food(alice)

    res = await add_record(client, bob, meal["id"], food["id"])
    assert res.status_code == 403


async def test_update_recomputes_from_current_food(client, make_user, make_meal, make_food):
    _, headers = await make_user()
    meal = await make_meal(headers)
    food = await make_food(headers)
    record = (await add_record(client, headers, meal["id"], food["id"])).json()["data"]

    # same quantity again gives the same values
    res = await client.put(f"/food-records/{record['id']}", json={"quantity": 150}, headers=headers)
    assert res.json()["data"]["calories"] == pytest.approx(78)

    # changing the food does not touch the stored record...
    await client.put(f"/foods/{food['id']}", json={"calories": 60, "name": "Green apple"}, headers=headers)
    res = await client.get(f"/food-records/{record['id']}", headers=headers)
    assert res.json()["data"]["calories"] == pytest.approx(78)
    assert res.json()["data"]["food_name"] == "Apple"

    # ...until the record itself is written again
    res = await client.put(
        f"/food-records/{record['id']}", json={"quantity": 200, "unit": "ml"}, headers=headers
    )
    updated = res.json()["data"]
    assert updated["calories"] == pytest.approx(120)
    assert updated["food_name"] == "Green apple"
    assert updated["unit"] == "ml"


async def test_food_record_ownership(client, make_user, make_meal, make_food):
    _, alice = await make_user()
    _, bob = await make_user(email="bob@mailbox.org", nickname="bob")
    meal = await make_meal(alice)
    food = await make_food(alice)
    record = (await add_record(client, alice, meal["id"], food["id"])).json()["data"]
    url = f"/food-records/{record['id']}"

    assert (await client.get(url, headers=bob)).status_code == 403
    assert (await client.put(url, json={"quantity": 10}, headers=bob)).status_code == 403
    assert (await client.delete(url, headers=bob)).status_code == 403
    assert (await client.get("/food-records", params={"meal_id": meal["id"]}, headers=bob)).status_code == 403

    assert (await client.delete(url, headers=alice)).status_code == 200
    assert (await client.get(url, headers=alice)).status_code == 404


async def test_list_by_meal_and_date(client, make_user, make_meal, make_food):
    _, headers = await make_user()
    breakfast = await make_meal(headers)
    other_day = await make_meal(headers, day="2024-01-02")
    food = await make_food(headers)
    await add_record(client, headers, breakfast["id"], food["id"], quantity=100)
    await add_record(client, headers, breakfast["id"], food["id"], quantity=50)
    await add_record(client, headers, other_day["id"], food["id"], quantity=10)

    res = await client.get("/food-records", params={"meal_id": breakfast["id"]}, headers=headers)
    assert [r["quantity"] for r in res.json()["data"]] == [100, 50]

    res = await client.get("/food-records", params={"date": "2024-01-02"}, headers=headers)
    assert [r["quantity"] for r in res.json()["data"]] == [10]


async def test_ids_beyond_integer_range_rejected(client, make_user, make_meal, make_food):
    _, headers = await make_user()
    meal = await make_meal(headers)
    food = await make_food(headers)
    too_big = 2**64

    assert (await add_record(client, headers, too_big, food["id"])).status_code == 400
    assert (await add_record(client, headers, meal["id"], too_big)).status_code == 400

    res = await client.get("/food-records", params={"meal_id": too_big}, headers=headers)
    assert res.status_code == 400
    res = await client.get(f"/food-records/{too_big}", headers=headers)
    assert res.status_code == 400
    assert "error" in res.json()
