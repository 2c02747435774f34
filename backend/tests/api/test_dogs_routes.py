"""Dogs Router - same contract as adopters, with dog-specific messages."""


async def test_list_dogs(client, dog_repo):
    res = await client.get("/api/dogs")
    assert res.status_code == 200
    assert res.json() == list(dog_repo.records.values())


async def test_list_dogs_filters_by_query(client):
    res = await client.get("/api/dogs?breed=Mutt")
    assert res.status_code == 200
    assert [d["name"] for d in res.json()] == ["Fido"]


async def test_get_dog(client):
    res = await client.get("/api/dogs/10")
    assert res.status_code == 200
    assert res.json()["breed"] == "Beagle"


async def test_get_missing_dog_returns_404(client):
    res = await client.get("/api/dogs/404")
    assert res.status_code == 404
    assert res.json() == {"message": "Dog not found"}


async def test_create_dog_returns_201(client):
    res = await client.post("/api/dogs", json={"name": "Luna", "breed": "Husky"})
    assert res.status_code == 201
    assert res.json()["id"] == 12


async def test_delete_dog(client):
    res = await client.delete("/api/dogs/11")
    assert res.status_code == 200
    assert res.json() == {"message": "The dog has been nuked"}


async def test_delete_missing_dog_returns_404(client):
    res = await client.delete("/api/dogs/11")
    res = await client.delete("/api/dogs/11")
    assert res.status_code == 404
    assert res.json() == {"message": "The dog could not be found"}


async def test_update_dog(client):
    res = await client.put("/api/dogs/11", json={"adopter_id": 2})
    assert res.status_code == 200
    assert res.json()["adopter_id"] == 2


async def test_update_missing_dog_returns_404(client):
    res = await client.put("/api/dogs/77", json={"name": "Ghost"})
    assert res.status_code == 404
    assert res.json() == {"message": "The dog could not be found"}


async def test_dogs_have_no_related_collection_route(client):
    res = await client.get("/api/dogs/10/dogs")
    assert res.status_code == 404
    assert res.json() == {"detail": "Not Found"}
