"""End-to-end walk through the companies API from one seeded company."""


async def test_seeded_company_lifecycle(client, seed_company, count_rows):
    res = await client.get("/companies")
    assert res.json() == {"companies": [{"code": "mac", "name": "APPLE"}]}

    res = await client.get("/companies/mac")
    assert res.json()["company"]["description"] == "apple company"

    assert (await client.get("/companies/MAC")).status_code == 404

    res = await client.post("/companies", json={
        "code": "len", "name": "LENOVO", "description": "lenovo company",
    })
    assert res.status_code == 201
    assert await count_rows("companies") == 2

    res = await client.delete("/companies/mac")
    assert res.json() == {"status": "Deleted"}
    assert (await client.get("/companies/mac")).status_code == 404
