def test_list_companies(client, seeded):
    res = client.get("/api/companies")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["total"] == 2
    assert "pagination" not in body
    # newest first
    assert [c["name"] for c in body["data"]] == ["Premium Drinks Ltd", "Beverage Corp"]
    assert set(body["data"][0]) == {"id", "name", "registeredAt"}


def test_list_users(client, seeded):
    res = client.get("/api/users")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == len(body["data"]) == 2
    assert body["data"][0]["firstName"] == "Sarah"
    assert set(body["data"][0]) == {"id", "companyId", "firstName", "lastName", "email", "createdAt"}


def test_empty_reference_lists(client):
    assert client.get("/api/companies").json() == {"success": True, "data": [], "total": 0}
    assert client.get("/api/users").json() == {"success": True, "data": [], "total": 0}


def test_storage_failure_on_reference_lists(broken_client):
    res = broken_client.get("/api/companies")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to fetch companies"}
    res = broken_client.get("/api/users")
    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Failed to fetch users"}


def test_unknown_endpoint(client):
    res = client.get("/api/orders")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Endpoint not found"}


def test_unsupported_method_reads_as_unknown_endpoint(client):
    res = client.delete("/api/products")
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": "Endpoint not found"}
