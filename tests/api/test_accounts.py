"""
Tests for account API endpoints.

These test the HTTP layer: status codes, response format,
and error payloads. Business logic is tested in
test_ledger_service.py.
"""


def create(client, cpf="111", name="Alice"):
    return client.post("/account", json={"cpf": cpf, "name": name})


class TestCreateAccount:

    def test_create_account_returns_201(self, client):
        response = create(client)
        assert response.status_code == 201
        assert response.content == b""

    def test_create_does_not_require_existing_customer(self, client):
        response = client.post(
            "/account",
            json={"cpf": "111", "name": "Alice"},
            headers={"cpf": "not-registered"},
        )
        assert response.status_code == 201

    def test_duplicate_cpf_returns_400(self, client):
        create(client)
        response = create(client, name="Impostor")
        assert response.status_code == 400
        assert response.json() == {"error": "Customer already exists"}

    def test_missing_name_returns_400(self, client):
        response = client.post("/account", json={"cpf": "111"})
        assert response.status_code == 400
        assert "name" in response.json()["error"]


class TestGetAccount:

    def test_get_account_returns_customer(self, client):
        create(client)
        client.post("/deposit", json={"amount": 10}, headers={"cpf": "111"})

        response = client.get("/account", headers={"cpf": "111"})
        assert response.status_code == 200
        data = response.json()
        assert data["cpf"] == "111"
        assert data["name"] == "Alice"
        assert data["id"]
        assert len(data["statement"]) == 1

    def test_unknown_cpf_returns_400(self, client):
        response = client.get("/account", headers={"cpf": "999"})
        assert response.status_code == 400
        assert response.json() == {"error": "Customer not found"}

    def test_missing_header_returns_400(self, client):
        create(client)
        response = client.get("/account")
        assert response.status_code == 400
        assert response.json() == {"error": "Customer not found"}


class TestRenameAccount:

    def test_rename_returns_201(self, client):
        create(client)
        before = client.get("/account", headers={"cpf": "111"}).json()

        response = client.put(
            "/account", json={"name": "Alicia"}, headers={"cpf": "111"}
        )
        assert response.status_code == 201

        after = client.get("/account", headers={"cpf": "111"}).json()
        assert after["name"] == "Alicia"
        assert after["id"] == before["id"]
        assert after["statement"] == before["statement"]

    def test_rename_unknown_cpf_returns_400(self, client):
        response = client.put(
            "/account", json={"name": "Ghost"}, headers={"cpf": "999"}
        )
        assert response.status_code == 400


class TestDeleteAccount:

    def test_delete_returns_remaining_customers(self, client):
        create(client, cpf="111", name="Alice")
        create(client, cpf="222", name="Bob")
        create(client, cpf="333", name="Carol")

        response = client.delete("/account", headers={"cpf": "222"})
        assert response.status_code == 200
        assert [c["cpf"] for c in response.json()] == ["111", "333"]

    def test_deleted_customer_is_gone(self, client):
        create(client)
        client.delete("/account", headers={"cpf": "111"})

        response = client.get("/account", headers={"cpf": "111"})
        assert response.status_code == 400

    def test_delete_last_customer_returns_empty_list(self, client):
        create(client)
        response = client.delete("/account", headers={"cpf": "111"})
        assert response.json() == []


class TestAccountText:

    def test_long_name_and_cpf_accepted(self, client):
        cpf = "9" * 80
        name = "A" * 400
        response = create(client, cpf=cpf, name=name)
        assert response.status_code == 201

        data = client.get("/account", headers={"cpf": cpf}).json()
        assert data["name"] == name
