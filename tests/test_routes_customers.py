"""Tests for /api/customers routes."""


class TestCustomerCreate:
    """POST /api/customers."""

    def test_create_customer(self, client, customer_payload):
        """Should return 201 with generated id and timestamps."""
        response = client.post("/api/customers", json=customer_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["email"] == "jane@example.com"
        assert data["firstName"] == "Jane"
        assert data["phone"] == "555-0100"
        assert data["birthdate"] is None
        assert "createdAt" in data and "updatedAt" in data

    def test_create_then_get_round_trip(self, client, customer_payload):
        """GET after POST returns the same object."""
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.get(f"/api/customers/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_duplicate_email_rejected(self, client, customer_payload):
        """Second customer with the same email gets 400; the first is untouched."""
        first = client.post("/api/customers", json=customer_payload).json()

        response = client.post(
            "/api/customers", json={**customer_payload, "firstName": "Janet"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid customer data"
        assert "already exists" in response.json()["error"]
        assert client.get(f"/api/customers/{first['id']}").json() == first
        assert len(client.get("/api/customers").json()) == 1

    def test_malformed_email_rejected(self, client, customer_payload):
        """Invalid email format is a validation error, not coerced."""
        response = client.post(
            "/api/customers", json={**customer_payload, "email": "not-an-email"}
        )

        assert response.status_code == 400
        assert "email" in response.json()["error"]

    def test_missing_required_field(self, client, customer_payload):
        """Missing lastName is rejected with 400."""
        payload = dict(customer_payload)
        del payload["lastName"]

        response = client.post("/api/customers", json=payload)

        assert response.status_code == 400

    def test_client_cannot_set_id_or_timestamps(self, client, customer_payload):
        """Server assigns id and timestamps regardless of the body."""
        response = client.post(
            "/api/customers",
            json={**customer_payload, "id": "my-id", "createdAt": "2000-01-01T00:00:00"},
        )

        data = response.json()
        assert data["id"] != "my-id"
        assert not data["createdAt"].startswith("2000")

    def test_birthdate_is_date_only(self, client, customer_payload):
        response = client.post(
            "/api/customers", json={**customer_payload, "birthdate": "1990-05-20"}
        )

        assert response.json()["birthdate"] == "1990-05-20"


class TestCustomerRead:
    """GET /api/customers and /api/customers/{id}."""

    def test_list_empty(self, client):
        response = client.get("/api/customers")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_customers(self, client, customer_payload):
        client.post("/api/customers", json=customer_payload)
        client.post("/api/customers", json={**customer_payload, "email": "john@example.com"})

        response = client.get("/api/customers")

        assert response.status_code == 200
        assert {c["email"] for c in response.json()} == {"jane@example.com", "john@example.com"}

    def test_get_not_found(self, client):
        response = client.get("/api/customers/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"message": "Customer not found"}


class TestCustomerUpdate:
    """PUT /api/customers/{id}."""

    def test_partial_update_keeps_other_fields(self, client, customer_payload):
        """Fields absent from the body are left unchanged."""
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.put(f"/api/customers/{created['id']}", json={"notes": "Prefers mornings"})

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] == "Prefers mornings"
        assert data["firstName"] == "Jane"
        assert data["email"] == "jane@example.com"
        assert data["phone"] == "555-0100"
        assert data["id"] == created["id"]
        assert data["createdAt"] == created["createdAt"]

    def test_update_is_idempotent(self, client, customer_payload):
        created = client.post("/api/customers", json=customer_payload).json()
        changes = {"lastName": "Smith", "phone": "555-0199"}

        first = client.put(f"/api/customers/{created['id']}", json=changes).json()
        second = client.put(f"/api/customers/{created['id']}", json=changes).json()

        first.pop("updatedAt")
        second.pop("updatedAt")
        assert first == second

    def test_explicit_null_clears_optional_field(self, client, customer_payload):
        """null is distinguishable from an omitted field."""
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.put(f"/api/customers/{created['id']}", json={"phone": None})

        assert response.status_code == 200
        assert response.json()["phone"] is None

    def test_explicit_null_on_required_field_rejected(self, client, customer_payload):
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.put(f"/api/customers/{created['id']}", json={"firstName": None})

        assert response.status_code == 400
        assert client.get(f"/api/customers/{created['id']}").json()["firstName"] == "Jane"

    def test_update_to_duplicate_email_rejected(self, client, customer_payload):
        client.post("/api/customers", json=customer_payload)
        other = client.post(
            "/api/customers", json={**customer_payload, "email": "john@example.com"}
        ).json()

        response = client.put(f"/api/customers/{other['id']}", json={"email": "jane@example.com"})

        assert response.status_code == 400

    def test_update_keeping_own_email(self, client, customer_payload):
        """Re-sending a customer's own email is not a duplicate."""
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.put(
            f"/api/customers/{created['id']}", json={"email": "jane@example.com"}
        )

        assert response.status_code == 200

    def test_update_not_found(self, client):
        response = client.put("/api/customers/nonexistent", json={"notes": "x"})

        assert response.status_code == 404


class TestCustomerDelete:
    """DELETE /api/customers/{id}."""

    def test_delete_customer(self, client, customer_payload):
        created = client.post("/api/customers", json=customer_payload).json()

        response = client.delete(f"/api/customers/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Customer deleted successfully"}
        assert client.get(f"/api/customers/{created['id']}").status_code == 404

    def test_delete_not_found(self, client):
        response = client.delete("/api/customers/nonexistent")

        assert response.status_code == 404

    def test_delete_twice(self, client, customer_payload):
        """Second delete of the same id reports 404."""
        created = client.post("/api/customers", json=customer_payload).json()
        client.delete(f"/api/customers/{created['id']}")

        response = client.delete(f"/api/customers/{created['id']}")

        assert response.status_code == 404
