"""HTTP-level tests for the /actors endpoints."""

from datetime import date, timedelta

from conftest import DB_ERROR_TEXT


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


class TestCreateActor:
    def test_create_returns_created_record(self, client) -> None:
        resp = client.post(
            "/actors",
            json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert isinstance(body["id"], int)
        assert body["firstName"] == "Meryl"
        assert body["lastName"] == "Streep"
        assert body["dateOfBirth"] == "1949-06-22"

    def test_today_is_not_in_the_future(self, client) -> None:
        today = date.today().isoformat()
        resp = client.post(
            "/actors",
            json={"firstName": "New", "lastName": "Born", "dateOfBirth": today},
        )
        assert resp.status_code == 201
        assert resp.json()["dateOfBirth"] == today

    def test_future_date_of_birth_is_rejected(self, client) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        resp = client.post(
            "/actors",
            json={"firstName": "Not", "lastName": "Yet", "dateOfBirth": tomorrow},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Date of birth cannot be in the future."
        assert client.get("/actors").json() == []

    def test_missing_fields_are_rejected(self, client) -> None:
        resp = client.post("/actors", json={"firstName": "Meryl"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail.startswith("Fields required")
        assert "lastName" in detail
        assert "dateOfBirth" in detail

    def test_malformed_date_is_rejected(self, client) -> None:
        resp = client.post(
            "/actors",
            json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": "yesterday"},
        )
        assert resp.status_code == 400
        assert "dateOfBirth" in resp.json()["detail"]

    def test_empty_name_is_rejected(self, client) -> None:
        resp = client.post(
            "/actors",
            json={"firstName": "", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
        )
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------


class TestReadActor:
    def test_list_is_empty_initially(self, client) -> None:
        resp = client.get("/actors")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_list_returns_all_actors(self, client, meryl) -> None:
        client.post(
            "/actors",
            json={"firstName": "Tom", "lastName": "Hanks", "dateOfBirth": "1956-07-09"},
        )
        names = [a["lastName"] for a in client.get("/actors").json()]
        assert names == ["Streep", "Hanks"]

    def test_create_then_get_round_trip(self, client, meryl) -> None:
        resp = client.get(f"/actors/{meryl['id']}")
        assert resp.status_code == 200
        assert resp.json() == meryl

    def test_get_unknown_actor(self, client) -> None:
        resp = client.get("/actors/999999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Actor not found."

    def test_non_integer_id_is_rejected(self, client) -> None:
        assert client.get("/actors/abc").status_code == 400

    def test_id_beyond_column_range_is_not_found(self, client) -> None:
        huge = "99999999999999999999"
        assert client.get(f"/actors/{huge}").status_code == 404
        resp = client.put(
            f"/actors/{huge}",
            json={"firstName": "Nobody", "lastName": "Here", "dateOfBirth": "1970-01-01"},
        )
        assert resp.status_code == 404
        assert client.delete(f"/actors/{huge}").status_code == 404


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


class TestUpdateActor:
    def test_full_replacement(self, client, meryl) -> None:
        resp = client.put(
            f"/actors/{meryl['id']}",
            json={"firstName": "Mary Louise", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
        )
        assert resp.status_code == 200
        assert resp.json()["firstName"] == "Mary Louise"
        assert client.get(f"/actors/{meryl['id']}").json()["firstName"] == "Mary Louise"

    def test_update_unknown_actor(self, client) -> None:
        resp = client.put(
            "/actors/999999",
            json={"firstName": "Nobody", "lastName": "Here", "dateOfBirth": "1970-01-01"},
        )
        assert resp.status_code == 404

    def test_update_rejects_future_date_of_birth(self, client, meryl) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        resp = client.put(
            f"/actors/{meryl['id']}",
            json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": tomorrow},
        )
        assert resp.status_code == 400
        assert client.get(f"/actors/{meryl['id']}").json()["dateOfBirth"] == "1949-06-22"

    def test_update_with_missing_fields_is_rejected_before_lookup(self, client) -> None:
        resp = client.put("/actors/999999", json={})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Fields required")

    def test_update_with_partial_body_is_rejected(self, client, meryl) -> None:
        resp = client.put(f"/actors/{meryl['id']}", json={"firstName": "Mary"})
        assert resp.status_code == 400
        assert client.get(f"/actors/{meryl['id']}").json()["firstName"] == "Meryl"


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


class TestDeleteActor:
    def test_delete_then_get(self, client, meryl) -> None:
        resp = client.delete(f"/actors/{meryl['id']}")
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"/actors/{meryl['id']}").status_code == 404

    def test_delete_unknown_actor(self, client) -> None:
        assert client.delete("/actors/999999").status_code == 404

    def test_referenced_actor_is_not_deleted_and_reports_generic_error(self, client, meryl) -> None:
        movie = client.post(
            "/movies",
            json={"title": "Doubt", "creationDate": "2008-12-12", "actorId": meryl["id"]},
        ).json()

        resp = client.delete(f"/actors/{meryl['id']}")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error deleting actor"}

        assert client.get(f"/actors/{meryl['id']}").status_code == 200
        assert client.get(f"/movies/{movie['id']}").status_code == 200

    def test_actor_can_be_deleted_after_its_movies(self, client, meryl) -> None:
        movie = client.post(
            "/movies",
            json={"title": "Doubt", "creationDate": "2008-12-12", "actorId": meryl["id"]},
        ).json()
        assert client.delete(f"/movies/{movie['id']}").status_code == 204
        assert client.delete(f"/actors/{meryl['id']}").status_code == 204


# ---------------------------------------------------------------------------
# Data-access failures
# ---------------------------------------------------------------------------


class TestActorInternalErrors:
    def test_create(self, broken_client) -> None:
        resp = broken_client.post(
            "/actors",
            json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error creating actor"}
        assert DB_ERROR_TEXT not in resp.text

    def test_list(self, broken_client) -> None:
        resp = broken_client.get("/actors")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error retrieving actors"}

    def test_get(self, broken_client) -> None:
        resp = broken_client.get("/actors/1")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error retrieving actor"}

    def test_update(self, broken_client) -> None:
        resp = broken_client.put(
            "/actors/1",
            json={"firstName": "Meryl", "lastName": "Streep", "dateOfBirth": "1949-06-22"},
        )
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error updating actor"}

    def test_delete(self, broken_client) -> None:
        resp = broken_client.delete("/actors/1")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Error deleting actor"}
