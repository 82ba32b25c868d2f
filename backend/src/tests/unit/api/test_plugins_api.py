"""HTTP tests for /api/plugins and /api/tags."""

import pytest

VALID_PLUGIN = {"name": "Linter", "author": "ada", "version": "1.0.0", "rating": 4.5, "tags": ["ui", "debug"]}


def _post(client, **overrides):
    return client.post("/api/plugins", json={**VALID_PLUGIN, **overrides})


class TestCreatePlugin:
    def test_created_with_plugin_id(self, client) -> None:
        response = _post(client)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Plugin successfully added"
        assert isinstance(body["pluginId"], int)

    @pytest.mark.parametrize("rating", [0, 0.0, 5, 5.0])
    def test_boundary_ratings_accepted(self, client, rating) -> None:
        assert _post(client, rating=rating).status_code == 201

    @pytest.mark.parametrize("rating", [5.1, -0.5, 10])
    def test_rating_out_of_range_rejected(self, client, rating) -> None:
        response = _post(client, rating=rating)

        assert response.status_code == 400
        assert "rating" in response.json()["error"]
        assert client.get("/api/plugins").json() == []

    @pytest.mark.parametrize("rating", [True, "4", None])
    def test_non_numeric_rating_rejected(self, client, rating) -> None:
        response = _post(client, rating=rating)

        assert response.status_code == 400
        assert "rating" in response.json()["error"]

    @pytest.mark.parametrize("field", ["name", "author", "version", "rating"])
    def test_missing_required_field_rejected(self, client, field) -> None:
        payload = {k: v for k, v in VALID_PLUGIN.items() if k != field}

        response = client.post("/api/plugins", json=payload)

        assert response.status_code == 400
        assert field in response.json()["error"]

    def test_blank_name_rejected(self, client) -> None:
        response = _post(client, name="   ")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request: name: name cannot be empty"}

    def test_every_offending_field_reported(self, client) -> None:
        response = client.post("/api/plugins", json={"rating": 9})

        error = response.json()["error"]
        for field in ("name", "author", "version", "rating"):
            assert field in error

    def test_malformed_json_rejected(self, client) -> None:
        response = client.post(
            "/api/plugins",
            content=b'{"name": "Linter",',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert set(response.json()) == {"error"}

    def test_tags_optional(self, client) -> None:
        payload = {k: v for k, v in VALID_PLUGIN.items() if k != "tags"}

        assert client.post("/api/plugins", json=payload).status_code == 201

    def test_comma_separated_tags_accepted(self, client) -> None:
        _post(client, tags="ui, debug,,ui")

        (plugin,) = client.get("/api/plugins").json()
        assert plugin["tags"] == ["debug", "ui"]


class TestListPlugins:
    def test_empty_list(self, client) -> None:
        response = client.get("/api/plugins")

        assert response.status_code == 200
        assert response.json() == []

    def test_ordered_by_rating_then_name(self, client) -> None:
        _post(client, name="Beta", rating=3)
        _post(client, name="Top", rating=5)
        _post(client, name="Alpha", rating=3)

        names = [p["name"] for p in client.get("/api/plugins").json()]

        assert names == ["Top", "Alpha", "Beta"]

    def test_plugin_fields_and_deduplicated_tags(self, client) -> None:
        plugin_id = _post(client, tags=["ui", "ui", "debug"]).json()["pluginId"]

        (plugin,) = client.get("/api/plugins").json()

        assert plugin == {
            "id": plugin_id,
            "name": "Linter",
            "author": "ada",
            "version": "1.0.0",
            "rating": 4.5,
            "tags": ["debug", "ui"],
        }

    def test_trailing_slash_served_without_redirect(self, client) -> None:
        _post(client)

        response = client.get("/api/plugins/", follow_redirects=False)

        assert response.status_code == 200
        assert len(response.json()) == 1


class TestTags:
    def test_shared_tag_created_once(self, client) -> None:
        _post(client, name="Linter", tags=["debug"])
        _post(client, name="Profiler", tags=["debug", "perf"])

        tags = client.get("/api/tags").json()

        assert [t["name"] for t in tags] == ["debug", "perf"]


def test_unknown_api_route_uses_error_body(client) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert set(response.json()) == {"error"}
