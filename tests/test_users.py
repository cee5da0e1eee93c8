"""
Tests for the public user endpoints.
"""


class TestUserEndpoints:

    def test_list_users(self, client, register_user):
        register_user("alice")
        register_user("bobby")

        response = client.get("/users")

        assert response.status_code == 200
        users = response.json()
        assert [u["username"] for u in users] == ["alice", "bobby"]
        assert all(set(u) == {"id", "username", "email", "created_at"} for u in users)

    def test_get_missing_user(self, client):
        response = client.get("/users/99999")

        assert response.status_code == 404
        assert response.json()["error"] == "User not found"

    def test_get_user_with_non_numeric_id(self, client):
        response = client.get("/users/abc")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_oversized_user_id_is_bad_request(self, client):
        assert client.get("/users/99999999999999999999").status_code == 400
        assert client.get("/users/99999999999999999999/jobs").status_code == 400

    def test_user_jobs_newest_first(self, client, register_user, auth_headers, other_headers, sample_job_data):
        alice_id = client.get("/users").json()[0]["id"]
        client.post("/jobs", json={**sample_job_data, "title": "Old"}, headers=auth_headers)
        client.post("/jobs", json={**sample_job_data, "title": "Not mine"}, headers=other_headers)
        client.post("/jobs", json={**sample_job_data, "title": "New"}, headers=auth_headers)

        response = client.get(f"/users/{alice_id}/jobs")

        assert response.status_code == 200
        assert [job["title"] for job in response.json()] == ["New", "Old"]

    def test_jobs_of_unknown_user(self, client):
        response = client.get("/users/99999/jobs")

        assert response.status_code == 200
        assert response.json() == []


class TestHealth:

    def test_basic_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_check(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["checks"]["database"]["status"] == "healthy"
