"""
Tests for job review endpoints.

Tests:
- Content length and rating range validation (boundaries included)
- Attribution to the authenticated user
- Listing order and missing jobs
"""

import pytest


def post_review(client, job_id, headers, content="Great team, fair process", rating=4):
    return client.post(
        f"/jobs/{job_id}/reviews",
        json={"content": content, "rating": rating},
        headers=headers
    )


class TestReviewCreation:

    def test_create_review(self, client, job_id, auth_headers):
        response = post_review(client, job_id, auth_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["job_id"] == job_id
        assert data["rating"] == 4
        assert data["content"] == "Great team, fair process"
        assert data["user_username"] == "alice"

    def test_review_attributed_to_caller(self, client, job_id, other_headers):
        """The reviewer is whoever holds the token, not whoever posted the job"""
        response = client.post(
            f"/jobs/{job_id}/reviews",
            json={"content": "Interview was well organised", "rating": 5, "user_id": 1},
            headers=other_headers
        )

        assert response.status_code == 201
        assert response.json()["user_username"] == "bobby"

    @pytest.mark.parametrize("rating", [1, 5])
    def test_rating_boundaries_accepted(self, client, job_id, auth_headers, rating):
        assert post_review(client, job_id, auth_headers, rating=rating).status_code == 201

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range_rejected(self, client, job_id, auth_headers, rating):
        response = post_review(client, job_id, auth_headers, rating=rating)

        assert response.status_code == 400
        assert response.json()["details"] == ["Rating must be an integer between 1 and 5"]

    def test_non_integer_rating_rejected(self, client, job_id, auth_headers):
        assert post_review(client, job_id, auth_headers, rating=3.5).status_code == 400
        assert post_review(client, job_id, auth_headers, rating="great").status_code == 400

    def test_content_length_boundary(self, client, job_id, auth_headers):
        """9 characters is too short, 10 is enough"""
        too_short = post_review(client, job_id, auth_headers, content="a" * 9)
        just_right = post_review(client, job_id, auth_headers, content="a" * 10)

        assert too_short.status_code == 400
        assert too_short.json()["details"] == ["Content must be at least 10 characters"]
        assert just_right.status_code == 201

    def test_missing_content_and_rating(self, client, job_id, auth_headers):
        response = client.post(f"/jobs/{job_id}/reviews", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["details"] == ["Content is required", "Rating is required"]

    def test_review_for_missing_job(self, client, auth_headers):
        response = post_review(client, 99999, auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Job not found"

    def test_review_requires_authentication(self, client, job_id):
        response = client.post(f"/jobs/{job_id}/reviews", json={"content": "Great team overall", "rating": 4})

        assert response.status_code == 401


class TestReviewListing:

    def test_list_reviews_newest_first(self, client, job_id, auth_headers, other_headers):
        post_review(client, job_id, auth_headers, content="First review text")
        post_review(client, job_id, other_headers, content="Second review text")

        response = client.get(f"/jobs/{job_id}/reviews")

        assert response.status_code == 200
        reviews = response.json()
        assert [r["content"] for r in reviews] == ["Second review text", "First review text"]
        assert [r["user_username"] for r in reviews] == ["bobby", "alice"]

    def test_list_reviews_empty(self, client, job_id):
        response = client.get(f"/jobs/{job_id}/reviews")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_reviews_for_missing_job(self, client):
        response = client.get("/jobs/99999/reviews")

        assert response.status_code == 404

    def test_list_reviews_for_oversized_job_id(self, client):
        response = client.get("/jobs/99999999999999999999/reviews")

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_review_for_oversized_job_id(self, client, auth_headers):
        response = post_review(client, "99999999999999999999", auth_headers)

        assert response.status_code == 400
