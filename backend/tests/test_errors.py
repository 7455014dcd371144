"""
Tests for error responses and routing edge cases
"""

from fastapi import status


class TestErrorResponses:

    def test_unknown_resource_is_404(self, client):
        response = client.get("/teachers")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not Found", "status": 404}

    def test_unknown_resource_item_is_404(self, client):
        assert client.delete("/teachers/1").status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/students",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["status"] == 400
        assert client.get("/students").json() == []

    def test_array_body_is_400(self, client):
        response = client.post("/students", json=[{"name": "Ana", "email": "a@x.com"}])

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unsupported_method(self, client):
        response = client.post("/courses/1", json={})

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["status"] == 405

    def test_not_found_message_names_the_id(self, client):
        response = client.get("/students/77")

        assert "77" in response.json()["error"]


class TestUtilityEndpoints:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    def test_db_dump(self, client, enrollment):
        response = client.get("/db")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert set(data) == {"courses", "students", "enrollments"}
        assert data["enrollments"] == [enrollment]
