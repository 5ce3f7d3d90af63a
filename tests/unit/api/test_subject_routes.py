"""Unit tests for subject routes."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.unit
class TestSubjectRoutes:

    def test_requires_token(self, client: TestClient, subject_payload: dict) -> None:
        assert client.post("/api/subject", json=subject_payload).status_code == 401

    def test_crud_cycle(self, client: TestClient, auth_headers: dict, subject_payload: dict) -> None:
        created = client.post("/api/subject", json=subject_payload, headers=auth_headers)
        assert created.status_code == 201
        assert created.json()["SubjectName"] == "Data Structures"

        fetched = client.get("/api/subject/202", headers=auth_headers)
        assert fetched.json() == created.json()

        updated = client.put("/api/subject/202", json={"SubjectName": "Algorithms"}, headers=auth_headers)
        assert updated.status_code == 200
        assert updated.json()["SubjectName"] == "Algorithms"
        assert updated.json()["SubjectDescription"] == subject_payload["SubjectDescription"]

        assert client.delete("/api/subject/202", headers=auth_headers).status_code == 204
        assert client.get("/api/subject/202", headers=auth_headers).status_code == 404

    def test_duplicate_subject_id(self, client: TestClient, auth_headers: dict, subject_factory) -> None:
        client.post("/api/subject", json=subject_factory(), headers=auth_headers)

        response = client.post(
            "/api/subject", json=subject_factory(SubjectName="Other"), headers=auth_headers
        )

        assert response.status_code == 409
        assert response.json() == {"message": "Subject ID already exists"}

    def test_validation(self, client: TestClient, auth_headers: dict, subject_factory) -> None:
        response = client.post(
            "/api/subject", json=subject_factory(SubjectName="n" * 101), headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["details"] == [
            {"field": "SubjectName", "message": "Subject Name cannot exceed 100 characters"}
        ]

    def test_list_limit(self, client: TestClient, auth_headers: dict, subject_factory) -> None:
        for i in range(1, 4):
            client.post("/api/subject", json=subject_factory(Subject_ID=i), headers=auth_headers)

        response = client.get("/api/subject?limit=2", headers=auth_headers)

        data = response.json()
        assert len(data["data"]) == 2
        assert data["pagination"] == {"total": 3, "pages": 2, "page": 1, "limit": 2}
