"""
Tests for enrollment endpoints and the student/course reference checks
"""

from fastapi import status


class TestEnrollmentEndpoints:
    """Tests for /enrollments"""

    def test_enroll_student_in_course(self, client, student, course):
        """Test creating an enrollment between existing records"""
        payload = {"studentId": student["id"], "courseId": course["id"], "date": "2025-01-01"}

        response = client.post("/enrollments", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data == {"id": data["id"], **payload}

    def test_enroll_unknown_student(self, client, course):
        """Dangling studentId is a validation error and nothing is inserted"""
        before = client.get("/enrollments").json()

        response = client.post(
            "/enrollments",
            json={"studentId": "999", "courseId": course["id"], "date": "2025-01-01"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["status"] == 400
        assert data["field"] == "studentId"
        assert len(client.get("/enrollments").json()) == len(before)

    def test_enroll_unknown_course(self, client, student):
        response = client.post(
            "/enrollments",
            json={"studentId": student["id"], "courseId": "404", "date": "2025-01-01"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "courseId"
        assert client.get("/enrollments").json() == []

    def test_enroll_with_invalid_date(self, client, student, course):
        response = client.post(
            "/enrollments",
            json={"studentId": student["id"], "courseId": course["id"], "date": "next monday"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["field"] == "date"

    def test_filter_enrollments_by_student(self, client, student, course, student_data):
        other = client.post("/students", json={**student_data, "name": "Bo"}).json()
        for student_id in (student["id"], other["id"], student["id"]):
            client.post(
                "/enrollments",
                json={"studentId": student_id, "courseId": course["id"], "date": "2025-02-01"},
            )

        response = client.get("/enrollments", params={"studentId": student["id"]})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 2
        assert all(e["studentId"] == student["id"] for e in response.json())

    def test_replace_enrollment_with_dangling_course(self, client, enrollment):
        response = client.put(
            f"/enrollments/{enrollment['id']}",
            json={"studentId": enrollment["studentId"], "courseId": "999", "date": "2025-03-01"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/enrollments/{enrollment['id']}").json() == enrollment

    def test_patch_enrollment_date(self, client, enrollment):
        response = client.patch(f"/enrollments/{enrollment['id']}", json={"date": "2025-06-30"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {**enrollment, "date": "2025-06-30"}

    def test_patch_enrollment_with_dangling_student(self, client, enrollment):
        response = client.patch(f"/enrollments/{enrollment['id']}", json={"studentId": "999"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/enrollments/{enrollment['id']}").json() == enrollment

    def test_deleting_course_does_not_cascade(self, client, enrollment):
        """References are checked on writes only; deletes leave enrollments alone"""
        client.delete(f"/courses/{enrollment['courseId']}")

        response = client.get(f"/enrollments/{enrollment['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == enrollment

    def test_drop_enrollment(self, client, enrollment):
        response = client.delete(f"/enrollments/{enrollment['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/enrollments/{enrollment['id']}").status_code == status.HTTP_404_NOT_FOUND
