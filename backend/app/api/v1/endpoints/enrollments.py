"""
Enrollment endpoints: /enrollments
studentId and courseId must point at existing records on create, replace and merge
"""

from app.api.v1.endpoints.resources import make_router

router = make_router("enrollments")
