"""Student endpoints: /students"""

from app.api.v1.endpoints.resources import make_router

router = make_router("students")
