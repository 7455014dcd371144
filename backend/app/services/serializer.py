"""
Serializer / validator for resource records
Decodes request bodies into records and checks enrollment references
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import NotFound, ValidationError, describe_validation_errors
from app.schemas.course import CourseCreate, CourseUpdate, CourseResponse
from app.schemas.enrollment import EnrollmentCreate, EnrollmentUpdate, EnrollmentResponse
from app.schemas.student import StudentCreate, StudentUpdate, StudentResponse


@dataclass(frozen=True)
class ResourceSchema:
    name: str
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    response_model: Type[BaseModel]


RESOURCES: Dict[str, ResourceSchema] = {
    "courses": ResourceSchema("courses", CourseCreate, CourseUpdate, CourseResponse),
    "students": ResourceSchema("students", StudentCreate, StudentUpdate, StudentResponse),
    "enrollments": ResourceSchema(
        "enrollments", EnrollmentCreate, EnrollmentUpdate, EnrollmentResponse
    ),
}

# field -> referenced resource
REFERENCES: Dict[str, Dict[str, str]] = {
    "enrollments": {"studentId": "students", "courseId": "courses"},
}


def get_schema(resource: str) -> ResourceSchema:
    schema = RESOURCES.get(resource)
    if schema is None:
        raise NotFound(f"Unknown resource '{resource}'")
    return schema


def decode(resource: str, payload: Any, partial: bool = False) -> Dict[str, Any]:
    """
    Validate a raw JSON value as a record of the given resource

    Args:
        resource: Resource name (courses, students, enrollments)
        payload: Decoded JSON body
        partial: Validate as a PATCH body (every field optional)

    Returns:
        Record fields without ``id``; for partial bodies only the supplied ones
    """
    schema = get_schema(resource)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    model = schema.update_model if partial else schema.create_model
    try:
        parsed = model.model_validate(payload)
    except PydanticValidationError as e:
        message, field = describe_validation_errors(e.errors())
        raise ValidationError(message, field=field)

    return parsed.model_dump(exclude_unset=partial)


def encode(record: Dict[str, Any]) -> Dict[str, Any]:
    return dict(record)


def check_references(store, resource: str, record: Dict[str, Any]) -> None:
    """Raise ValidationError if a reference field points at a missing record."""
    for field, target in REFERENCES.get(resource, {}).items():
        if not store.contains(target, record.get(field)):
            raise ValidationError(
                f"{field}: no {target} record with id '{record.get(field)}'",
                field=field,
            )


def reference_validator(store, resource: str) -> Optional[Callable[[Dict[str, Any]], None]]:
    """Validator the store runs on the candidate record inside its write lock."""
    if resource not in REFERENCES:
        return None

    def validate(record: Dict[str, Any]) -> None:
        check_references(store, resource, record)

    return validate


def from_model(payload: BaseModel, partial: bool = False) -> Dict[str, Any]:
    """Record fields from a body FastAPI already validated against a schema model."""
    return payload.model_dump(exclude_unset=partial)
