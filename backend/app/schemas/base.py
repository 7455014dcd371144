from pydantic import BaseModel, ConfigDict, field_validator


class RecordBase(BaseModel):
    """Shared config for record bodies: unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")


class RecordPatch(RecordBase):
    """Partial body; fields may be omitted but not sent as null."""

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value
