"""Ring Schemas — create/update payload rules and the public ring shape.

Invariants:
    - RingCreate requires name, power, bearer, forgedBy, image (all strings)
    - RingUpdate is the same shape without forgedBy; a forgedBy in the body is ignored
    - image must be an http(s) URL; the submitted string is stored unchanged
    - name and user ids are capped at their column widths so overlong input is a 400
    - Unknown keys are ignored, never rejected
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

_http_url = TypeAdapter(HttpUrl)

# column widths in models/ring.py
NAME_MAX_LENGTH = 255
USER_ID_MAX_LENGTH = 36


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url", "Invalid url")
    return value


class RingCreate(BaseModel):
    """Creation payload. forgedBy is required but overwritten by the caller's identity."""
    name: str = Field(max_length=NAME_MAX_LENGTH)
    power: str
    bearer: str = Field(max_length=USER_ID_MAX_LENGTH)
    forged_by: str = Field(alias="forgedBy", max_length=USER_ID_MAX_LENGTH)
    image: str

    @field_validator("image")
    @classmethod
    def image_is_url(cls, v: str) -> str:
        return _check_url(v)

    def to_fields(self) -> dict:
        return {
            "name": self.name,
            "power": self.power,
            "bearer": self.bearer,
            "forged_by": self.forged_by,
            "image": self.image,
        }


class RingUpdate(BaseModel):
    """Full-field update. forgedBy is server-retained."""
    name: str = Field(max_length=NAME_MAX_LENGTH)
    power: str
    bearer: str = Field(max_length=USER_ID_MAX_LENGTH)
    image: str

    @field_validator("image")
    @classmethod
    def image_is_url(cls, v: str) -> str:
        return _check_url(v)

    def to_fields(self) -> dict:
        return {
            "name": self.name,
            "power": self.power,
            "bearer": self.bearer,
            "image": self.image,
        }


class RingResponse(BaseModel):
    """Public ring record."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    power: str
    bearer: str
    forged_by: str = Field(alias="forgedBy")
    image: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_record(cls, ring) -> "RingResponse":
        return cls(
            id=ring.id,
            name=ring.name,
            power=ring.power,
            bearer=ring.bearer,
            forgedBy=ring.forged_by,
            image=ring.image,
            createdAt=ring.created_at,
            updatedAt=ring.updated_at,
        )
