"""
Common API schemas.

JSON keys are camelCase (bibNumber, currentPosition, ...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LatLngSchema(CamelModel):
    lat: float
    lng: float


class ErrorSchema(BaseModel):
    error: str
    kind: str
