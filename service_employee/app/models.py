"""
Data models for the Employee Service.

Employees are only ever built by decoding an upstream response. The
upstream wraps every payload in ``{"data": ..., "status": ..., "error": ...}``;
each call site declares which concrete envelope it expects.
"""

from typing import List, Optional, Type, TypeVar

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Employee(BaseModel):
    """Employee record as owned by the upstream service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = Field(min_length=1, validation_alias=AliasChoices("employee_name", "name"))
    salary: int = Field(gt=0, validation_alias=AliasChoices("employee_salary", "salary"))
    age: int = Field(ge=0, validation_alias=AliasChoices("employee_age", "age"))
    title: str = Field(min_length=1, validation_alias=AliasChoices("employee_title", "title"))
    email: Optional[str] = Field(default=None, validation_alias=AliasChoices("employee_email", "email"))


class CreateEmployeeRequest(BaseModel):
    """Validated input for creating an employee."""

    name: str
    salary: int = Field(gt=0)
    age: int = Field(ge=0)
    title: str

    @field_validator("name", "title")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_payload(self) -> dict:
        """Request body for the upstream create call."""
        return self.model_dump(include={"name", "salary", "age", "title"})


class ResponseEnvelope(BaseModel):
    """Fields shared by every upstream response."""

    status: Optional[str] = None
    error: Optional[str] = None


class EmployeeEnvelope(ResponseEnvelope):
    data: Optional[Employee] = None


class EmployeeListEnvelope(ResponseEnvelope):
    data: Optional[List[Employee]] = None


class DeleteAckEnvelope(ResponseEnvelope):
    data: Optional[bool] = None


EnvelopeT = TypeVar("EnvelopeT", bound=ResponseEnvelope)


def decode_envelope(response: httpx.Response, envelope_cls: Type[EnvelopeT]) -> EnvelopeT:
    """Decode a response body into the declared envelope shape.

    An empty body or a JSON ``null`` yields an envelope without ``data``.
    Malformed JSON or a payload that does not fit the shape raises
    (``ValueError`` / ``pydantic.ValidationError``).
    """
    if not response.content:
        return envelope_cls()

    payload = response.json()
    if payload is None:
        return envelope_cls()

    return envelope_cls.model_validate(payload)
