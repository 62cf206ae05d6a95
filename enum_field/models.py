"""Pydantic models for member declarations and registry records.

- MemberOptions: validates the keyword options of ``Builder.member``
- MemberDeclaration: one validated, not-yet-committed member
- Member: one committed member, owned by a Registry
- RegistryConfig: per-registry settings
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class MemberOptions(BaseModel):
    """Options accepted by ``Builder.member``.

    ``object`` is aliased to ``value`` so the model never shadows the builtin.
    Whether a value was supplied is read from ``model_fields_set``, which keeps
    ``object=None`` distinct from "not given".
    """

    model_config = ConfigDict(extra="forbid")

    id: StrictInt | None = None
    value: Any = Field(default=None, alias="object")

    @field_validator("id", mode="before")
    @classmethod
    def _id_not_none(cls, v: Any) -> Any:
        # An explicit id=None is an invalid id, not a request for auto-assignment
        if v is None:
            raise ValueError("id must be an integer, got None")
        return v

    @property
    def has_value(self) -> bool:
        return "value" in self.model_fields_set


class MemberDeclaration(BaseModel):
    """A validated member waiting to be committed."""

    model_config = ConfigDict(frozen=True)

    name: str
    requested_id: int | None = None
    value: Any = None
    has_value: bool = False


class Member(BaseModel):
    """A committed member: its id, its name and the value accessors return."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    value: Any


class RegistryConfig(BaseModel):
    """Settings fixed when a host type's registry is created.

    Attributes:
        start_id: First id handed out by auto-assignment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_id: StrictInt = 1
