"""
Pydantic schemas shared by several routers.
"""

from typing import Any, ClassVar

from pydantic import model_validator

from workconnect.records import CamelModel, UserType


class UserResponse(CamelModel):
    """Public user fields (no password)."""

    id: int
    username: str
    email: str
    name: str
    user_type: UserType


class MessageResponse(CamelModel):
    message: str


class PartialUpdate(CamelModel):
    """
    Base for PATCH payloads.

    Every field is optional, but fields that are required on create may not
    be explicitly set to null. Unknown fields are ignored.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
