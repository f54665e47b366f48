"""
Pydantic schemas for holiday records.

A holiday is an identifier plus two free‑form strings.  No format is
enforced on ``date``; the only validation is structural: the request
body must be a JSON object whose known fields are strings.  Unknown
fields are ignored and missing fields default to an empty string.

The acknowledgment models keep the field names clients already consume
(``InsertedID`` and ``DeletedCount``).
"""

from typing import Annotated, Any, Dict

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def clean_text(v: Any) -> Any:
    """Normalise a stored or submitted text field.

    ``null`` reads as an empty string.  Lone UTF‑16 surrogates, which JSON
    escapes such as ``"\\ud800"`` can produce but BSON cannot encode, are
    replaced with U+FFFD.  Other types are left for pydantic to reject.
    """
    if v is None:
        return ""
    if isinstance(v, str):
        return v.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return v


Text = Annotated[str, BeforeValidator(clean_text)]


class HolidayCreate(BaseModel):
    """Schema for creating a new holiday entry."""

    model_config = ConfigDict(extra="ignore")

    date: Text = Field("", description="Free‑form date string")
    name: Text = Field("", description="Holiday name")

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document to insert.

        Empty strings are left out of the stored document.
        """
        return self.model_dump(exclude_defaults=True)


class Holiday(BaseModel):
    """Schema for reading a stored holiday entry."""

    id: str = Field(..., validation_alias=AliasChoices("_id", "id"))
    date: Text = ""
    name: Text = ""

    @field_validator("id", mode="before")
    @classmethod
    def validate_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        if isinstance(v, str) and ObjectId.is_valid(v):
            return v
        raise ValueError("id must be an ObjectId")


class InsertAcknowledgement(BaseModel):
    """Storage confirmation for an insert."""

    model_config = ConfigDict(populate_by_name=True)

    inserted_id: str = Field(..., alias="InsertedID")


class DeleteAcknowledgement(BaseModel):
    """Storage confirmation for a delete.  ``deleted_count`` may be zero."""

    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(..., alias="DeletedCount")
