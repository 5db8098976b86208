"""List schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ListCreate(BaseModel):
    """Body of POST /lists."""

    title: str = Field(..., min_length=1, description="Title is required")
    description: str | None = None


class ListUpdate(BaseModel):
    """Body of PUT /lists/<id>. Only provided fields are changed."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None


class ListResponse(BaseModel):
    """List as returned by the API (camelCase keys on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    created_by: int = Field(serialization_alias="createdBy")
    created_at: str = Field(serialization_alias="createdAt")

    @classmethod
    def from_row(cls, row) -> "ListResponse":
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            created_by=row["created_by"],
            created_at=row["created_at"],
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
