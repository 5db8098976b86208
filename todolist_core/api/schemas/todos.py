"""Todo schemas."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class TodoCreate(BaseModel):
    """Body of POST /lists/<list_id>/todos. New todos always start not done."""

    title: str = Field(..., min_length=1, description="Title is required")


class TodoUpdate(BaseModel):
    """Body of PUT /todos/<id>. Only provided fields are changed."""

    title: str | None = Field(default=None, min_length=1)
    done: StrictBool | None = None


class TodoResponse(BaseModel):
    """Todo as returned by the API (camelCase keys on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    list_id: int = Field(serialization_alias="listId")
    title: str
    done: bool

    @classmethod
    def from_row(cls, row) -> "TodoResponse":
        return cls(
            id=row["id"],
            list_id=row["list_id"],
            title=row["title"],
            done=bool(row["done"]),
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
