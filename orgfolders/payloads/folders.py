from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from orgfolders.models import Folder


class FetchFolderRequest(BaseModel):
    """Request model for fetching the folders of an organization."""

    org_id: UUID | None = None
    page_size: int = 0
    page_token: int = 0

    @field_validator("org_id", mode="before")
    def parse_org_id(cls, value: object) -> UUID | None:
        # Unparseable ids match no folders instead of failing the request.
        if value is None or isinstance(value, UUID):
            return value
        try:
            return UUID(str(value))
        except ValueError:
            return None


class FetchFolderResponse(BaseModel):
    """Response model for a page of folders."""

    folders: list[Folder] = Field(default_factory=list)
    next_token: int | None = None
