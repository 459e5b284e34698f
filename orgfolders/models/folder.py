from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ORG_ID = "c1556e17-b7c0-45a3-a6ae-9546248fb17a"


class Folder(BaseModel):
    """A folder owned by a single organization."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID
    name: str = Field(min_length=1)
    org_id: UUID = Field(alias="orgId")
