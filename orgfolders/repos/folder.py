import logging
from pathlib import Path
from typing import Protocol, Sequence
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from orgfolders.exceptions import SourceError
from orgfolders.models import Folder
from orgfolders.repos.base import BaseRepo

logger = logging.getLogger(__name__)

_folder_list_adapter = TypeAdapter(list[Folder])


class FolderSource(Protocol):
    def fetch_by_org(self, org_id: UUID | None) -> list[Folder]: ...


class FolderRepo(BaseRepo[Folder]):
    """Repository for folders held in memory."""

    def __init__(self, folders: Sequence[Folder] = ()) -> None:
        super().__init__(Folder)
        self._folders = tuple(folders)

    def fetch_by_org(self, org_id: UUID | None) -> list[Folder]:
        """Get all folders owned by an organization, in source order."""
        if org_id is None:
            return []
        return self.filter(lambda folder: folder.org_id == org_id)

    def _load(self) -> tuple[Folder, ...]:
        return self._folders


class JsonFolderRepo(FolderRepo):
    """Repository for folders read from a JSON array on disk.

    The file is read on first access and the parsed folders are kept for the
    lifetime of the repo.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path)
        self._loaded: tuple[Folder, ...] | None = None

    def _load(self) -> tuple[Folder, ...]:
        if self._loaded is None:
            self._loaded = self._read()
        return self._loaded

    def _read(self) -> tuple[Folder, ...]:
        try:
            raw = self._path.read_bytes()
        except OSError as e:
            logger.error(f"Unable to read folder data; path: {self._path}, error: {e}")
            raise SourceError(f"unable to read folder data from {self._path}", source=str(self._path)) from e

        try:
            folders = _folder_list_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Invalid folder data; path: {self._path}, errors: {e.error_count()}")
            raise SourceError(f"invalid folder data in {self._path}", source=str(self._path)) from e

        logger.info(f"Loaded folder data; path: {self._path}, count: {len(folders)}")
        return tuple(folders)
