"""Pytest configuration: test settings and shared folder fixtures."""

from __future__ import annotations

import os

os.environ.setdefault("FOLDERS_ENV", "test")

from uuid import UUID, uuid4  # noqa: E402

import pytest  # noqa: E402

from orgfolders.controllers.folder.folder_controller import FolderController  # noqa: E402
from orgfolders.models import Folder  # noqa: E402
from orgfolders.repos import FolderRepo  # noqa: E402

ORG_X = UUID("5b0f4c4e-8a3e-4b8e-9f0a-3d2c1b0a9f8e")
ORG_Y = UUID("a7d3e2f1-6c5b-4a49-8372-615f4e3d2c1b")


def make_folders(org_id: UUID, count: int, prefix: str) -> list[Folder]:
    return [Folder(id=uuid4(), name=f"{prefix}-{i}", org_id=org_id) for i in range(count)]


@pytest.fixture
def org_x_folders() -> list[Folder]:
    return make_folders(ORG_X, 10, "x")


@pytest.fixture
def org_y_folders() -> list[Folder]:
    return make_folders(ORG_Y, 4, "y")


@pytest.fixture
def all_folders(org_x_folders: list[Folder], org_y_folders: list[Folder]) -> list[Folder]:
    """Org X and org Y folders interleaved, org X order preserved."""
    mixed: list[Folder] = []
    remaining_y = list(org_y_folders)
    for i, folder in enumerate(org_x_folders):
        mixed.append(folder)
        if i % 2 == 1 and remaining_y:
            mixed.append(remaining_y.pop(0))
    return mixed


@pytest.fixture
def folder_repo(all_folders: list[Folder]) -> FolderRepo:
    return FolderRepo(all_folders)


@pytest.fixture
def folder_controller(folder_repo: FolderRepo) -> FolderController:
    return FolderController(folder_repo=folder_repo)
