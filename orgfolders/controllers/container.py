from typing import cast

from dependency_injector import containers, providers

from orgfolders.controllers.folder.folder_controller import FolderController
from orgfolders.repos.container import RepoContainer


class ControllerContainer(containers.DeclarativeContainer):
    repos: RepoContainer = cast(RepoContainer, providers.DependenciesContainer())

    folder_controller = providers.Singleton(FolderController, folder_repo=repos.folder)
