from typing import cast

from dependency_injector import containers, providers

from orgfolders.controllers.container import ControllerContainer
from orgfolders.repos.container import RepoContainer


class ApplicationContainer(containers.DeclarativeContainer):
    repos: RepoContainer = cast(RepoContainer, providers.Container(RepoContainer))
    controllers: ControllerContainer = cast(ControllerContainer, providers.Container(ControllerContainer, repos=repos))
