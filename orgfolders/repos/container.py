from dependency_injector import containers, providers

from orgfolders.repos.folder import JsonFolderRepo
from settings import settings


class RepoContainer(containers.DeclarativeContainer):
    folder = providers.Singleton(JsonFolderRepo, path=settings.folders.data_path)
