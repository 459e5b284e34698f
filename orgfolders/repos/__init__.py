from .folder import FolderRepo, FolderSource, JsonFolderRepo

__all__ = [
    "FolderRepo",
    "FolderSource",
    "JsonFolderRepo",
]
