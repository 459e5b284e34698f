from .folder import DEFAULT_ORG_ID, Folder

__all__ = [
    "DEFAULT_ORG_ID",
    "Folder",
]
