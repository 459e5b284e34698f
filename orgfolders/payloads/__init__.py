"""
Pydantic request/response models for folder retrieval.
"""

from .folders import FetchFolderRequest, FetchFolderResponse

__all__ = [
    "FetchFolderRequest",
    "FetchFolderResponse",
]
