import logging
from typing import Iterator

from orgfolders.controllers.folder.pagination import paginate
from orgfolders.payloads import FetchFolderRequest, FetchFolderResponse
from orgfolders.repos import FolderSource


class FolderController:
    """Controller for folder retrieval."""

    def __init__(self, folder_repo: FolderSource) -> None:
        self._logger = logging.getLogger(__name__)
        self._folder_repo = folder_repo

    def get_all_folders(self, request: FetchFolderRequest) -> FetchFolderResponse:
        """Get every folder of the requested organization."""
        folders = self._folder_repo.fetch_by_org(request.org_id)
        self._logger.debug(f"Fetched all folders; org_id: {request.org_id}, count: {len(folders)}")
        return FetchFolderResponse(folders=folders)

    def get_folders_page(self, request: FetchFolderRequest) -> FetchFolderResponse:
        """
        Get one page of the requested organization's folders.

        Args:
            request: Organization id, page size and page token (start offset)

        Returns:
            The page and, when folders remain after it, the token of the next page

        Raises:
            InvalidPageTokenError: If the page token is negative or past the available folders
            SourceError: If the folder source cannot be read
        """
        folders = self._folder_repo.fetch_by_org(request.org_id)
        page, next_token = paginate(folders, request.page_token, request.page_size)
        self._logger.debug(
            f"Fetched folder page; org_id: {request.org_id}, page_token: {request.page_token}, "
            f"page_size: {request.page_size}, count: {len(page)}, next_token: {next_token}"
        )
        return FetchFolderResponse(folders=page, next_token=next_token)

    def iter_folder_pages(self, request: FetchFolderRequest) -> Iterator[FetchFolderResponse]:
        """Yield pages starting at the request's token, following next tokens to the end."""
        page_request = request
        while True:
            response = self.get_folders_page(page_request)
            yield response
            # A page that made no progress would return the same token forever.
            if response.next_token is None or not response.folders:
                return
            page_request = page_request.model_copy(update={"page_token": response.next_token})
