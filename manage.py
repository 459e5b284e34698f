#!/usr/bin/env python3
"""
Organization folder browser

Lists the folders that belong to an organization, either all at once, a single
page, or every page in turn by following continuation tokens.

Usage:
    python manage.py --org-id ORG_ID [--mode MODE] [--page-size N] [--page-token N]

Modes:
    - all: Print every folder of the organization (default)
    - page: Print a single page starting at --page-token
    - walk: Print each page from --page-token until no pages remain

Environment Variables:
    FOLDERS_DATA_PATH: JSON file holding the folder records
    FOLDERS_DEFAULT_PAGE_SIZE: Page size used when --page-size is omitted
    LOGGING_LEVEL: fatal, error, warning, info, debug or notset
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

load_dotenv(override=True)
from logging_config import setup_logging  # noqa: E402
from orgfolders.container import ApplicationContainer  # noqa: E402
from orgfolders.exceptions import BaseError  # noqa: E402
from orgfolders.models import DEFAULT_ORG_ID  # noqa: E402
from orgfolders.payloads import FetchFolderRequest, FetchFolderResponse  # noqa: E402
from settings import settings  # noqa: E402

logger = logging.getLogger(__name__)


def print_response(response: FetchFolderResponse) -> None:
    print(response.model_dump_json())


def run(container: ApplicationContainer, args: argparse.Namespace) -> None:
    """Run the selected mode against the container's folder controller."""
    folder_controller = container.controllers.folder_controller()
    page_size = args.page_size if args.page_size is not None else settings.folders.default_page_size
    request = FetchFolderRequest(org_id=args.org_id, page_size=page_size, page_token=args.page_token)

    if args.mode == "all":
        print_response(folder_controller.get_all_folders(request))
    elif args.mode == "page":
        print_response(folder_controller.get_folders_page(request))
    elif args.mode == "walk":
        for i, response in enumerate(folder_controller.iter_folder_pages(request), 1):
            logger.info(f"Page {i}; count: {len(response.folders)}, next_token: {response.next_token}")
            print_response(response)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Organization folder browser")
    parser.add_argument("--org-id", default=DEFAULT_ORG_ID, help="Organization id (UUID)")
    parser.add_argument("--mode", choices=["all", "page", "walk"], default="all", help="Listing mode")
    parser.add_argument("--page-size", type=int, help="Number of folders per page")
    parser.add_argument("--page-token", type=int, default=0, help="Offset of the first folder on the page")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        run(ApplicationContainer(), args)
    except BaseError as e:
        logger.warning(f"Folder listing failed; {e}", extra=e.extra)
        sys.exit(1)


if __name__ == "__main__":
    main()
