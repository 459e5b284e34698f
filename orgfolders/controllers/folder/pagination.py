from typing import Sequence, TypeVar

from orgfolders.exceptions import InvalidPageTokenError, InvalidPageTokenReason

T = TypeVar("T")


def paginate(items: Sequence[T], page_token: int, page_size: int) -> tuple[list[T], int | None]:
    """
    Slice one page out of an ordered sequence.

    Args:
        items: The full, already filtered sequence
        page_token: Zero-based offset of the first item on the page
        page_size: Maximum number of items on the page; non-positive sizes give an empty page

    Returns:
        Tuple of (page, next_token) where next_token is None once the page reaches the end

    Raises:
        InvalidPageTokenError: If page_token is negative or past the end of items
    """
    total = len(items)
    if page_token < 0:
        raise InvalidPageTokenError(InvalidPageTokenReason.NEGATIVE, page_token)
    if page_token > total:
        raise InvalidPageTokenError(InvalidPageTokenReason.EXCEEDS_AVAILABLE_DATA, page_token)

    end = max(page_token, min(page_token + page_size, total))
    next_token = end if end < total else None
    return list(items[page_token:end]), next_token
