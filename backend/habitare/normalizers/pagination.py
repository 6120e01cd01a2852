# habitare/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional


def normalize_offset_page(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    key: str,
    limit: Optional[int] = None,
    offset: int = 0,
) -> Dict[str, Any]:
    """
    Slice a full result list into one offset page.

    Response shape:
      {"total", "limit", "offset", "count", <key>: [...]}

    Notes:
    - A missing or non-positive limit means "everything after offset";
      the reported limit is then the total.
    - Negative offsets are treated as 0.
    """
    total = len(items)
    offset = max(offset, 0)
    if not limit or limit <= 0:
        limit = total

    page = items[offset:offset + limit]

    return {
        "total": total,
        "limit": limit,
        "offset": offset,
        "count": len(page),
        key: [normalize_fn(item) for item in page],
    }
