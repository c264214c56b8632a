"""HTTP client bound to the Bookshelf API base URL."""

import httpx

from src.bookshelf.runtime.context import get_config


def create_api_client(
    base_url: str | None = None, timeout: float | None = None
) -> httpx.Client:
    """Create an httpx client whose relative requests resolve under the API root.

    Args:
        base_url: API root such as ``http://localhost:8000/api/`` (defaults to config)
        timeout: Request timeout in seconds (defaults to config)
    """
    cfg = get_config().frontend
    return httpx.Client(
        base_url=base_url or cfg.api_base_url,
        timeout=timeout if timeout is not None else cfg.timeout,
        headers={"Accept": "application/json"},
    )
