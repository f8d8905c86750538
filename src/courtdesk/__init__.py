"""courtdesk - Back-office editing of bookable fields."""

from courtdesk.core.api import ApiClient, BranchApi, FieldApi
from courtdesk.session.controller import FieldEditSession

try:
    from importlib.metadata import version
    __version__ = version("courtdesk")
except Exception:
    # Package metadata is not available when running from a source checkout
    __version__ = "0.1.0"


def connect_api(api_url: str, token: str, timeout: float = 30.0) -> ApiClient:
    """Create an API client for a booking back-office.

    Args:
        api_url: Base URL of the booking API
        token: Operator bearer token
        timeout: Request timeout in seconds

    Returns:
        ApiClient to build FieldApi and BranchApi on
    """
    return ApiClient(api_url, token=token, timeout=timeout)


__all__ = ["ApiClient", "BranchApi", "FieldApi", "FieldEditSession", "connect_api"]
