"""HTTP clients for the booking back-office API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from courtdesk.core.errors import ApiError, NetworkError, NotFound
from courtdesk.models.branch import BranchEnvelope, BranchListEnvelope
from courtdesk.models.field import Field, FieldType
from courtdesk.models.image import ImageFile

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# Multipart form name carrying the uploaded image
IMAGE_FIELD_NAME = "imageUrl"


class ApiClient:
    """Thin wrapper around a ``requests`` session for one API endpoint.

    Examples:
        client = ApiClient("https://booking.example.com/api", token="secret")
        fields = FieldApi(client)
        field = fields.get_field_by_id(42)
    """

    def __init__(
        self,
        api_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            api_url: Base URL of the API (trailing slash is ignored)
            token: Bearer token of the signed-in operator
            timeout: Seconds to wait for each request
        """
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})
            if self.token:
                self._session.headers.update(
                    {"Authorization": f"Bearer {self.token}"}
                )
        return self._session

    def _make_request(self, method: str, endpoint: str, **kwargs) -> Any:
        """Make an API request.

        Args:
            method: HTTP method (GET, PATCH, etc.)
            endpoint: API endpoint path
            **kwargs: Additional request parameters

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            NetworkError: If the API could not be reached
            NotFound: If the API answers 404
            ApiError: For any other error status
        """
        url = f"{self.api_url}{endpoint}"
        kwargs.setdefault("timeout", self.timeout)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach {url}: {e}") from e

        if response.status_code >= 400:
            detail = self._error_detail(response)
            if response.status_code == 404:
                raise NotFound(detail)
            raise ApiError(response.status_code, detail)

        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "Unknown error"
        if isinstance(body, dict):
            return str(body.get("detail") or body.get("message") or "Unknown error")
        return str(body)

    def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


def _unwrap(body: Any) -> Any:
    """Strip a ``{"data": ...}`` envelope if the server sent one."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def _field_or_none(body: Any) -> Optional[Field]:
    body = _unwrap(body)
    return Field.model_validate(body) if body else None


class FieldApi:
    """Field endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def get_field_by_id(self, field_id: int) -> Field:
        body = _unwrap(self.client._make_request("GET", f"/fields/{field_id}"))
        if body is None:
            raise NotFound(f"Field {field_id} not found")
        return Field.model_validate(body)

    def get_field_types(self) -> List[FieldType]:
        body = _unwrap(self.client._make_request("GET", "/field-types"))
        return [FieldType.model_validate(item) for item in body or []]

    def update_field(self, field_id: int, payload: Dict[str, Any]) -> Optional[Field]:
        """Apply a JSON partial update."""
        body = self.client._make_request("PATCH", f"/fields/{field_id}", json=payload)
        return _field_or_none(body)

    def update_field_with_image(
        self, field_id: int, fields: Dict[str, str], image: ImageFile
    ) -> Optional[Field]:
        """Apply a multipart partial update carrying a new image."""
        files = {IMAGE_FIELD_NAME: (image.filename, image.content, image.content_type)}
        body = self.client._make_request(
            "PATCH", f"/fields/{field_id}", data=fields, files=files
        )
        return _field_or_none(body)


class BranchApi:
    """Branch endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def get_branch_by_id(self, branch_id: int) -> BranchEnvelope:
        body = self.client._make_request("GET", f"/branches/{branch_id}")
        return BranchEnvelope.model_validate(body or {})

    def get_user_branches(self) -> BranchListEnvelope:
        """List the branches the signed-in operator may access."""
        body = self.client._make_request("GET", "/branches/user")
        return BranchListEnvelope.model_validate(body or {})

