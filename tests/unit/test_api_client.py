"""Tests for the booking API clients."""

import pytest
import requests
from unittest.mock import MagicMock

from courtdesk.core.api import ApiClient, BranchApi, FieldApi
from courtdesk.core.errors import ApiError, NetworkError, NotFound


def make_response(status_code=200, body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.content = b"" if body is None and not text else b"x"
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = body
    return response


class TestApiClient:
    """Test request plumbing and error mapping."""

    @pytest.fixture
    def client(self):
        client = ApiClient("https://booking.example.com/api/", token="secret", timeout=5)
        client._session = MagicMock()
        return client

    def test_url_and_timeout(self, client):
        client._session.request.return_value = make_response(body={"id": 1})

        assert client._make_request("GET", "/fields/1") == {"id": 1}

        client._session.request.assert_called_once_with(
            "GET", "https://booking.example.com/api/fields/1", timeout=5
        )

    def test_session_headers(self):
        client = ApiClient("https://booking.example.com", token="secret")

        headers = client.session.headers

        assert headers["Authorization"] == "Bearer secret"
        assert headers["Accept"] == "application/json"
        client.close()

    def test_no_token_no_auth_header(self):
        client = ApiClient("https://booking.example.com")
        assert "Authorization" not in client.session.headers
        client.close()

    def test_not_found(self, client):
        client._session.request.return_value = make_response(404, {"detail": "Field missing"})

        with pytest.raises(NotFound) as exc_info:
            client._make_request("GET", "/fields/99")

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Field missing"

    def test_server_error_with_message(self, client):
        client._session.request.return_value = make_response(422, {"message": "bad price"})

        with pytest.raises(ApiError) as exc_info:
            client._make_request("PATCH", "/fields/1", json={})

        assert str(exc_info.value) == "API Error (422): bad price"

    def test_server_error_without_json(self, client):
        client._session.request.return_value = make_response(502, text="Bad Gateway")

        with pytest.raises(ApiError) as exc_info:
            client._make_request("GET", "/fields/1")

        assert exc_info.value.detail == "Bad Gateway"

    def test_network_error(self, client):
        client._session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(NetworkError):
            client._make_request("GET", "/fields/1")

    def test_timeout_is_network_error(self, client):
        client._session.request.side_effect = requests.Timeout("slow")

        with pytest.raises(NetworkError):
            client._make_request("GET", "/fields/1")

    def test_empty_body(self, client):
        client._session.request.return_value = make_response(204)
        assert client._make_request("PATCH", "/fields/1", json={}) is None

    def test_context_manager_closes_session(self):
        with ApiClient("https://booking.example.com") as client:
            session = client.session
        assert client._session is None
        assert session is not None


class TestFieldApi:
    """Test field endpoints."""

    @pytest.fixture
    def client(self):
        return MagicMock(spec=ApiClient)

    def test_get_field_by_id(self, client):
        client._make_request.return_value = {"id": 42, "name": "Court A", "typeId": 1}

        field = FieldApi(client).get_field_by_id(42)

        client._make_request.assert_called_once_with("GET", "/fields/42")
        assert field.name == "Court A"
        assert field.type_id == 1

    def test_get_field_unwraps_envelope(self, client):
        client._make_request.return_value = {"data": {"id": 42, "name": "Court A"}}
        assert FieldApi(client).get_field_by_id(42).id == 42

    def test_get_field_empty_body(self, client):
        client._make_request.return_value = None
        with pytest.raises(NotFound):
            FieldApi(client).get_field_by_id(42)

    def test_get_field_types(self, client):
        client._make_request.return_value = [{"id": 1, "name": "Futsal"}]

        types = FieldApi(client).get_field_types()

        client._make_request.assert_called_once_with("GET", "/field-types")
        assert [t.name for t in types] == ["Futsal"]

    def test_get_field_types_empty(self, client):
        client._make_request.return_value = None
        assert FieldApi(client).get_field_types() == []

    def test_update_field(self, client):
        client._make_request.return_value = {"id": 42, "name": "Court B"}

        field = FieldApi(client).update_field(42, {"name": "Court B"})

        client._make_request.assert_called_once_with(
            "PATCH", "/fields/42", json={"name": "Court B"}
        )
        assert field.name == "Court B"

    def test_update_field_no_content(self, client):
        client._make_request.return_value = None
        assert FieldApi(client).update_field(42, {}) is None

    def test_update_field_with_image(self, client, png_file):
        client._make_request.return_value = {"data": {"id": 42, "imageUrl": "http://x/new.png"}}

        field = FieldApi(client).update_field_with_image(42, {"name": "Court A"}, png_file)

        client._make_request.assert_called_once_with(
            "PATCH",
            "/fields/42",
            data={"name": "Court A"},
            files={"imageUrl": ("court.png", png_file.content, "image/png")},
        )
        assert field.image_url == "http://x/new.png"


class TestBranchApi:
    """Test branch endpoints."""

    @pytest.fixture
    def client(self):
        return MagicMock(spec=ApiClient)

    def test_get_branch_by_id(self, client):
        client._make_request.return_value = {"data": {"id": 5, "name": "Main Branch"}}

        envelope = BranchApi(client).get_branch_by_id(5)

        client._make_request.assert_called_once_with("GET", "/branches/5")
        assert envelope.data.name == "Main Branch"

    def test_get_user_branches(self, client):
        client._make_request.return_value = {
            "data": [{"id": 5, "name": "Main"}, {"id": 7, "name": "East"}]
        }

        envelope = BranchApi(client).get_user_branches()

        client._make_request.assert_called_once_with("GET", "/branches/user")
        assert [b.id for b in envelope.data] == [5, 7]

    def test_get_user_branches_empty(self, client):
        client._make_request.return_value = None
        assert BranchApi(client).get_user_branches().data is None

    def test_not_found_is_api_error(self):
        error = NotFound("Branch 5 not found")
        assert isinstance(error, ApiError)
        assert error.status_code == 404
