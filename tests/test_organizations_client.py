"""
Organizations HTTP client tests
"""
import httpx
import pytest

from gms.client import ApiError, OrganizationsClient
from gms.validation import ErrorCode, get_validator


def mock_client(handler):
    http = httpx.Client(base_url="http://gms.test/api/v1", transport=httpx.MockTransport(handler))
    return OrganizationsClient(http_client=http)


@pytest.mark.unit
def test_list_organizations_sends_search():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": [{"id": 1, "name": "Acme"}]})

    orgs = mock_client(handler).list_organizations(search="acme")

    assert orgs == [{"id": 1, "name": "Acme"}]
    assert seen[0].url.path == "/api/v1/organizations/"
    assert seen[0].url.params["search"] == "acme"


@pytest.mark.unit
def test_server_field_errors_surface_on_api_error(valid_payload):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(400, json={"detail": {
            "message": "Organization registration is invalid",
            "errors": {"email": {"code": "INVALID_FORMAT", "message": "Email must be a valid email address"}},
        }})

    record = get_validator().validate(valid_payload).record

    with pytest.raises(ApiError) as exc:
        mock_client(handler).create_organization(record)

    assert exc.value.status_code == 400
    assert exc.value.field_errors["email"].code == ErrorCode.INVALID_FORMAT
    assert len(calls) == 1


@pytest.mark.unit
def test_transport_failure_is_not_retried():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError) as exc:
        mock_client(handler).delete_organization(7)

    assert exc.value.status_code is None
    assert "Could not reach the server" in exc.value.message
    assert len(calls) == 1


@pytest.mark.unit
def test_plain_detail_message():
    def handler(request):
        return httpx.Response(404, json={"detail": "Organization not found"})

    with pytest.raises(ApiError) as exc:
        mock_client(handler).get_organization(3)

    assert exc.value.message == "Organization not found"
    assert exc.value.field_errors == {}


@pytest.mark.unit
def test_non_json_success_body_raises_api_error(valid_payload):
    def handler(request):
        return httpx.Response(200, text="<html>proxy login</html>")

    record = get_validator().validate(valid_payload).record

    with pytest.raises(ApiError) as exc:
        mock_client(handler).create_organization(record)

    assert exc.value.message == "Invalid response from server"
    assert exc.value.status_code == 200


@pytest.mark.unit
@pytest.mark.parametrize("response", [
    httpx.Response(200),
    httpx.Response(200, json={"message": "ok"}),
    httpx.Response(200, json=[1, 2]),
])
def test_success_without_data_envelope_raises_api_error(response):
    with pytest.raises(ApiError) as exc:
        mock_client(lambda request: response).get_organization(3)

    assert exc.value.message == "Invalid response from server"


@pytest.mark.unit
def test_malformed_location_list_raises_api_error():
    def handler(request):
        return httpx.Response(200, json={"data": ["Punjab"]})

    with pytest.raises(ApiError):
        mock_client(handler).list_provinces()


@pytest.mark.api
def test_round_trip_against_app(client, valid_payload):
    api = OrganizationsClient(http_client=client, prefix="/api/v1")
    record = get_validator().validate(valid_payload).record

    created = api.create_organization(record)
    assert created["adminUserName"] == "acme1"
    assert [org["id"] for org in api.list_organizations()] == [created["id"]]
    assert "Lahore" in api.list_cities("Punjab")
    assert "Punjab" in api.list_provinces()

    api.delete_organization(created["id"])
    assert api.list_organizations() == []
