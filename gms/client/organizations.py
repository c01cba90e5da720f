"""
HTTP client for the organizations API, used by the super-admin presentation layer.

One request per call. Nothing is retried here: a failed submission goes back
to the caller as ApiError and only a new user action sends it again.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from gms.schemas.organization import OrganizationRegistration
from gms.validation.errors import FieldError, deserialize_errors

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Request failed: transport error (status_code None) or non-2xx response"""

    def __init__(self, message: str, status_code: Optional[int] = None, field_errors: Optional[Dict[str, FieldError]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.field_errors = field_errors or {}


class OrganizationsClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000/api/v1",
        token: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
        prefix: str = "",
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(base_url=base_url, headers=headers, timeout=timeout)
        self._prefix = prefix.rstrip("/")

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self._prefix}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {str(e)}")
            raise ApiError(f"Could not reach the server: {e}") from e

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"{method} {url} returned a non-JSON body")
                raise ApiError("Invalid response from server", status_code=response.status_code) from e

        message, field_errors = _parse_error(response)
        logger.warning(f"{method} {url} returned {response.status_code}: {message}")
        raise ApiError(message, status_code=response.status_code, field_errors=field_errors)

    def list_organizations(self, search: Optional[str] = None) -> List[Dict]:
        params = {"search": search} if search else None
        return _data(self._request("GET", "/organizations/", params=params))

    def get_organization(self, organization_id: int) -> Dict:
        return _data(self._request("GET", f"/organizations/{organization_id}"))

    def create_organization(self, record: OrganizationRegistration) -> Dict:
        return _data(self._request("POST", "/organizations/", json=record.to_payload()))

    def delete_organization(self, organization_id: int) -> None:
        self._request("DELETE", f"/organizations/{organization_id}")

    def list_provinces(self) -> List[str]:
        return [p["name"] for p in _items(self._request("GET", "/locations/provinces"))]

    def list_cities(self, province: str) -> List[str]:
        return [c["name"] for c in _items(self._request("GET", f"/locations/provinces/{province}/cities"))]


def _parse_error(response: httpx.Response):
    try:
        body = response.json()
    except ValueError:
        return f"Request failed with status {response.status_code}", {}

    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, dict):
        errors = detail.get("errors")
        field_errors = deserialize_errors(errors) if isinstance(errors, dict) else {}
        return str(detail.get("message") or f"Request failed with status {response.status_code}"), field_errors
    if isinstance(detail, str):
        return detail, {}
    return f"Request failed with status {response.status_code}", {}


def _data(body: Any) -> Any:
    """Unwrap the {"data": ...} envelope of a successful response"""
    if not isinstance(body, dict) or "data" not in body:
        raise ApiError("Invalid response from server")
    return body["data"]


def _items(body: Any) -> List[Dict]:
    if not isinstance(body, list) or not all(isinstance(item, dict) and "name" in item for item in body):
        raise ApiError("Invalid response from server")
    return body
