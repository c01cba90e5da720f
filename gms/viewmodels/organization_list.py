"""
Organizations list view-model: loading, search filtering and confirmed deletes
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from gms.client.organizations import ApiError, OrganizationsClient


class Notice(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str  # success | error
    text: str


class OrganizationListState(BaseModel):
    model_config = ConfigDict(frozen=True)

    organizations: List[Dict[str, Any]] = []
    search_term: str = ""
    is_loading: bool = True
    pending_delete_id: Optional[int] = None
    notice: Optional[Notice] = None


@dataclass(frozen=True)
class OrganizationsLoaded:
    organizations: List[Dict[str, Any]]


@dataclass(frozen=True)
class LoadFailed:
    message: str


@dataclass(frozen=True)
class SearchChanged:
    term: str


@dataclass(frozen=True)
class DeleteRequested:
    organization_id: int


@dataclass(frozen=True)
class DeleteCancelled:
    pass


@dataclass(frozen=True)
class OrganizationDeleted:
    organization_id: int


@dataclass(frozen=True)
class DeleteFailed:
    organization_id: int
    message: str


def update(state: OrganizationListState, action) -> OrganizationListState:
    if isinstance(action, OrganizationsLoaded):
        return state.model_copy(update={"organizations": list(action.organizations), "is_loading": False})

    if isinstance(action, LoadFailed):
        return state.model_copy(update={
            "is_loading": False,
            "notice": Notice(kind="error", text=action.message),
        })

    if isinstance(action, SearchChanged):
        return state.model_copy(update={"search_term": action.term})

    if isinstance(action, DeleteRequested):
        return state.model_copy(update={"pending_delete_id": action.organization_id, "notice": None})

    if isinstance(action, DeleteCancelled):
        return state.model_copy(update={"pending_delete_id": None})

    if isinstance(action, OrganizationDeleted):
        remaining = [org for org in state.organizations if org.get("id") != action.organization_id]
        return state.model_copy(update={
            "organizations": remaining,
            "pending_delete_id": None,
            "notice": Notice(kind="success", text="Organization deleted successfully"),
        })

    if isinstance(action, DeleteFailed):
        return state.model_copy(update={
            "pending_delete_id": None,
            "notice": Notice(kind="error", text=action.message),
        })

    raise TypeError(f"Unknown list action: {action!r}")


def visible_organizations(state: OrganizationListState) -> List[Dict[str, Any]]:
    term = state.search_term.strip().lower()
    if not term:
        return list(state.organizations)
    return [
        org for org in state.organizations
        if term in (org.get("name") or "").lower() or term in (org.get("email") or "").lower()
    ]


def load_organizations(state: OrganizationListState, client: OrganizationsClient) -> OrganizationListState:
    state = state.model_copy(update={"is_loading": True})
    try:
        organizations = client.list_organizations()
    except ApiError:
        return update(state, LoadFailed(message="Failed to load organizations"))
    return update(state, OrganizationsLoaded(organizations=organizations))


def confirm_delete(state: OrganizationListState, client: OrganizationsClient) -> OrganizationListState:
    """Delete the organization awaiting confirmation, if any"""
    organization_id = state.pending_delete_id
    if organization_id is None:
        return state
    try:
        client.delete_organization(organization_id)
    except ApiError:
        return update(state, DeleteFailed(organization_id=organization_id, message="Failed to delete organization"))
    return update(state, OrganizationDeleted(organization_id=organization_id))
