from gms.client.organizations import ApiError, OrganizationsClient

__all__ = ["ApiError", "OrganizationsClient"]
