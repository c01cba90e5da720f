"""
Database models
"""
from gms.models.organization import Organization
from gms.models.user import User

__all__ = [
    "Organization",
    "User",
]
