"""Tenant context resolution.

Every API view resolves a :class:`TenantContext` from the authenticated user
before doing anything else and hands it to the services explicitly. Client
payloads never contribute to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from shared.domain.errors import NoCommunityAssigned, Unauthorized
from shared.domain.policies import ADMIN_ROLE


@dataclass(frozen=True)
class TenantContext:
    """Identity and tenant of the caller for a single request."""

    user_id: UUID
    community_code: str
    role: str
    community_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE

    @classmethod
    def for_user(cls, user: Any) -> "TenantContext":
        if user is None or not getattr(user, "is_authenticated", False):
            raise Unauthorized()
        community = getattr(user, "community", None)
        if community is None:
            raise NoCommunityAssigned()
        return cls(
            user_id=user.pk,
            community_code=community.pk,
            role=user.role,
            community_active=community.is_active,
        )


def resolve_tenant_context(request) -> TenantContext:
    """Build the tenant context from ``request.user`` only."""

    return TenantContext.for_user(getattr(request, "user", None))


class TenantScopedViewMixin:
    """Resolve the tenant context after DRF authentication has run.

    The context is stored on ``self.tenant`` and ``request.tenant``; schema
    generation views get no tenant and must not touch the database.
    """

    tenant: TenantContext | None = None

    def initial(self, request, *args, **kwargs):  # type: ignore
        super().initial(request, *args, **kwargs)
        self.tenant = resolve_tenant_context(request)
        request.tenant = self.tenant

    def is_schema_view(self) -> bool:
        return getattr(self, "swagger_fake_view", False)
