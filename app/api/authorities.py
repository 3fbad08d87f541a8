"""Issuer authorization endpoints (universities and employers).

POST   /v1/authorities/{role}            — grant (administrator only)
DELETE /v1/authorities/{role}/{issuer}   — revoke (administrator only)
GET    /v1/authorities/{role}/{issuer}   — public authorization lookup
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from app.api.dependencies import require_caller
from app.api.errors import HANDLED_ERRORS, http_error
from app.models.principal import Principal
from app.services.authorization_registry import AuthorizationRegistry
from app.services.registry import employers, universities

router = APIRouter(prefix="/v1/authorities", tags=["authorities"])


class GrantIssuerIn(BaseModel):
    issuer: str
    name: str


class AuthorityOut(BaseModel):
    identity: str
    role: str
    authorized: bool
    display_name: str | None


def _authority_router(registry: AuthorizationRegistry) -> APIRouter:
    sub = APIRouter()

    @sub.post("", status_code=status.HTTP_204_NO_CONTENT)
    async def grant_issuer(
        body: GrantIssuerIn,
        principal: Annotated[Principal, Depends(require_caller)],
    ) -> Response:
        try:
            await registry.grant(principal.identity, body.issuer, body.name)
        except HANDLED_ERRORS as e:
            raise http_error(e) from None
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @sub.delete("/{issuer}", status_code=status.HTTP_204_NO_CONTENT)
    async def revoke_issuer(
        issuer: str,
        principal: Annotated[Principal, Depends(require_caller)],
    ) -> Response:
        try:
            await registry.revoke(principal.identity, issuer)
        except HANDLED_ERRORS as e:
            raise http_error(e) from None
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @sub.get("/{issuer}", response_model=AuthorityOut)
    async def get_authority(issuer: str) -> AuthorityOut:
        name = await registry.display_name(issuer)
        return AuthorityOut(
            identity=issuer,
            role=str(registry.role),
            authorized=name is not None,
            display_name=name,
        )

    return sub


router.include_router(_authority_router(universities), prefix="/universities")
router.include_router(_authority_router(employers), prefix="/employers")
