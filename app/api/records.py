from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.errors import HANDLED_ERRORS, http_error
from app.services.registry import asset_ledger

router = APIRouter(prefix="/v1/records", tags=["records"])


class RecordOwnerOut(BaseModel):
    record_id: int
    owner: str
    kind: str


@router.get("/{record_id}/owner", response_model=RecordOwnerOut)
async def get_record_owner(record_id: int) -> RecordOwnerOut:
    """Owner bound at mint time. Records are non-transferable."""
    try:
        ownership = await asset_ledger.owner_of(record_id)
    except HANDLED_ERRORS as e:
        raise http_error(e) from None
    return RecordOwnerOut(
        record_id=ownership.record_id,
        owner=ownership.owner,
        kind=str(ownership.kind),
    )
