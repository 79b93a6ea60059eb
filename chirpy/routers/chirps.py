from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Request, Response

from chirpy.domain.chirps import ChirpValidationError, validate_chirp
from chirpy.repositories.errors import AccessDeniedError, NotFoundError
from chirpy.repositories.record_store import RecordStore
from chirpy.schemas import ChirpCreate, ChirpOut
from chirpy.services.chirp_service import filter_and_sort
from chirpy.services.session_service import current_user_id

router = APIRouter(prefix="/api/chirps", tags=["chirps"])


def _get_store(request: Request) -> RecordStore:
    store = getattr(getattr(request.app, "state", None), "store", None)
    if not store:
        raise RuntimeError("RecordStore not configured")
    return store


@router.post("", status_code=201, response_model=ChirpOut)
def create_chirp(payload: ChirpCreate, request: Request):
    user_id = current_user_id(request)
    try:
        body = validate_chirp(payload.body)
    except ChirpValidationError as exc:
        raise HTTPException(400, str(exc))
    chirp = _get_store(request).create_chirp(body, user_id)
    return ChirpOut.from_chirp(chirp)


@router.get("", response_model=list[ChirpOut])
def list_chirps(request: Request, author_id: Optional[int] = None, sort: Optional[str] = None):
    chirps = _get_store(request).get_chirps()
    return [ChirpOut.from_chirp(chirp) for chirp in filter_and_sort(chirps, author_id, sort)]


@router.get("/{chirp_id}", response_model=ChirpOut)
def get_chirp(chirp_id: int, request: Request):
    try:
        chirp = _get_store(request).get_chirp(chirp_id)
    except NotFoundError:
        raise HTTPException(404, "Chirp not found")
    return ChirpOut.from_chirp(chirp)


@router.delete("/{chirp_id}", status_code=204)
def delete_chirp(chirp_id: int, request: Request):
    user_id = current_user_id(request)
    try:
        _get_store(request).delete_chirp(chirp_id, user_id)
    except NotFoundError:
        raise HTTPException(404, "Chirp not found")
    except AccessDeniedError:
        raise HTTPException(403, "Forbidden")
    return Response(status_code=204)
