import secrets

from fastapi import APIRouter, HTTPException, Request, Response

from chirpy.repositories.errors import NotFoundError
from chirpy.repositories.record_store import RecordStore
from chirpy.schemas import WebhookEvent
from chirpy.services.session_service import MissingAuthorizationError, api_key

router = APIRouter(prefix="/api/polka", tags=["hooks"])

USER_UPGRADED_EVENT = "user.upgraded"


def _get_store(request: Request) -> RecordStore:
    store = getattr(getattr(request.app, "state", None), "store", None)
    if not store:
        raise RuntimeError("RecordStore not configured")
    return store


@router.post("/webhooks", status_code=204)
def polka_webhook(payload: WebhookEvent, request: Request):
    expected = request.app.state.settings.polka_key
    try:
        key = api_key(request)
    except MissingAuthorizationError:
        raise HTTPException(401, "Incorrect key")
    if not expected or not secrets.compare_digest(key, expected):
        raise HTTPException(401, "Incorrect key")
    if payload.event != USER_UPGRADED_EVENT:
        return Response(status_code=204)
    try:
        _get_store(request).update_subscription(payload.data.user_id, True)
    except NotFoundError:
        raise HTTPException(404, "User not found")
    return Response(status_code=204)
