from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from chirpy.repositories.errors import AlreadyExistsError, NotFoundError
from chirpy.schemas import Credentials, LoginOut, LoginRequest, UserOut
from chirpy.services.auth_service import AuthService, InvalidCredentialsError
from chirpy.services.session_service import current_user_id

router = APIRouter(prefix="/api", tags=["users"])


def _get_auth_service(request: Request) -> AuthService:
    svc = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService not configured")
    return svc


@router.post("/users", status_code=201, response_model=UserOut)
def create_user(payload: Credentials, request: Request):
    try:
        user = _get_auth_service(request).register(payload.email, payload.password)
    except AlreadyExistsError:
        raise HTTPException(409, "User already exists")
    return UserOut.from_user(user)


@router.put("/users", response_model=UserOut)
def update_user(payload: Credentials, request: Request):
    user_id = current_user_id(request)
    try:
        user = _get_auth_service(request).update_credentials(user_id, payload.email, payload.password)
    except NotFoundError:
        raise HTTPException(404, "User not found")
    return UserOut.from_user(user)


@router.post("/login", response_model=LoginOut)
def login(payload: LoginRequest, request: Request):
    try:
        result = _get_auth_service(request).login(payload.email, payload.password, payload.expires_in_seconds)
    except InvalidCredentialsError:
        raise HTTPException(401, "Unauthorized")
    user = result.user
    return LoginOut(id=user.id, email=user.email, is_chirpy_red=user.is_chirpy_red, token=result.token)
