"""FastAPI routes for the Identity bounded context.

Both endpoints hash or verify passwords with Argon2, so they are plain ``def``
functions run in FastAPI's threadpool. Each pushes the identity domain context
itself because the worker thread does not share the request's context.
"""

from fastapi import APIRouter, File, Form, UploadFile

from identity.api.schemas import LoginRequest, LoginResponse, RegisterResponse
from identity.domain import identity
from identity.user.authentication import authenticate
from identity.user.registration import register_user
from shared.uploads import discard_photo, store_photo

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201, response_model=RegisterResponse)
def register(
    login: str = Form(""),
    password: str = Form(""),
    name: str = Form(""),
    filedata: UploadFile | None = File(None),
) -> RegisterResponse:
    """Register a user from multipart form data with an optional profile photo.

    The photo is removed again when registration is rejected.
    """
    photo_url = store_photo(filedata)
    try:
        with identity.domain_context():
            user_id = register_user(login=login, password=password, display_name=name, photo_url=photo_url)
    except Exception:
        discard_photo(photo_url)
        raise
    return RegisterResponse(user_id=user_id)


@router.post("/login", status_code=201, response_model=LoginResponse)
def login(body: LoginRequest) -> LoginResponse:
    with identity.domain_context():
        return LoginResponse(**authenticate(body.login, body.password))
