"""User Routes — registration, login, and the current user.

Invariants:
    - POST /users and POST /login are public; GET /users/me requires a token
    - Responses never include the password hash
"""

from fastapi import APIRouter, Depends, Request, status

from rings_api.api.auth_guard import require_identity
from rings_api.api.dependencies import get_token_service, get_user_repository
from rings_api.api.request_body import read_json_body
from rings_api.config import get_settings
from rings_api.core.domain_types import UserId
from rings_api.core.repository_protocols import UserRepository
from rings_api.core.tokens import TokenService
from rings_api.schemas.user import AuthResponse, UserResponse
from rings_api.services import user_service

router = APIRouter(tags=["users"])


@router.post(
    "/users", response_model=AuthResponse, status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
):
    body = await read_json_body(request)
    user, token = await user_service.register_user(
        users, tokens, body, bcrypt_rounds=get_settings().bcrypt_rounds,
    )
    return AuthResponse(user=UserResponse.from_record(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    tokens: TokenService = Depends(get_token_service),
):
    body = await read_json_body(request)
    user, token = await user_service.login_user(users, tokens, body)
    return AuthResponse(user=UserResponse.from_record(user), token=token)


@router.get("/users/me", response_model=UserResponse)
async def me(
    identity: UserId = Depends(require_identity),
    users: UserRepository = Depends(get_user_repository),
):
    user = await user_service.get_current_user(users, identity)
    return UserResponse.from_record(user)
