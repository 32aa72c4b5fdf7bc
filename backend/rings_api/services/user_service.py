"""User Accounts — registration, login, and current-user lookup.

Invariants:
    - Passwords are hashed with bcrypt before they reach the store
    - Login failure is indistinguishable between unknown email and wrong password
    - Every successful registration or login mints a fresh token
"""

import asyncio
import logging
from typing import Any

from rings_api.core.domain_types import UserId
from rings_api.core.errors import (
    InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError,
)
from rings_api.core.passwords import check_password, hash_password
from rings_api.core.repository_protocols import UserRecord, UserRepository
from rings_api.core.tokens import TokenService
from rings_api.core.validate_input import require_valid, validate_payload
from rings_api.schemas.user import LoginRequest, UserCreate

logger = logging.getLogger(__name__)


async def register_user(
    users: UserRepository,
    tokens: TokenService,
    body: Any,
    bcrypt_rounds: int = 12,
) -> tuple[UserRecord, str]:
    payload: UserCreate = require_valid(validate_payload(UserCreate, body))
    email = payload.email.lower()
    if await users.get_by_email(email):
        raise UserAlreadyExistsError("email")
    if await users.get_by_username(payload.username):
        raise UserAlreadyExistsError("username")

    # bcrypt is CPU-bound; keep it off the event loop
    password_hash = await asyncio.to_thread(
        hash_password, payload.password, bcrypt_rounds,
    )
    user = await users.create({
        "username": payload.username,
        "email": email,
        "password_hash": password_hash,
        "user_class": payload.user_class,
    })
    logger.info("User registered", extra={"user_id": user.id})
    return user, tokens.issue(user.id)


async def login_user(
    users: UserRepository, tokens: TokenService, body: Any,
) -> tuple[UserRecord, str]:
    payload: LoginRequest = require_valid(validate_payload(LoginRequest, body))
    user = await users.get_by_email(payload.email.lower())
    if user is None:
        raise InvalidCredentialsError()
    matches = await asyncio.to_thread(
        check_password, payload.password, user.password_hash,
    )
    if not matches:
        raise InvalidCredentialsError()
    return user, tokens.issue(user.id)


async def get_current_user(users: UserRepository, identity: UserId) -> UserRecord:
    user = await users.get(identity)
    if user is None:
        raise UserNotFoundError(identity)
    return user
