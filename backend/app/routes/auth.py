"""
Shelter Admin Backend — Authentication Route Handlers
=======================================================

What:  POST /auth/login and POST /auth/register. Both are public.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes import ok
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.user import UserResponse
from app.security import TokenSigner, get_token_signer
from app.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=ApiResponse[LoginResponse],
    responses={
        400: {"description": "Missing username or password", "model": ErrorResponse},
        401: {"description": "Invalid credentials or disabled account", "model": ErrorResponse},
    },
    summary="Sign in",
    description="Returns a bearer token and the public profile of the signed-in user.",
)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
    signer: TokenSigner = Depends(get_token_signer),
):
    return ok(await auth_service.login(db, payload, signer))


@router.post(
    "/register",
    status_code=201,
    response_model=ApiResponse[UserResponse],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        409: {"description": "Username already taken", "model": ErrorResponse},
    },
    summary="Create an account",
    description="New accounts are active. role defaults to staff; realName defaults to the username.",
)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db_session)):
    return ok(await auth_service.register(db, payload), code=201)
