# src/huddle/api/v1/endpoints/auth.py
"""Authentication endpoints for the Huddle API."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.concurrency import run_in_threadpool

from huddle.api.v1.dependencies import AuthServiceDep, CurrentClaimsDep, SessionDep
from huddle.schemas.user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    VerifyResponse,
)

router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    summary="Register a new account",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
async def register_user(
    payload: RegisterRequest,
    db: SessionDep,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """Create an account and log it in."""
    # bcrypt hashing is CPU bound; keep it off the event loop.
    result = await run_in_threadpool(
        auth_service.register,
        db,
        payload.username,
        payload.email,
        payload.password,
    )
    return AuthResponse(message="Registration successful", token=result.token, user=result.user)


@router.post(
    "/login",
    summary="Authenticate with email and password",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
async def login_user(
    payload: LoginRequest,
    db: SessionDep,
    auth_service: AuthServiceDep,
) -> AuthResponse:
    """Exchange credentials for a fresh session token."""
    result = await run_in_threadpool(auth_service.login, db, payload.email, payload.password)
    return AuthResponse(message="Login successful", token=result.token, user=result.user)


@router.get(
    "/verify",
    summary="Check a bearer token",
    response_model=VerifyResponse,
)
async def verify_token(claims: CurrentClaimsDep) -> VerifyResponse:
    """Echo the claims of a valid token."""
    return VerifyResponse(valid=True, user=claims)
