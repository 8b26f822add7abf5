"""Auth Routes — registration and login.

Invariants:
    - Both endpoints answer 200 {user, token} on success
    - Missing/blank email or password → 400; duplicate email → 400; bad login → 400
"""

import logging

from fastapi import APIRouter, Depends

from app.api.dependencies import get_account_service
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.services.account_service import AccountService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
async def register(
    body: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
):
    return await accounts.register(body.name, body.email, body.password)


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
):
    return await accounts.login(body.email, body.password)
