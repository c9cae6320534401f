"""Authentication routes (register, login, me)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from api.security import create_access_token, get_current_user_required, to_user_response
from domain.model.errors import AuthenticationError, DuplicateError, ValidationError
from port.user_repository import UserRepository
from services.auth_service import authenticate, register as register_user


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user.

    Args:
        request: Registration request with email, password, names and optional phone/birthDate

    Returns:
        JWT token and user info

    Raises:
        HTTPException: 409 Conflict if email already exists, 400 Bad Request if validation fails
    """
    try:
        user = register_user(
            repo,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
            birth_date=request.birth_date,
        )
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    token = create_access_token(user)

    logger.info("User registered", extra={"userId": user.id, "email": user.email})

    return AuthResponse(token=token, user=to_user_response(user))


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Login user and return JWT token.

    Args:
        request: Login request with email and password

    Returns:
        JWT token and user info

    Raises:
        HTTPException: 401 if credentials are invalid (same response for unknown email)
    """
    try:
        user = authenticate(repo, email=request.email, password=request.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(user)

    logger.info("User logged in", extra={"userId": user.id, "email": user.email})

    return AuthResponse(token=token, user=to_user_response(user))


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user_required)):
    """Get current authenticated user info.

    Raises:
        HTTPException: 401 if not authenticated
    """
    return current_user
