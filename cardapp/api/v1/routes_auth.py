# File: cardapp/api/v1/routes_auth.py

"""
Auth API routes: registration, login and the caller's profile.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from cardapp.api.deps import get_current_user, get_db
from cardapp.core.security import create_access_token
from cardapp.models.user import User
from cardapp.schemas.user import AuthResponse, ProfileResponse, UserCreate, UserLogin, UserRead
from cardapp.services.auth_service import authenticate_user, register_user

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    user = register_user(
        db,
        username=payload.username,
        email=payload.email,
        password=payload.password,
        role=payload.role,
    )
    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user.id),
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse, summary="User login")
def login(payload: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, username=payload.username, password=payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return AuthResponse(
        message="Login successful",
        token=create_access_token(user.id),
        user=UserRead.model_validate(user),
    )


@router.get("/profile", response_model=ProfileResponse, summary="Current user profile")
def profile(user: User = Depends(get_current_user)):
    return ProfileResponse(user=UserRead.model_validate(user))
