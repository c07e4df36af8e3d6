# api/routes/auth.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from biblioteca.sa.database import get_db
from biblioteca.sa.repositories import UserRepository
from biblioteca.services.auth_service import AuthService
from api.deps import bearer_scheme, get_current_user_id
from api.schemas.user import UserProfile

router = APIRouter(prefix="/auth", tags=["auth"])

@router.get("/profile", response_model=UserProfile)
def get_profile(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Return the authenticated user's profile."""
    user = UserRepository(db).get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    user_id: str = Depends(get_current_user_id),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
):
    """Revoke the token used for this request."""
    AuthService(db).revoke(credentials.credentials)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
