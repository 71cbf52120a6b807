from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.api.deps import get_db, get_settings
from app.core.config import Settings
from app.services.auth import auth as auth_service
from app.schemas.auth import LoginRequest, LoginResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Log in as a student (by student ID) or an admin (by email)

    A wrong ID and a wrong password give the same 401 answer.
    """
    user = auth_service.authenticate(
        db,
        user_id=credentials.userId,
        password=credentials.password,
        role=credentials.role,
        bcrypt_rounds=settings.BCRYPT_ROUNDS,
    )
    return {"message": "Login successful!", "role": credentials.role, "user": user}
