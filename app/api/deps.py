from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from app.core.config import Settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get a database session from the app's session factory.
    The session is closed (and any open transaction rolled back) after the request.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings
