from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    # Presence is checked by the auth service so every gap gets the same message
    userId: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class LoginResponse(BaseModel):
    message: str
    role: str
    user: Dict[str, Any]
