"""Authentication DTOs"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class AuthStatusResponse(BaseModel):
    authenticated: bool
    user: Optional[Dict[str, Any]] = None


class LogoutResponse(BaseModel):
    success: bool = True
