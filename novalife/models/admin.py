from typing import Optional
from pydantic import BaseModel

class AdminAccount(BaseModel):
    username: str
    passwordHash: str
    email: str
    name: str
    lastLoginAt: Optional[str] = None

class AdminProfile(BaseModel):
    """Account as returned to the console, without the password hash."""
    username: str
    email: str
    name: str
    lastLoginAt: Optional[str] = None

class AdminSessionRequest(BaseModel):
    action: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

class AdminUpdateRequest(BaseModel):
    action: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
