"""
Pydantic types for authentication
"""

from typing import Optional

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """
    Usuário resolvido a partir do bearer token
    """

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
