"""
Autenticação por bearer token

A validade do token é delegada ao Supabase Auth (GET /auth/v1/user).
"""

from typing import Optional

import httpx
from fastapi import Depends, Header, HTTPException, status

from app_types.auth import AuthenticatedUser
from utils.errors import UnauthorizedError
from utils.logging_config import get_logger
from utils.settings import settings

logger = get_logger(__name__)


class SupabaseAuthClient:
    """Cliente mínimo do provedor de identidade"""

    def __init__(
        self,
        base_url: str,
        service_role_key: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service_role_key = service_role_key
        self.timeout = timeout
        self.transport = transport

    async def get_user(self, access_token: str) -> AuthenticatedUser:
        """
        Resolver o usuário dono do token

        Raises:
            UnauthorizedError: token rejeitado ou provedor inacessível
        """
        headers = {
            "Authorization": f"Bearer {access_token}",
            "apikey": self.service_role_key,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(
                    f"{self.base_url}/auth/v1/user", headers=headers
                )
        except httpx.HTTPError as e:
            logger.error(f"Falha ao consultar provedor de identidade: {e}")
            raise UnauthorizedError("Token inválido ou expirado") from e

        if response.status_code != 200:
            raise UnauthorizedError("Token inválido ou expirado")

        data = response.json()
        if not data.get("id"):
            raise UnauthorizedError("Token inválido ou expirado")

        metadata = data.get("user_metadata") or {}
        return AuthenticatedUser(
            id=data["id"],
            email=data.get("email"),
            name=metadata.get("name"),
            role=metadata.get("role"),
        )


_auth_client: Optional[SupabaseAuthClient] = None


def get_auth_client() -> SupabaseAuthClient:
    """Instância global do cliente de autenticação"""
    global _auth_client
    if _auth_client is None:
        _auth_client = SupabaseAuthClient(
            settings.supabase_url,
            settings.supabase_service_role_key,
            timeout=settings.auth_timeout_seconds,
        )
    return _auth_client


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthenticatedUser:
    """
    Dependência das rotas autenticadas

    Exige o cabeçalho `Authorization: Bearer <token>`.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de acesso não fornecido",
            headers={"WWW-Authenticate": "Bearer"},
        )

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token de acesso não fornecido",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await auth_client.get_user(token.strip())
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=e.status_code,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
