import hashlib
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from depo.config import SESSION_COOKIE_NAME
from depo.database import get_db
from depo.models import AuthSession

logger = logging.getLogger(__name__)

def hash_token(token: str) -> str:
    """
    Zwraca skrot SHA-256 tokenu sesji w postaci szesnastkowej.
    """
    return hashlib.sha256(token.encode()).hexdigest()

class AuthClient:
    """
    Odczytuje sesje zapisane przez dostawce logowania.
    
    Attributes:
        db: Sesja bazy danych.
    """
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_session(self, token: Optional[str]) -> Optional[AuthSession]:
        """
        Zwraca aktywna sesje dla tokenu z ciasteczka.
        
        Args:
            token: Surowy token sesji lub None.
        
        Returns:
            Optional[AuthSession]: Sesja, albo None gdy token jest pusty, nieznany lub wygasl.
        """
        if not token:
            return None
        result = await self.db.execute(
            select(AuthSession).filter(AuthSession.token_hash == hash_token(token))
        )
        session = result.scalar_one_or_none()
        if session is None or _is_expired(session):
            return None
        return session

def _is_expired(session: AuthSession) -> bool:
    if session.expires_at is None:
        return False
    expires_at = session.expires_at
    # SQLite zwraca daty bez strefy czasowej
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= datetime.now(timezone.utc)

async def get_auth_session(request: Request, db: AsyncSession = Depends(get_db)) -> Optional[AuthSession]:
    """
    Zaleznosc zwracajaca sesje uwierzytelniona dla biezacego zadania.
    
    Args:
        request: Biezace zadanie HTTP.
        db: Sesja bazy danych.
    
    Returns:
        Optional[AuthSession]: Aktywna sesja lub None.
    """
    session = await AuthClient(db).get_session(request.cookies.get(SESSION_COOKIE_NAME))
    if session is None:
        logger.info("No active session for %s %s", request.method, request.url.path)
    return session
