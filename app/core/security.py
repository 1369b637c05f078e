from datetime import datetime, timedelta, timezone

from jose import JWTError
from jose import jwt
from passlib.context import CryptContext

from app.core.config import settings
from app.core.errors import AuthenticationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)

def create_token(*, user_id: int, email: str, nickname: str | None, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "user_id": user_id,
        "email": email,
        "iss": settings.JWT_ISSUER,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    if nickname:
        payload["nickname"] = nickname
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)

def create_access_token(user) -> str:
    return create_token(
        user_id=user.id,
        email=user.email,
        nickname=user.nickname,
        expires_delta=timedelta(hours=settings.ACCESS_TOKEN_HOURS),
    )

def decode_token(token: str) -> dict:
    try:
        data = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
            issuer=settings.JWT_ISSUER,
        )
    except JWTError:
        raise AuthenticationError("invalid or expired token")

    if not isinstance(data.get("user_id"), int):
        raise AuthenticationError("invalid token claims")
    return data
