from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext
from pydantic import ValidationError as ClaimsError

from estate_portal.auth.schemas import Role, TokenClaims
from estate_portal.config import settings
from estate_portal.core.exceptions import InvalidToken, TokenExpired

ALGORITHM = settings.JWT_ALGORITHM

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def issue_token(subject_id: UUID, email: str, role: Role, ttl: timedelta) -> str:
    """Mint a signed bearer token for ``subject_id`` that expires after ``ttl``."""
    expire = datetime.now(timezone.utc) + ttl
    to_encode = {
        "sub": str(subject_id),
        "email": email,
        "role": Role(role).value,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=ALGORITHM)


def verify_token(token: str) -> TokenClaims:
    """Decode and validate a bearer token.

    Verification is stateless: the claims are trusted once the signature and
    expiry check out, without looking the subject up in the database.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError:
        raise InvalidToken()

    try:
        return TokenClaims.model_validate(payload)
    except ClaimsError:
        raise InvalidToken()


def lawyer_token_ttl() -> timedelta:
    return timedelta(minutes=settings.LAWYER_TOKEN_EXPIRE_MINUTES)


def client_token_ttl() -> timedelta:
    return timedelta(minutes=settings.CLIENT_TOKEN_EXPIRE_MINUTES)
