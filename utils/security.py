import uuid
from typing import Union
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def create_access_token(
    data: dict,
    secret_key: str,
    expires_delta: timedelta,
    algorithm: str = ALGORITHM,
) -> str:
    to_encode = data.copy()
    # generate unique token identifier
    jti = str(uuid.uuid4())
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta, "jti": jti})
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str = ALGORITHM) -> Union[dict, None]:
    """Return the token's claims, or None if the signature is bad or it has expired."""
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        return None


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    """Spend the same time as a real verify when there is no stored hash to check."""
    pwd_context.dummy_verify()
