from passlib.context import CryptContext

from .config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

# Verified against when the user does not exist, so a miss costs the same as a bad password.
_DUMMY_HASH = pwd_context.hash("fitbook-timing-equaliser")


def hash_password(password: str) -> str:
    return pwd_context.hash(str(password))


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        pwd_context.verify(str(plain or ""), _DUMMY_HASH)
        return False
    try:
        return pwd_context.verify(str(plain or ""), hashed)
    except (ValueError, TypeError):
        # Not a bcrypt hash (e.g. a row inserted by hand)
        return False
