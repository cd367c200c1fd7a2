import bcrypt

from app.core.config import BCRYPT_ROUNDS

def get_password_hash(password: str) -> str:
    """
    Hash a plain password and return it as a UTF-8 string.
    """
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")

def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """
    Compare the password an admin typed with the hash stored in the DB.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False
