from passlib.context import CryptContext

# hashes are self-describing: "$pbkdf2-sha256$<rounds>$<salt>$<checksum>"
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)
