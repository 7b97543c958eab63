"""
Password Hashing

Handles:
    - scrypt hashing with a random salt per password
    - Constant-time verification
    - Dummy verification for unknown accounts
"""

# Python Packages
from werkzeug.security import check_password_hash, generate_password_hash





HASH_METHOD = "scrypt"

# Verified when the account does not exist so both paths cost one scrypt run
_DUMMY_HASH = generate_password_hash("dummy-password-for-timing", method = HASH_METHOD)



def hash_password(password: str) -> str:
    """ scrypt hash in werkzeug's "method$salt$hash" format... """

    return generate_password_hash(password, method = HASH_METHOD)


def verify_password(password: str, stored_hash: str) -> bool:
    """ Constant-time comparison of a supplied password against a stored hash... """

    if not password or not stored_hash:
        return False
    return check_password_hash(stored_hash, password)


def verify_dummy_password(password: str) -> bool:
    """
    Burn the same work as a real verification.
    Always returns False.
    """

    check_password_hash(_DUMMY_HASH, password or "")
    return False
