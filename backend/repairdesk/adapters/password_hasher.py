from werkzeug.security import check_password_hash, generate_password_hash

from repairdesk.config import settings


class PasswordHasher:
    """
    Thin adapter over werkzeug's salted password hashing.
    createUser only ever sees this interface, so the algorithm can change without touching services.
    """

    def __init__(self, method: str = None):
        self.method = method or settings.PASSWORD_HASH_METHOD

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self.method)

    def verify(self, password_hash: str, password: str) -> bool:
        return check_password_hash(password_hash, password)

    def health_check(self) -> bool:
        probe = "health-probe"
        return self.verify(self.hash(probe), probe)
