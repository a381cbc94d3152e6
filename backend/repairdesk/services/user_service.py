import logging
from typing import List, Optional

from repairdesk.adapters.password_hasher import PasswordHasher
from repairdesk.models.user import User, UserRole
from repairdesk.repositories.user_repo import UserRepository
from repairdesk.utils.transactions import smart_transaction
from sqlalchemy.orm import Session

log = logging.getLogger("repairdesk.users")


class UserService:
    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        self.db = db
        self.repo = UserRepository(db)
        self.hasher = hasher or PasswordHasher()

    def create(self, username: str, email: str, password: str, full_name: str,
               role: UserRole) -> User:
        """
        Duplicate username/email surface as sqlalchemy IntegrityError straight
        from the datastore; they are not translated.
        """
        with smart_transaction(self.db):
            u = self.repo.add(
                User(
                    username=username,
                    email=email,
                    password_hash=self.hasher.hash(password),
                    full_name=full_name,
                    role=UserRole(role),
                    is_active=True,
                )
            )
        log.info("user %s created with role %s", u.username, u.role.value)
        return u

    def list(self) -> List[User]:
        return self.repo.list()

    def technicians(self) -> List[User]:
        return self.repo.list(role=UserRole.TECHNICIAN)
