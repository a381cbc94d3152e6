from typing import List, Optional

from repairdesk.models.user import User, UserRole
from sqlalchemy.orm import Session


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def list(self, role: Optional[UserRole] = None) -> List[User]:
        query = self.db.query(User)
        if role is not None:
            query = query.filter(User.role == role)
        return query.order_by(User.id).all()

    def add(self, user: User) -> User:
        self.db.add(user)
        self.db.flush()
        return user
