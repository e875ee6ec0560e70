from sqlalchemy.orm import Session
from db.models import User
from typing import Optional


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_username(self, username: str) -> Optional[User]:
        return self.session.query(User).filter_by(username=username).first()

    def exist_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    def create(self, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)

        return user
