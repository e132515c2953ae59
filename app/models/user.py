"""Administrator accounts"""

from sqlalchemy import Column, String

from app.models.base import BaseModel


class User(BaseModel):
    """
    Back-office administrator. Usernames are stored lowercase so that
    login is case-insensitive.
    """
    __tablename__ = "users"

    username = Column(String(150), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    admin_name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
