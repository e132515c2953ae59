"""Staff teams"""

from sqlalchemy import Column, String

from app.models.base import BaseModel


class Team(BaseModel):
    __tablename__ = "teams"

    name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Team {self.name}>"
