from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from pickup.database import Base

SKILL_FIELDS = ("speed", "passing", "shooting", "defending")

class Signup(Base):
    __tablename__ = "signups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    game_id = Column(Integer, ForeignKey("games.id"))

    name = Column(String, nullable=False)
    position = Column(String, nullable=False)
    age = Column(Integer, nullable=False)

    # Self ratings, 1 to 5
    speed = Column(Integer, nullable=False)
    passing = Column(Integer, nullable=False)
    shooting = Column(Integer, nullable=False)
    defending = Column(Integer, nullable=False)

    paid = Column(Boolean, nullable=False, default=False, server_default="0")
    signup_time = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    game = relationship("Game", back_populates="signups")

    @property
    def avg_skill(self) -> float:
        return sum(getattr(self, f) for f in SKILL_FIELDS) / 4.0
