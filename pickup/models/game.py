from sqlalchemy import Column, Integer, String, Float
from sqlalchemy.orm import relationship
from pickup.database import Base

class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    # Stored as entered by the admin, e.g. "2025-06-01" and "18:30"
    date = Column(String, nullable=False)
    time = Column(String, nullable=False)
    location = Column(String, nullable=False)
    cost = Column(Float, nullable=False)
    max_players = Column(Integer, nullable=False)

    signups = relationship("Signup", back_populates="game")
