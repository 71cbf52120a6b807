from sqlalchemy import Column, String
from app.core.database import Base


class Admin(Base):
    __tablename__ = "admin"

    email = Column(String(255), primary_key=True, index=True)
    name = Column(String(100), nullable=True)
    password_hash = Column(String(255), nullable=False)
