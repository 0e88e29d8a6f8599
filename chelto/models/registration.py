from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from chelto.core.database import Base


class Registration(Base):
    """A launch-campaign signup. Rows are insert-only."""

    __tablename__ = "launch_registrations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(191), unique=True, index=True, nullable=False)
    phone_number = Column(String(32), unique=True, index=True, nullable=False)
    city = Column(String(64), nullable=False)
    promocode = Column(String(32), unique=True, index=True, nullable=False)
    promocode_amount = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False)
    registered_at = Column(DateTime, default=datetime.utcnow, nullable=False)
