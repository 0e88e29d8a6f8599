from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from chelto.core.database import Base


class RateLimitHit(Base):
    __tablename__ = "rate_limit_hits"

    id = Column(Integer, primary_key=True, index=True)
    ip_address = Column(String(45), index=True, nullable=False)
    action = Column(String(50), index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
