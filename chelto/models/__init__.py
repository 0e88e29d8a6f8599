from chelto.core.database import Base

from .rate_limit import RateLimitHit
from .registration import Registration
