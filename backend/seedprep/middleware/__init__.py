# Seedprep Middleware
from seedprep.middleware.security import SecurityMiddleware

__all__ = ["SecurityMiddleware"]
