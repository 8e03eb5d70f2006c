from .base import JobSearchBase
from .jsearch import JSearchSource

__all__ = ["JobSearchBase", "JSearchSource"]
