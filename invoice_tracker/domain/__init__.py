from .base import BaseModel
from .invoice import Invoice, utc_now

__all__ = [
    "BaseModel",
    "Invoice",
    "utc_now",
]
