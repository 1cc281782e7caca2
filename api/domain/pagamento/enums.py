# api/domain/pagamento/enums.py
from __future__ import annotations

from enum import Enum


class StatusPagamento(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
