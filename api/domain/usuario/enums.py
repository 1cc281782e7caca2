# api/domain/usuario/enums.py
from __future__ import annotations

from enum import Enum


class PerfilUsuario(str, Enum):
    ADMIN = "ADMIN"
    AGENCY = "AGENCY"
    SUPPLIER = "SUPPLIER"
    CUSTOMER = "CUSTOMER"
