from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str
    mongo_id: Optional[str] = None
    username: Optional[str] = None
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    imagen: Optional[str] = None
    zona: Optional[str] = None
    ubicacion: Optional[str] = None
    telefono: Optional[str] = None
    mostrar_contacto: bool = False
    favoritos: List[str] = field(default_factory=list)
    transacciones: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")

    def active_transactions(self) -> List[Dict[str, Any]]:
        """Transactions that have not been soft-deleted"""
        return [t for t in self.transacciones if not t.get("deleted")]
