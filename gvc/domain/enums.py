"""Domain enumerations for the GVC dashboard.

Values are the exact strings stored in Firestore documents.
"""

from enum import Enum


class SubjectStatus(str, Enum):
    """Whether a GVC is on the active roster."""

    ACTIVE = "ativo"
    INACTIVE = "inativo"


class DisciplinaryKind(str, Enum):
    """Kind of disciplinary change ("alteração")."""

    WARNING = "Advertência"
    SUSPENSION = "Suspensão"


class ConceptPolarity(str, Enum):
    POSITIVE = "Positivo"
    NEGATIVE = "Negativo"


class ItemCondition(str, Enum):
    """Condition of a loaned or requested item."""

    GOOD = "Bom"
    FAIR = "Regular"
    POOR = "Ruim"


class SupplyRequestStatus(str, Enum):
    """Delivery status of a supply request ("solicitação")."""

    COMPLETED = "concluida"
    PARTIAL = "parcial"
    PENDING = "pendente"


class HistoryEventKind(str, Enum):
    """Source category of a unified history event."""

    DISCIPLINARY_CHANGE = "alteracao"
    COMMENDATION = "elogio"
    CONCEPT = "conceito"
    EQUIPMENT_LOAN = "cautela"
    SUPPLY_REQUEST = "solicitacao"
