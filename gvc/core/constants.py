"""Firestore collection and field names (schema-in-code).

Firestore has no DDL. These constants are the single source of truth for
the collections the dashboard reads and the fields it filters and orders by.
"""

COLLECTION_SUBJECTS = "gvcs"
COLLECTION_DISCIPLINARY_CHANGES = "alteracoesGvc"
COLLECTION_COMMENDATIONS = "elogios"
COLLECTION_CONCEPTS = "conceitos"
COLLECTION_EQUIPMENT_LOANS = "cautelas"
COLLECTION_SUPPLY_REQUESTS = "solicitacoes"

# Filter fields
FIELD_SUBJECT_ID = "gvcId"
FIELD_SUBJECT_IDS = "gvcIds"
FIELD_STATUS = "status"

# Ordering fields (each collection sorts on its own timestamp)
FIELD_CREATED_AT = "criadoEm"
FIELD_UPDATED_AT = "atualizadoEm"
FIELD_REQUEST_CREATED_AT = "criadaEm"
FIELD_REQUEST_UPDATED_AT = "atualizadaEm"
FIELD_POSITION = "posicao"
