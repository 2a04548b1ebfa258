"""Static endpoint table.

Maps the logical resource names used by callers to the backend's physical
path segments. Lookups are case-insensitive (see EndpointResolver).
"""

from typing import Dict

DEFAULT_ENDPOINTS: Dict[str, str] = {
    "Patient": "patients",
    "Encounter": "encounters",
    "Document": "documents",
    "Observation": "observations",
    "Appointment": "appointments",
    "Medication": "medications",
    "Allergy": "allergies",
    "Problem": "problems",
    "Immunization": "immunizations",
    "Insurance": "insurance",
    "Provider": "providers",
    "User": "users",
}
