"""JSON output contracts for CLI payloads."""

from .validate import SCHEMA_DOCTOR, SCHEMA_ERROR, SCHEMA_RUN, SCHEMA_VALIDATE, load_catalog, schemas_root, validate, validate_self

__all__ = ["SCHEMA_DOCTOR", "SCHEMA_ERROR", "SCHEMA_RUN", "SCHEMA_VALIDATE", "load_catalog", "schemas_root", "validate", "validate_self"]
