from .serializer import RUN_ID_PREFIX, SCHEMA_TAG, AuditSerializer, format_timestamp_utc

__all__ = ["AuditSerializer", "RUN_ID_PREFIX", "SCHEMA_TAG", "format_timestamp_utc"]
