"""Validate relational schema descriptions and generate SQL Server DDL."""

from .generator import generate_sql, render_data_type
from .schema_model import (
    ColumnDefinition,
    DatabaseCreationResult,
    RelationDefinition,
    SchemaDescription,
    TableDefinition,
)
from .validation import is_valid_identifier, validate_schema

__version__ = "0.1.0"

__all__ = [
    "ColumnDefinition",
    "DatabaseCreationResult",
    "RelationDefinition",
    "SchemaDescription",
    "TableDefinition",
    "generate_sql",
    "is_valid_identifier",
    "render_data_type",
    "validate_schema",
]
