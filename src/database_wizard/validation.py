"""Schema validation rules for SQL Server DDL generation.

Every check appends a human-readable message; nothing here raises. Messages
come out in the order the checks run: database, then each table and its
columns, then each relation.
"""

import re
from typing import List, Set

from .schema_model import SchemaDescription, TableDefinition

# SQL Server identifiers: 1-128 chars, letter or underscore first
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]{0,127}$")

RESERVED_WORDS = frozenset({
    "SELECT", "INSERT", "UPDATE", "DELETE", "DROP", "CREATE", "ALTER", "TABLE",
    "DATABASE", "INDEX", "VIEW", "PROCEDURE", "FUNCTION", "TRIGGER", "USER",
    "SCHEMA", "GRANT", "REVOKE", "EXEC", "EXECUTE", "ORDER", "GROUP", "BY",
})

VALID_DATA_TYPES = frozenset({
    "INT", "BIGINT", "SMALLINT", "TINYINT",
    "VARCHAR", "NVARCHAR", "CHAR", "NCHAR", "TEXT", "NTEXT",
    "DECIMAL", "NUMERIC", "FLOAT", "REAL", "MONEY", "SMALLMONEY",
    "DATE", "DATETIME", "DATETIME2", "TIME", "DATETIMEOFFSET", "SMALLDATETIME",
    "BIT",
    "UNIQUEIDENTIFIER",
    "BINARY", "VARBINARY", "IMAGE",
})


def is_valid_identifier(identifier: str) -> bool:
    """Check a database, table or column name against SQL Server identifier rules."""
    if not identifier or not identifier.strip():
        return False
    if not IDENTIFIER_PATTERN.match(identifier):
        return False
    return identifier.upper() not in RESERVED_WORDS


def base_data_type(data_type: str) -> str:
    """Return the type keyword without any length/precision suffix, uppercased."""
    return data_type.split("(", 1)[0].strip().upper()


def validate_schema(schema: SchemaDescription) -> List[str]:
    """Validate a schema description and return the ordered list of errors."""
    errors: List[str] = []

    if not is_valid_identifier(schema.database_name):
        errors.append("Invalid database name")

    if not schema.tables:
        errors.append("At least one table is required")

    table_names: Set[str] = set()
    for table in schema.tables:
        if not is_valid_identifier(table.table_name):
            errors.append(f"Invalid table name: {table.table_name}")

        if table.table_name.lower() in table_names:
            errors.append(f"Duplicate table name: {table.table_name}")
        table_names.add(table.table_name.lower())

        errors.extend(_validate_columns(table))

    for relation in schema.relations:
        parent = schema.find_table(relation.parent_table)
        if parent is None:
            errors.append(f"Parent table '{relation.parent_table}' not found in schema")
        elif parent.find_column(relation.parent_column) is None:
            errors.append(
                f"Parent column '{relation.parent_column}' not found in table '{relation.parent_table}'"
            )

        child = schema.find_table(relation.child_table)
        if child is None:
            errors.append(f"Child table '{relation.child_table}' not found in schema")
        elif child.find_column(relation.child_column) is None:
            errors.append(
                f"Child column '{relation.child_column}' not found in table '{relation.child_table}'"
            )

    return errors


def _validate_columns(table: TableDefinition) -> List[str]:
    errors: List[str] = []
    name = table.table_name

    if not table.columns:
        errors.append(f"Table '{name}' must have at least one column")

    column_names: Set[str] = set()
    for column in table.columns:
        if not is_valid_identifier(column.column_name):
            errors.append(f"Invalid column name in table '{name}': {column.column_name}")

        if column.column_name.lower() in column_names:
            errors.append(f"Duplicate column name in table '{name}': {column.column_name}")
        column_names.add(column.column_name.lower())

        if not column.data_type.strip():
            errors.append(f"Column '{column.column_name}' in table '{name}' must have a data type")
        elif base_data_type(column.data_type) not in VALID_DATA_TYPES:
            errors.append(
                f"Invalid data type in table '{name}', column '{column.column_name}': {column.data_type}"
            )

    if table.primary_key.lower() not in column_names:
        errors.append(f"Primary key '{table.primary_key}' not found in columns of table '{name}'")

    return errors
