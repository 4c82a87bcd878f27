"""SQL Server DDL generation from a validated schema description."""

from typing import List, Set

from .schema_model import ColumnDefinition, RelationDefinition, SchemaDescription, TableDefinition
from .validation import base_data_type

BATCH_TERMINATOR = "GO"

# sysname limit, applies to constraint names too
MAX_NAME_LENGTH = 128

LENGTH_TYPES = frozenset({"VARCHAR", "NVARCHAR", "CHAR", "NCHAR", "BINARY", "VARBINARY"})


def render_data_type(column: ColumnDefinition) -> str:
    """Render a column's data type, applying max_length where the type takes one."""
    base = base_data_type(column.data_type)

    if base in LENGTH_TYPES and column.max_length is not None:
        if column.max_length == -1:
            return f"{base}(MAX)"
        return f"{base}({column.max_length})"

    # Precision and scale travel inside the type string, e.g. DECIMAL(10,2)
    if base.startswith("DECIMAL") or base.startswith("NUMERIC"):
        return column.data_type.strip()

    return base


def generate_sql(schema: SchemaDescription) -> str:
    """
    Render the full DDL script for a schema.

    The schema must already have passed validate_schema(); nothing is
    re-checked here. Statement groups are separated by GO lines.
    """
    lines: List[str] = []
    used_names: Set[str] = set()

    def end_batch(blank: bool = True) -> None:
        lines.append(BATCH_TERMINATOR)
        if blank:
            lines.append("")

    lines.append(f"CREATE DATABASE [{schema.database_name}];")
    end_batch(blank=False)
    lines.append(f"USE [{schema.database_name}];")
    end_batch()

    for table in schema.tables:
        constraint = _unique_constraint_name(f"PK_{table.table_name}", used_names)
        lines.extend(_create_table(table, constraint))
        end_batch()

    for relation in schema.relations:
        constraint = _unique_constraint_name(
            f"FK_{relation.child_table}_{relation.parent_table}", used_names
        )
        lines.extend(_add_foreign_key(relation, constraint))
        end_batch()

    return "\n".join(lines) + "\n"


def _create_table(table: TableDefinition, constraint: str) -> List[str]:
    definitions = []
    for column in table.columns:
        definition = f"    [{column.column_name}] {render_data_type(column)}"
        if not column.is_nullable:
            definition += " NOT NULL"
        definitions.append(definition)

    definitions.append(
        f"    CONSTRAINT [{constraint}] PRIMARY KEY CLUSTERED ([{table.primary_key}])"
    )

    return [
        f"CREATE TABLE [{table.table_name}] (",
        ",\n".join(definitions),
        ");",
    ]


def _add_foreign_key(relation: RelationDefinition, constraint: str) -> List[str]:
    return [
        f"ALTER TABLE [{relation.child_table}]",
        f"    ADD CONSTRAINT [{constraint}]",
        f"    FOREIGN KEY ([{relation.child_column}])",
        f"    REFERENCES [{relation.parent_table}] ([{relation.parent_column}]);",
    ]


def _unique_constraint_name(name: str, used_names: Set[str]) -> str:
    """
    Fit a constraint name into MAX_NAME_LENGTH and make it unique in the script.

    Names already taken get _2, _3, ... appended; long names are cut short
    enough to keep the suffix.
    """
    candidate = name[:MAX_NAME_LENGTH]
    suffix = 2
    while candidate.lower() in used_names:
        tail = f"_{suffix}"
        candidate = name[:MAX_NAME_LENGTH - len(tail)] + tail
        suffix += 1
    used_names.add(candidate.lower())
    return candidate
