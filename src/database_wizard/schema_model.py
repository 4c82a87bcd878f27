"""Data models for database schema descriptions."""

from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


class WireModel(BaseModel):
    """Immutable model bound from camelCase JSON with case-insensitive keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _bind_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        field_names = {_normalize_key(name): name for name in cls.model_fields}
        bound: Dict[str, Any] = {}
        for key, value in data.items():
            # null on the wire falls back to the field default
            if value is None or not isinstance(key, str):
                continue
            name = field_names.get(_normalize_key(key))
            if name is not None:
                bound[name] = value
        return bound


class ColumnDefinition(WireModel):
    """Database column specification."""
    column_name: str = ""
    data_type: str = ""
    is_nullable: bool = False
    max_length: Optional[int] = None  # -1 means MAX


class TableDefinition(WireModel):
    """Database table specification."""
    table_name: str = ""
    columns: Tuple[ColumnDefinition, ...] = ()
    primary_key: str = ""

    def find_column(self, name: str) -> Optional[ColumnDefinition]:
        """Find a column by name, ignoring case."""
        wanted = name.lower()
        for column in self.columns:
            if column.column_name.lower() == wanted:
                return column
        return None


class RelationDefinition(WireModel):
    """Foreign key on child_table.child_column referencing parent_table.parent_column."""
    parent_table: str = ""
    parent_column: str = ""
    child_table: str = ""
    child_column: str = ""


class SchemaDescription(WireModel):
    """Complete database schema description."""
    database_name: str = ""
    tables: Tuple[TableDefinition, ...] = ()
    relations: Tuple[RelationDefinition, ...] = ()

    def get_table_names(self) -> List[str]:
        """Get list of all table names."""
        return [table.table_name for table in self.tables]

    def find_table(self, name: str) -> Optional[TableDefinition]:
        """Find a table by name, ignoring case."""
        wanted = name.lower()
        for table in self.tables:
            if table.table_name.lower() == wanted:
                return table
        return None


class DatabaseCreationResult(BaseModel):
    """Outcome of a validate, preview or create request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = False
    message: str = ""
    generated_sql: str = ""
    errors: List[str] = Field(default_factory=list)
