"""Validate, generate and execute a schema, always answering with a result object."""

import logging
from typing import Optional

from .config import Settings
from .errors import ConfigurationError, ExecutorNotConfiguredError, SqlExecutionError
from .executor import SqlServerExecutor
from .generator import generate_sql
from .schema_model import DatabaseCreationResult, SchemaDescription
from .validation import validate_schema

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "Validation failed. Please check the errors."


class DatabaseWizardService:
    """Runs the validate -> generate -> execute sequence for one schema at a time."""

    def __init__(self, executor: Optional[SqlServerExecutor] = None):
        self.executor = executor

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseWizardService":
        """Wire an executor only when a server URL is configured."""
        if not settings.execution_enabled:
            return cls()
        try:
            executor = SqlServerExecutor(settings.server_url, command_timeout=settings.command_timeout)
        except ValueError as e:
            raise ConfigurationError("SQLSERVER_URL", str(e)) from e
        return cls(executor)

    def validate(self, schema: SchemaDescription) -> DatabaseCreationResult:
        errors = validate_schema(schema)
        if errors:
            return DatabaseCreationResult(success=False, message=VALIDATION_FAILED_MESSAGE, errors=errors)
        return DatabaseCreationResult(success=True, message="Schema is valid")

    def preview(self, schema: SchemaDescription) -> DatabaseCreationResult:
        """Validate and generate SQL without touching any server."""
        result = self.validate(schema)
        if not result.success:
            return result

        try:
            sql = generate_sql(schema)
        except Exception as e:
            return self._unexpected_failure(e)

        return DatabaseCreationResult(success=True, message="SQL generated successfully", generated_sql=sql)

    async def create_database(self, schema: SchemaDescription) -> DatabaseCreationResult:
        """
        Validate, generate and execute the schema against the configured server.

        Execution stops at the first failing batch. Whatever ran before it is
        left in place; the result carries the generated SQL so the failure can
        be located.
        """
        result = self.preview(schema)
        if not result.success:
            return result

        sql = result.generated_sql
        try:
            if self.executor is None:
                raise ExecutorNotConfiguredError()
            await self.executor.execute_script_async(sql)
        except SqlExecutionError as e:
            errors = []
            if e.number is not None:
                errors.append(f"Error Number: {e.number}")
            errors.append(f"Error Message: {e.message}")
            return DatabaseCreationResult(
                success=False,
                message=f"SQL Error: {e.message}",
                generated_sql=sql,
                errors=errors,
            )
        except ExecutorNotConfiguredError as e:
            logger.warning("Execution requested but no SQL Server is configured")
            return DatabaseCreationResult(
                success=False, message=str(e), generated_sql=sql, errors=[str(e)]
            )
        except Exception as e:
            failure = self._unexpected_failure(e)
            failure.generated_sql = sql
            return failure

        logger.info("Created database %s", schema.database_name)
        return DatabaseCreationResult(
            success=True,
            message=f"Database '{schema.database_name}' created successfully!",
            generated_sql=sql,
        )

    @staticmethod
    def _unexpected_failure(exc: Exception) -> DatabaseCreationResult:
        logger.exception("Unexpected error while processing schema")
        return DatabaseCreationResult(
            success=False,
            message=f"Error: {exc}",
            errors=[f"{type(exc).__name__}: {exc}"],
        )
