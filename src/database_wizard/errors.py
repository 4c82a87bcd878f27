"""Exceptions raised while executing generated DDL."""

from typing import Optional


class DatabaseWizardError(Exception):
    """Base class for database wizard errors."""


class ExecutorNotConfiguredError(DatabaseWizardError):
    """Raised when execution is requested without a SQL Server URL configured."""

    def __init__(self, setting: str = "SQLSERVER_URL"):
        self.setting = setting
        super().__init__(f"SQL Server URL '{setting}' not found in configuration")


class SqlExecutionError(DatabaseWizardError):
    """A batch failed on the server. Batches before it remain applied."""

    def __init__(self, message: str, number: Optional[int] = None, batch_index: Optional[int] = None):
        self.message = message
        self.number = number
        self.batch_index = batch_index
        super().__init__(message)


class ConfigurationError(DatabaseWizardError):
    """Raised when a setting is present but unusable."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid {setting}: {reason}")
