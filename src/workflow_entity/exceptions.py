"""Custom exceptions for workflow entity."""


class WorkflowEntityError(Exception):
    """Base exception for workflow entity errors."""
    pass


class ConfigurationError(WorkflowEntityError):
    """Raised when there's an error in configuration."""
    pass


class ScenarioError(WorkflowEntityError):
    """Raised when a scenario file cannot be loaded."""
    pass
