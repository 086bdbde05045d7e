"""Base exception class for all pipeline errors.

All pipeline-specific exceptions inherit from BaseWorkflowError so callers
can catch every failure of a run with a single exception type.
"""


class BaseWorkflowError(Exception):
    """Base exception for all pipeline errors.
    
    Attributes:
        message: Error message describing what went wrong
        context: Optional dictionary with additional error context
    """
    
    def __init__(
        self,
        message: str,
        context: dict | None = None
    ) -> None:
        """Initialize base workflow error.
        
        Args:
            message: Human-readable error message
            context: Optional dictionary with additional error context
                (e.g., stage name, input parameters)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
    
    def __str__(self) -> str:
        return self.message
    
    def __repr__(self) -> str:
        context_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{context_str})"
