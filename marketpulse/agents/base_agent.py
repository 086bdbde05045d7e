"""Base agent class for all pipeline stages.

This module defines the abstract base class every stage agent implements.

Agents follow the same rules:
- Each agent is a self-contained stage with one input and one output
- Agents are stateless (state passed in, not stored), so one instance can
  serve concurrent runs
- Dependencies (provider, config) are injected, not created internally
- Each stage returns new collections and never mutates its input
"""

from abc import ABC, abstractmethod
from typing import Any

from marketpulse.graph.state import PipelineState


class BaseAgent(ABC):
    """Base class for all stage agents.
    
    Concrete agents must:
    1. Inherit from BaseAgent
    2. Implement the `execute` method
    3. Implement the `name` property
    
    Attributes:
        config: Configuration dictionary (injected dependency)
    """
    
    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize agent with its configuration.
        
        Args:
            config: Configuration dictionary containing agent-specific settings.
                Defaults to an empty dictionary.
        
        Raises:
            ValueError: If config is not a dictionary
        """
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(
                f"config must be a dictionary, got {type(config).__name__}"
            )
        self.config = config
    
    @abstractmethod
    def execute(self, state: PipelineState) -> dict[str, Any]:
        """Run the stage against the pipeline state.
        
        Args:
            state: Current pipeline state
        
        Returns:
            Dictionary of state updates produced by this stage. The input
            state is left untouched.
        
        Raises:
            Exception: Any failure; the graph node wrapping the agent tags it
                with the stage label
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return agent name, e.g. "market_research_agent"."""
        pass
