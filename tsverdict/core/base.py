"""
Base analysis function with self-describing configuration.

Functions own their descriptor (query name, type, argument names) in a YAML
file next to the module. Runtime arguments arrive as string tokens and are
parsed once, in from_arguments(), into a frozen instance.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml


class ConfigurationError(ValueError):
    """Raised when function arguments cannot be parsed. Fatal for the function."""

    def __init__(self, function: str, message: str):
        self.function = function
        super().__init__(f"{function}: {message}")


@dataclass(frozen=True)
class FunctionConfig:
    """Descriptor loaded from <name>.yaml."""
    name: str
    type: str
    version: str = "1.0"
    description: str = ""
    arguments: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


def load_function_config(config_path: Path) -> FunctionConfig:
    """Load a function descriptor from a YAML file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)

    return FunctionConfig(
        name=raw['function'],
        type=raw['type'],
        version=str(raw.get('version', '1.0')),
        description=raw.get('description', ''),
        arguments=list(raw.get('arguments', [])),
        metadata=raw.get('metadata', {}),
    )


@lru_cache(maxsize=None)
def get_function_config(name: str) -> FunctionConfig:
    """Descriptor for a packaged function, cached per name."""
    config_path = Path(__file__).parent / f"{name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(
            f"Function config not found for '{name}'. Expected at: {config_path}"
        )
    return load_function_config(config_path)


class AnalysisFunction(ABC):
    """
    Base class for analysis functions.

    Subclasses must:
    1. Define function_name (matches the YAML file stem)
    2. Implement from_arguments() and execute()
    3. Be immutable once constructed
    """

    function_name: str = ""

    @classmethod
    def config(cls) -> FunctionConfig:
        return get_function_config(cls.function_name)

    @property
    def query_name(self) -> str:
        """Identifier used to invoke the function from a query."""
        return self.config().name

    @property
    def type(self) -> str:
        return self.config().type

    @classmethod
    @abstractmethod
    def from_arguments(cls, args: Sequence[str]) -> "AnalysisFunction":
        """Parse argument tokens into a configured instance."""

    @abstractmethod
    def execute(self, data, ctx) -> None:
        """
        Evaluate against the resolved input and append verdicts to ctx.

        Args:
            data: MetricTimeSeries or a list of them, depending on the function
            ctx: FunctionCtx shared by all functions of the query
        """

    @property
    def arguments(self) -> List[str]:
        """Resolved arguments, for diagnostics only."""
        return []
