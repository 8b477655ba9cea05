"""Data transfer objects for the demo layer."""
from typing import Any, Callable, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class DemoDefinition(BaseModel):
    """A registered demo: metadata plus the function that runs it."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    category: str
    description: str = ""
    func: Callable[..., None]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "category": self.category, "description": self.description}


class DemoResult(BaseModel):
    """Output of one demo run."""
    model_config = ConfigDict(frozen=True)

    pattern: str
    category: str
    lines: List[str] = Field(default_factory=list)
    duration_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
