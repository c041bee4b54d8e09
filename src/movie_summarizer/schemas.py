from dataclasses import dataclass, field
from typing import Optional, List

from .models import MovieRecord


@dataclass
class FetchResult:
    title: str
    record: Optional[MovieRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    def to_text(self) -> str:
        """JSON movie data, or an error sentence when the lookup failed."""
        if self.record is not None:
            return self.record.to_json()
        return f"Error fetching movie details for '{self.title}': {self.error}"


@dataclass
class SummaryResponse:
    answer: str
    status: str
    title: Optional[str] = None
    file_path: Optional[str] = None
    tools_used: List[str] = field(default_factory=list)
    latency_ms: Optional[int] = None
    tool_latency_ms: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.status == "done"
