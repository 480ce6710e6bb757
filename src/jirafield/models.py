from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

@dataclass
class Issue:
    key: str
    raw_payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Issue":
        return cls(key=d.get("key") or "", raw_payload=d)

@dataclass
class IssueResponse:
    issues: List[Issue] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "IssueResponse":
        return cls(issues=[Issue.from_dict(i) for i in d.get("issues") or []])

@dataclass
class SyncReport:
    field_id: str
    fetch_status: Optional[int] = None
    updated: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed
