"""
Record types produced by the log parser.

Every record is frozen: a ParseResult is built once per parse and never
updated afterwards. ``to_dict`` uses the column names of the exported tables.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


UNKNOWN = "Unknown"


class Severity(str, Enum):
    """Severity tag of a log entry, taken from the entry's markup."""
    NORMAL = "normal"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def coerce(cls, value: Optional[Any]) -> "Severity":
        """Accept a Severity, a tag name in any case, or None (normal)."""
        if value is None:
            return cls.NORMAL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NORMAL


@dataclass(frozen=True)
class LogEntry:
    """One rendered log line and its severity tag."""
    text: str
    severity: Severity = Severity.NORMAL

    @property
    def is_problem(self) -> bool:
        return self.severity in (Severity.ERROR, Severity.FATAL)


@dataclass(frozen=True)
class Player:
    name: str
    friend_code: str
    hashed_puid: str
    platform: str
    client_id: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "friendCode": self.friend_code,
            "hashedPuid": self.hashed_puid,
            "platform": self.platform,
            "clientId": self.client_id,
        }


@dataclass(frozen=True)
class RpcEvent:
    """Number of times one player sent one RPC type."""
    player_id: str
    player_name: str
    rpc_type: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playerId": self.player_id,
            "playerName": self.player_name,
            "rpcType": self.rpc_type,
            "count": self.count,
        }


@dataclass(frozen=True)
class ChatMessage:
    timestamp: str  # HH:MM:SS
    sender: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "timestamp": self.timestamp,
            "sender": self.sender,
            "message": self.message,
        }


@dataclass(frozen=True)
class EacReport:
    """Anti-cheat report found in an error or fatal entry."""
    timestamp: str  # HH:MM:SS or "Unknown"
    report: str
    severity: str  # "Fatal" | "Error"
    full_text: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "timestamp": self.timestamp,
            "report": self.report,
            "severity": self.severity,
            "fullText": self.full_text,
        }


@dataclass(frozen=True)
class ParseResult:
    """
    Everything extracted from one log document.

    The four collections are independent views over the same document;
    empty collections are a valid result.
    """
    players: List[Player] = field(default_factory=list)
    rpcs: List[RpcEvent] = field(default_factory=list)
    chats: List[ChatMessage] = field(default_factory=list)
    eac_reports: List[EacReport] = field(default_factory=list)

    @property
    def total_rpc_calls(self) -> int:
        return sum(rpc.count for rpc in self.rpcs)

    @property
    def is_empty(self) -> bool:
        return not (self.players or self.rpcs or self.chats or self.eac_reports)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "players": [p.to_dict() for p in self.players],
            "rpcs": [r.to_dict() for r in self.rpcs],
            "chats": [c.to_dict() for c in self.chats],
            "eacReports": [e.to_dict() for e in self.eac_reports],
        }
