"""
Pattern extractors for the four event categories of an EHR log.

Each extractor sees every entry once, in document order, and keeps only what
it recognises. An entry that does not match is simply skipped; the same entry
may still be picked up by the other extractors.

Extractors hold per-parse state, so a new set is created for every parse.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from .models import (
    UNKNOWN,
    ChatMessage,
    EacReport,
    LogEntry,
    Player,
    RpcEvent,
    Severity,
)


SESSION_PATTERN = re.compile(
    r"\[Session\](.*?)\s*"
    r"\(ClientID:\s*([0-9]+)\s*"
    r"/\s*FriendCode:\s*(.*?)\s*"
    r"/\s*(?:HashPuid|Hashed PUID):\s*([a-f0-9]+)\s*"
    r"(?:/\s*Platform:\s*(.*?))?\)",
    re.IGNORECASE,
)

# Suffixes the client appends after the player name on join/host lines
NAME_SUFFIX_PATTERNS = (
    re.compile(r"\s*joined the lobby.*"),
    re.compile(r"\s*Hosted room.*"),
)

RPC_PATTERN = re.compile(r"\[ReceiveRPC\]From ID:\s*([0-9]+)\s*\((.*?)\)\s*:\s*[0-9]+\s*\((.*?)\)")

CHAT_PATTERN = re.compile(r"\[([0-9]{2}:[0-9]{2}:[0-9]{2})\]\[ReceiveChat\](.*?):(.*)")

TIMESTAMP_PATTERN = re.compile(r"\[([0-9]{2}:[0-9]{2}:[0-9]{2})\]")
EAC_MARKER_PATTERN = re.compile(r"\[EAC", re.IGNORECASE)
# Report body candidates, tried in this order
EAC_BODY_PATTERNS = (
    re.compile(r"EAC report:(.*)", re.IGNORECASE),
    re.compile(r"\[EAC.*?\](.*)", re.IGNORECASE),
)


class Extractor(ABC):
    """Base class for a single event category."""

    @abstractmethod
    def feed(self, entry: LogEntry) -> bool:
        """Inspect one entry. Returns True if it produced or updated a record."""
        pass

    @abstractmethod
    def results(self) -> list:
        """Records collected so far, in output order."""
        pass


class SessionExtractor(Extractor):
    """
    Collects players from ``[Session]`` lines.

    The first line seen for a client id is authoritative; later lines for the
    same id (reconnects, role announcements) are ignored.
    """

    def __init__(self):
        self._players: Dict[str, Player] = {}

    def feed(self, entry: LogEntry) -> bool:
        match = SESSION_PATTERN.search(entry.text)
        if not match:
            return False

        name, client_id, friend_code, hashed_puid, platform = match.groups()
        if client_id in self._players:
            return False

        self._players[client_id] = Player(
            name=clean_player_name(name),
            friend_code=friend_code.strip(),
            hashed_puid=hashed_puid.strip(),
            platform=platform.strip() if platform else UNKNOWN,
            client_id=client_id.strip(),
        )
        return True

    def results(self) -> List[Player]:
        return list(self._players.values())


class RpcExtractor(Extractor):
    """Counts ``[ReceiveRPC]`` lines per (player id, player name, RPC type)."""

    def __init__(self):
        self._counts: Dict[Tuple[str, str, str], int] = {}

    def feed(self, entry: LogEntry) -> bool:
        match = RPC_PATTERN.search(entry.text)
        if not match:
            return False

        key = match.groups()
        self._counts[key] = self._counts.get(key, 0) + 1
        return True

    def results(self) -> List[RpcEvent]:
        return [
            RpcEvent(player_id=player_id, player_name=player_name, rpc_type=rpc_type, count=count)
            for (player_id, player_name, rpc_type), count in self._counts.items()
        ]


class ChatExtractor(Extractor):
    """Keeps every ``[ReceiveChat]`` line; messages may contain colons."""

    def __init__(self):
        self._messages: List[ChatMessage] = []

    def feed(self, entry: LogEntry) -> bool:
        match = CHAT_PATTERN.search(entry.text)
        if not match:
            return False

        timestamp, sender, message = match.groups()
        self._messages.append(
            ChatMessage(timestamp=timestamp, sender=sender.strip(), message=message.strip())
        )
        return True

    def results(self) -> List[ChatMessage]:
        return list(self._messages)


class EacReportExtractor(Extractor):
    """
    Collects anti-cheat reports from error and fatal entries.

    Normal entries are never reports, whatever their text says. The report
    severity follows the entry tag, not words inside the report.
    """

    def __init__(self):
        self._reports: List[EacReport] = []

    def feed(self, entry: LogEntry) -> bool:
        if not entry.is_problem:
            return False

        text = entry.text
        if not EAC_MARKER_PATTERN.search(text):
            return False

        time_match = TIMESTAMP_PATTERN.search(text)
        self._reports.append(
            EacReport(
                timestamp=time_match.group(1) if time_match else UNKNOWN,
                report=extract_report_body(text),
                severity="Fatal" if entry.severity == Severity.FATAL else "Error",
                full_text=text.strip(),
            )
        )
        return True

    def results(self) -> List[EacReport]:
        return list(self._reports)


def clean_player_name(name: str) -> str:
    """Strip the join/host suffix the client writes after a player name."""
    cleaned = name.strip()
    for pattern in NAME_SUFFIX_PATTERNS:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def extract_report_body(text: str) -> str:
    """Report text of an EAC line; falls back to the line without its timestamp."""
    for pattern in EAC_BODY_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1).strip()
    return TIMESTAMP_PATTERN.sub("", text, count=1).strip()
