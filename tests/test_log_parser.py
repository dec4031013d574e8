"""Test the log extraction engine end to end."""

import pytest

from ehr_log_analyzer.core.log_parser import LogParser, parse_log
from ehr_log_analyzer.core.models import (
    ChatMessage,
    EacReport,
    LogEntry,
    ParseResult,
    Player,
    RpcEvent,
    Severity,
)
from ehr_log_analyzer.utils.exceptions import MalformedLogError


def test_scenario_session_join(parser):
    """Join line without platform produces one player with Unknown platform."""
    result = parser.parse_entries([
        ("[Session]Alice joined the lobby (ClientID: 7 / FriendCode: AL-123 / HashPuid: abc123)",
         "normal"),
    ])

    assert result.players == [
        Player(name="Alice", friend_code="AL-123", hashed_puid="abc123",
               platform="Unknown", client_id="7")
    ]
    assert result.players[0].to_dict() == {
        "name": "Alice", "clientId": "7", "friendCode": "AL-123",
        "hashedPuid": "abc123", "platform": "Unknown",
    }


def test_scenario_rpc_aggregation(parser):
    result = parser.parse_entries([
        ("[ReceiveRPC]From ID: 3 (Bob): 5 (Move)", "normal"),
        ("[ReceiveRPC]From ID: 3 (Bob): 5 (Move)", "normal"),
    ])

    assert result.rpcs == [RpcEvent(player_id="3", player_name="Bob", rpc_type="Move", count=2)]


def test_scenario_chat(parser):
    result = parser.parse_entries([("[14:22:05][ReceiveChat]Carl: gg everyone", "normal")])

    assert result.chats == [ChatMessage(timestamp="14:22:05", sender="Carl", message="gg everyone")]


def test_scenario_fatal_eac_report(parser):
    text = "[14:01:00][EAC] EAC report: Hack detected"
    result = parser.parse_entries([(text, "fatal")])

    assert result.eac_reports == [
        EacReport(timestamp="14:01:00", report="Hack detected", severity="Fatal", full_text=text)
    ]


def test_scenario_error_without_marker(parser):
    """Error entries without an [EAC marker are not reports."""
    result = parser.parse_entries([("[14:00:32][Error] EAC report: sync failed", "error")])
    assert result.eac_reports == []


@pytest.mark.parametrize("severity,expected", [("normal", 0), ("error", 1), ("fatal", 1)])
def test_eac_severity_gating(parser, severity, expected):
    result = parser.parse_entries([("[EAC report: foo", severity)])
    assert len(result.eac_reports) == expected


def test_no_matches_gives_empty_collections(parser, make_document):
    """Empty collections are a valid result, never None."""
    result = parser.parse_document(make_document(("[12:00:00] Game started", "")))

    assert result == ParseResult()
    assert result.players == []
    assert result.rpcs == []
    assert result.chats == []
    assert result.eac_reports == []
    assert result.is_empty


def test_parsing_is_idempotent(parser, sample_document):
    """Same document twice gives equal results, and no state leaks between parses."""
    first = parser.parse_document(sample_document)
    second = parser.parse_document(sample_document)

    assert first == second
    assert second.rpcs[0].count == 3


def test_one_entry_can_feed_several_extractors(parser):
    text = ("[10:00:00][ReceiveChat]Mod: [EAC] EAC report: flagged "
            "[ReceiveRPC]From ID: 1 (Mod): 2 (Kick)")
    result = parser.parse_entries([(text, "error")])

    assert len(result.chats) == 1
    assert len(result.rpcs) == 1
    assert len(result.eac_reports) == 1


def test_dedup_keeps_first_sighting_in_document_order(parser):
    entries = [
        LogEntry("[Session]P1 (ClientID: 1 / FriendCode: a / HashPuid: 01)"),
        LogEntry("[Session]P2 (ClientID: 2 / FriendCode: b / HashPuid: 02)"),
        LogEntry("[Session]P1 again (ClientID: 1 / FriendCode: c / HashPuid: 03 / Platform: Steam)"),
    ]
    result = parser.parse_entries(entries)

    assert [(p.client_id, p.name, p.hashed_puid) for p in result.players] == [
        ("1", "P1", "01"),
        ("2", "P2", "02"),
    ]


def test_sample_log(sample_result):
    """The bundled sample log exercises every category."""
    assert [p.name for p in sample_result.players] == ["Alice", "Bob", "Carl"]
    assert [p.platform for p in sample_result.players] == ["Unknown", "Steam", "Epic"]
    assert sample_result.players[0].friend_code == "AL-123"

    assert [(r.player_name, r.rpc_type, r.count) for r in sample_result.rpcs] == [
        ("Bob", "Move", 3),
        ("Alice", "SetName", 1),
    ]
    assert sample_result.total_rpc_calls == 4

    assert [c.message for c in sample_result.chats] == [
        "gg everyone",
        "meeting at 14:05: bring proof",
    ]

    assert [(e.timestamp, e.severity, e.report) for e in sample_result.eac_reports] == [
        ("14:00:30", "Error", "Speed hack suspected for Bob"),
        ("14:01:00", "Fatal", "Hack detected"),
    ]


def test_malformed_document_fails_whole_parse(parser):
    with pytest.raises(MalformedLogError):
        parser.parse_document("not a log file")


def test_parse_log_helper(sample_document, sample_result):
    assert parse_log(sample_document) == sample_result


def test_result_to_dict(sample_result):
    data = sample_result.to_dict()

    assert set(data) == {"players", "rpcs", "chats", "eacReports"}
    assert data["rpcs"][0] == {"playerId": "3", "playerName": "Bob", "rpcType": "Move", "count": 3}
    assert data["eacReports"][1]["severity"] == "Fatal"


def test_parse_entries_accepts_mixed_input(parser):
    result = parser.parse_entries([
        LogEntry("[EAC] EAC report: a", Severity.ERROR),
        ("[EAC] EAC report: b", Severity.FATAL),
    ])
    assert [e.severity for e in result.eac_reports] == ["Error", "Fatal"]


def test_parser_is_reusable_across_documents(make_document):
    parser = LogParser()
    rpc = "[ReceiveRPC]From ID: 3 (Bob): 5 (Move)"

    parser.parse_document(make_document((rpc, ""), (rpc, "")))
    result = parser.parse_document(make_document((rpc, "")))

    assert result.rpcs[0].count == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
