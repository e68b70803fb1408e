import json

import pytest

from assistant.errors import MalformedResponse
from assistant.modules.parse import parse_replies, parse_summary, unwrap_fenced

PAYLOAD = '[{"originalReply":"A","vietnameseTranslation":"B"}, {"originalReply":"C","vietnameseTranslation":"D"}]'


@pytest.mark.parametrize(
    "raw",
    [
        f"```json\n{PAYLOAD}\n```",
        f"```\n{PAYLOAD}\n```",
        f"  ```json{PAYLOAD}```  ",
        f"```json\n\n{PAYLOAD}\n\n```\n",
    ],
)
def test_unwrap_fenced_returns_interior(raw: str):
    assert unwrap_fenced(raw) == PAYLOAD


@pytest.mark.parametrize("raw", [PAYLOAD, f"  {PAYLOAD}\n", "plain text answer", ""])
def test_unwrap_fenced_is_noop_without_fence(raw: str):
    once = unwrap_fenced(raw)

    assert once == raw.strip()
    assert unwrap_fenced(once) == once


def test_unwrap_fenced_is_idempotent_on_fenced_input():
    once = unwrap_fenced(f"```json\n{PAYLOAD}\n```")

    assert unwrap_fenced(once) == once


def test_parse_replies_keeps_order_and_fields():
    replies = parse_replies(f"```json\n{PAYLOAD}\n```")

    assert [(r.original_reply, r.vietnamese_translation) for r in replies] == [
        ("A", "B"),
        ("C", "D"),
    ]


def test_parse_replies_serializes_back_to_wire_names():
    replies = parse_replies(PAYLOAD)

    assert replies[0].model_dump(by_alias=True) == {
        "originalReply": "A",
        "vietnameseTranslation": "B",
    }


def test_parse_replies_ignores_extra_keys():
    raw = json.dumps([{"originalReply": "A", "vietnameseTranslation": "B", "tone": "fun"}])

    replies = parse_replies(raw)

    assert replies[0].original_reply == "A"


@pytest.mark.parametrize(
    "raw",
    [
        # second element lacks vietnameseTranslation
        '[{"originalReply":"A","vietnameseTranslation":"B"}, {"originalReply":"C"}]',
        # python attribute names instead of the wire names
        '[{"original_reply":"A","vietnamese_translation":"B"}]',
        '[{"originalReply":"A","vietnamese_translation":"B"}]',
        # mistyped field
        '[{"originalReply":"A","vietnameseTranslation":1}]',
        '[{"originalReply":null,"vietnameseTranslation":"B"}]',
        # wrong element type
        '[{"originalReply":"A","vietnameseTranslation":"B"}, "C"]',
        # wrong top-level shape
        '{"originalReply":"A","vietnameseTranslation":"B"}',
        '"just a string"',
        # empty sequence
        "[]",
        "```json\n[]\n```",
    ],
)
def test_parse_replies_rejects_whole_response(raw: str):
    with pytest.raises(MalformedResponse):
        parse_replies(raw)


def test_parse_replies_rejects_invalid_json_with_json_message():
    with pytest.raises(MalformedResponse) as excinfo:
        parse_replies("Here are your replies: [oops")

    assert "JSON" in excinfo.value.message
    assert excinfo.value.detail


def test_parse_summary_returns_trimmed_text_without_parsing():
    raw = "\n  🚀 Tiêu đề\n\n```json\n{}\n```\n#crypto  \n"

    assert parse_summary(raw) == raw.strip()


@pytest.mark.parametrize("raw", ["", "   \n"])
def test_parse_summary_rejects_blank_text(raw: str):
    with pytest.raises(MalformedResponse):
        parse_summary(raw)
