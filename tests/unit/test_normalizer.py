"""Unit tests for flattening A2A messages into model input."""
from exchange_agent.a2a.normalizer import normalize_messages, part_to_text


class TestPartToText:
    """Unit tests for part_to_text."""

    def test_text_part_is_literal(self):
        """Should return the text of a text part unchanged."""
        assert part_to_text({"kind": "text", "text": "Japan exchange rate"}) == "Japan exchange rate"

    def test_data_part_is_compact_json(self):
        """Should serialize data parts the way JSON.stringify does."""
        part = {"kind": "data", "data": {"country": "Japan", "amount": 100, "tags": ["a", "b"]}}
        assert part_to_text(part) == '{"country":"Japan","amount":100,"tags":["a","b"]}'

    def test_data_part_keeps_unicode(self):
        """Should not escape non-ASCII characters."""
        assert part_to_text({"kind": "data", "data": {"symbol": "¥"}}) == '{"symbol":"¥"}'

    def test_data_part_scalar(self):
        """Should serialize scalar data values."""
        assert part_to_text({"kind": "data", "data": 42}) == "42"
        assert part_to_text({"kind": "data", "data": None}) == "null"

    def test_unknown_kind_is_empty(self):
        """Should contribute an empty string for unknown part kinds."""
        assert part_to_text({"kind": "file", "file": {"uri": "s3://x"}}) == ""
        assert part_to_text({"text": "no kind"}) == ""
        assert part_to_text("not a part") == ""


class TestNormalizeMessages:
    """Unit tests for normalize_messages."""

    def test_mixed_parts_joined_by_newline(self):
        """Should join text and data parts with a newline."""
        messages = [{
            "role": "user",
            "parts": [
                {"kind": "text", "text": "a"},
                {"kind": "data", "data": {"x": 1}}
            ]
        }]
        assert normalize_messages(messages) == [{"role": "user", "content": 'a\n{"x":1}'}]

    def test_unknown_part_leaves_empty_line(self):
        """Should keep the position of unknown parts as an empty string."""
        messages = [{
            "role": "user",
            "parts": [
                {"kind": "text", "text": "a"},
                {"kind": "file", "file": {}},
                {"kind": "text", "text": "b"}
            ]
        }]
        assert normalize_messages(messages)[0]["content"] == "a\n\nb"

    def test_message_without_parts(self):
        """Should produce empty content when a message has no parts."""
        assert normalize_messages([{"role": "user"}]) == [{"role": "user", "content": ""}]
        assert normalize_messages([{"role": "user", "parts": []}]) == [{"role": "user", "content": ""}]

    def test_single_message_accepted(self):
        """Should accept a single message instead of a list."""
        message = {"role": "user", "parts": [{"kind": "text", "text": "hi"}]}
        assert normalize_messages(message) == [{"role": "user", "content": "hi"}]

    def test_order_preserved(self):
        """Should keep message order and roles."""
        messages = [
            {"role": "user", "parts": [{"kind": "text", "text": "first"}]},
            {"role": "agent", "parts": [{"kind": "text", "text": "second"}]},
            {"role": "user", "parts": [{"kind": "text", "text": "third"}]}
        ]
        result = normalize_messages(messages)
        assert [m["content"] for m in result] == ["first", "second", "third"]
        assert [m["role"] for m in result] == ["user", "agent", "user"]

    def test_input_not_mutated(self):
        """Should not modify the messages it is given."""
        messages = [{"role": "user", "parts": [{"kind": "data", "data": {"x": 1}}]}]
        normalize_messages(messages)
        assert messages == [{"role": "user", "parts": [{"kind": "data", "data": {"x": 1}}]}]

    def test_empty_list(self):
        """Should return an empty list for no messages."""
        assert normalize_messages([]) == []
