"""Tests for inbound port dataclasses."""

from caramelbot.ports.inbound import InboundRequest, SlashCommand


class TestSlashCommand:
    def test_from_form(self):
        raw = (
            b"token=x&team_id=T1&command=%2Fcaramel&text=what%27s+up%3F"
            b"&user_id=U1&user_name=ada"
            b"&response_url=https%3A%2F%2Fhooks.slack.com%2Fcommands%2FT1%2F1%2Fabc"
        )
        cmd = SlashCommand.from_form(raw)
        assert cmd.command == "/caramel"
        assert cmd.text == "what's up?"
        assert cmd.user_id == "U1"
        assert cmd.user_name == "ada"
        assert cmd.response_url == "https://hooks.slack.com/commands/T1/1/abc"

    def test_blank_and_missing_fields(self):
        cmd = SlashCommand.from_form("command=%2Fcaramel&text=")
        assert cmd.text == ""
        assert cmd.response_url == ""

    def test_display_command(self):
        assert SlashCommand(command="/caramel").display_command == "/caramel"
        assert SlashCommand(command="caramel").display_command == "/caramel"
        assert SlashCommand(command="//caramel").display_command == "/caramel"


class TestInboundRequest:
    def test_fallback_body_is_compact_json(self):
        req = InboundRequest(headers={}, raw_body=b"", body={"a": 1, "b": "é"})
        assert req.fallback_body() == '{"a":1,"b":"é"}'

    def test_fallback_body_empty(self):
        assert InboundRequest(headers={}, raw_body=b"").fallback_body() == ""
