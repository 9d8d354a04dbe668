from matchmaker.entities.request import OneLineRequest


def test_parse_single_token():
    request = OneLineRequest.parse("connect\n")
    assert request.tokens == ["connect"]
    assert request.is_single_token
    assert request.command == "connect"


def test_parse_strips_surrounding_whitespace():
    request = OneLineRequest.parse("  protocol-version \r\n")
    assert request.command == "protocol-version"


def test_parse_multi_token_has_no_command():
    request = OneLineRequest.parse("connect now\n")
    assert request.tokens == ["connect", "now"]
    assert not request.is_single_token
    assert request.command is None


def test_parse_blank_line_has_no_command():
    request = OneLineRequest.parse("   \n")
    assert request.tokens == []
    assert request.command is None
