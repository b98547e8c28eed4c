import pytest

from config.config import EVALUATOR_CONFIG, LOGGING_CONFIG, PARSER_CONFIG, validate_config


def test_defaults_are_valid():
    validate_config()
    assert PARSER_CONFIG["on_parse_error"] == "recover"
    assert EVALUATOR_CONFIG["allow_partial"] is True


@pytest.mark.parametrize("config, key, value", [
    (PARSER_CONFIG, "on_parse_error", "ignore"),
    (PARSER_CONFIG, "error_template", "no placeholder"),
    (EVALUATOR_CONFIG, "allow_partial", "yes"),
    (LOGGING_CONFIG, "level", "VERBOSE"),
])
def test_invalid_values(monkeypatch, config, key, value):
    monkeypatch.setitem(config, key, value)
    with pytest.raises(AssertionError):
        validate_config()
