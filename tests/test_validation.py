import pytest

from cdnetworks_purge.errors import ValidationError
from cdnetworks_purge.models.inputs import Configuration
from cdnetworks_purge.utils.request_builder import apply_defaults
from cdnetworks_purge.utils.validation import parse_file_headers, validate_configuration


def make_config(**overrides) -> Configuration:
    values = {
        "api-user": "test-user",
        "api-key": "test-key",
        "domain-id": "test-domain",
        "target": "staging",
        "file-urls": "https://example.com/file1.txt",
    }
    values.update(overrides)
    return apply_defaults(Configuration(**values))


def test_valid_configuration():
    config = make_config()
    assert validate_configuration(config) is config


@pytest.mark.parametrize("name", ["api-user", "api-key", "domain-id", "target"])
def test_required_input(name):
    with pytest.raises(ValidationError) as e:
        validate_configuration(make_config(**{name: ""}))
    assert str(e.value) == f"Input required and not supplied: {name}"


@pytest.mark.parametrize("blank", ["", "\n", "  \n \n"])
def test_no_purge_targets(blank):
    config = make_config(**{"file-urls": blank, "dir-urls": blank, "regex-patterns": blank})
    with pytest.raises(ValidationError, match="At least one of file-urls, dir-urls, or regex-patterns"):
        validate_configuration(config)


@pytest.mark.parametrize(
    "field,value",
    [
        ("file-urls", "https://example.com/a"),
        ("dir-urls", "https://example.com/dir/"),
        ("regex-patterns", "https://example.com/.*\\.png"),
    ],
)
def test_any_purge_target_is_enough(field, value):
    config = make_config(**{"file-urls": "", field: value})
    validate_configuration(config)


@pytest.mark.parametrize("action", ["purge-everything", "Delete", "invalid-action"])
def test_invalid_action(action):
    with pytest.raises(ValidationError) as e:
        validate_configuration(make_config(action=action))
    assert str(e.value) == 'action must be either "delete" or "invalidate"'


def test_action_defaults_to_invalidate():
    assert make_config().action == "invalidate"


@pytest.mark.parametrize("target", ["prod", "Staging", "dev"])
def test_invalid_target(target):
    with pytest.raises(ValidationError) as e:
        validate_configuration(make_config(target=target))
    assert str(e.value) == 'target must be either "staging" or "production"'


def test_required_checked_before_action():
    config = make_config(**{"domain-id": "", "action": "purge-everything"})
    with pytest.raises(ValidationError, match="domain-id"):
        validate_configuration(config)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '"X-Custom"',
        '{"X-Custom": {"nested": "1"}}',
        '{"X-Custom": ["1"]}',
        '{"X-TTL": NaN}',
        '{"X-TTL": Infinity}',
        '{"X-TTL": -Infinity}',
    ],
)
def test_invalid_file_headers(text):
    with pytest.raises(ValidationError, match="Invalid file-headers JSON"):
        validate_configuration(make_config(**{"file-headers": text}))


def test_file_headers_pairs():
    headers = parse_file_headers('{"X-Custom": "1"}')
    assert [(h.name, h.value) for h in headers] == [("X-Custom", "1")]


def test_file_headers_coerced_in_order():
    headers = parse_file_headers(
        '{"b": 1, "a": true, "c": null, "d": "x", "e": 1.0, "f": 1.5}'
    )
    assert [(h.name, h.value) for h in headers] == [
        ("b", "1"),
        ("a", "true"),
        ("c", "null"),
        ("d", "x"),
        ("e", "1"),
        ("f", "1.5"),
    ]


def test_api_key_hidden_in_repr():
    assert "test-key" not in repr(make_config())
