"""Input validation."""
from __future__ import annotations

import json

from cdnetworks_purge.errors import ValidationError
from cdnetworks_purge.models.inputs import Configuration
from cdnetworks_purge.models.purge import FileHeader, PurgeAction, PurgeTarget
from cdnetworks_purge.utils.lines import split_lines

REQUIRED_INPUTS = ("api-user", "api-key", "domain-id", "target")
LIST_INPUTS = ("file-urls", "dir-urls", "regex-patterns")


def _input_value(config: Configuration, name: str) -> str:
    value = getattr(config, name.replace("-", "_"))
    if hasattr(value, "get_secret_value"):
        return value.get_secret_value()
    return value


def _header_value(name: str, value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise ValidationError(
            f"Invalid file-headers JSON: value of {name!r} must be a string, "
            f"number, boolean or null"
        )
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    # json spelling, so true stays "true" and null stays "null"
    return json.dumps(value)


def _reject_constant(name: str):
    raise ValidationError(f"Invalid file-headers JSON: {name} is not valid JSON")


def parse_file_headers(text: str) -> list[FileHeader]:
    """Parse the file-headers input into ordered name/value pairs."""
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid file-headers JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ValidationError("Invalid file-headers JSON: file-headers must be an object")

    return [
        FileHeader(name=name, value=_header_value(name, value))
        for name, value in parsed.items()
    ]


def validate_configuration(config: Configuration) -> Configuration:
    """Check a configuration, raising ValidationError on the first problem found."""
    for name in REQUIRED_INPUTS:
        if not _input_value(config, name):
            raise ValidationError(f"Input required and not supplied: {name}")

    if not any(split_lines(_input_value(config, name)) for name in LIST_INPUTS):
        raise ValidationError(
            "At least one of file-urls, dir-urls, or regex-patterns must be provided"
        )

    if config.action not in tuple(PurgeAction):
        raise ValidationError('action must be either "delete" or "invalidate"')

    if config.target not in tuple(PurgeTarget):
        raise ValidationError('target must be either "staging" or "production"')

    if config.file_headers:
        parse_file_headers(config.file_headers)

    return config
