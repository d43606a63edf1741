"""Purge request assembly."""
from __future__ import annotations

from cdnetworks_purge.models.inputs import Configuration
from cdnetworks_purge.models.purge import PurgeAction, PurgeRequest, PurgeTarget
from cdnetworks_purge.models.settings import DEFAULT_API_URL
from cdnetworks_purge.utils.lines import split_lines
from cdnetworks_purge.utils.validation import parse_file_headers


def apply_defaults(
    config: Configuration, default_api_url: str = DEFAULT_API_URL
) -> Configuration:
    """Fill in the optional inputs that have a default value."""
    return config.model_copy(
        update={
            "api_url": config.api_url or default_api_url,
            "action": config.action or PurgeAction.INVALIDATE.value,
        }
    )


def build_request(config: Configuration) -> PurgeRequest:
    """Build the purge payload from a validated configuration."""
    return PurgeRequest(
        action=PurgeAction(config.action or PurgeAction.INVALIDATE),
        target=PurgeTarget(config.target),
        file_urls=split_lines(config.file_urls) or None,
        dir_urls=split_lines(config.dir_urls) or None,
        regex_patterns=split_lines(config.regex_patterns) or None,
        name=config.name or None,
        file_headers=parse_file_headers(config.file_headers) if config.file_headers else None,
    )
