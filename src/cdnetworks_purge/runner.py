"""Runs a purge from inputs to reported result."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime

import httpx

from cdnetworks_purge.models.inputs import Configuration, InputProvider
from cdnetworks_purge.models.purge import PurgeResponse
from cdnetworks_purge.models.settings import env
from cdnetworks_purge.utils import signing
from cdnetworks_purge.utils.purge_client import PurgeClient
from cdnetworks_purge.utils.reporting import (
    Reporter,
    report_failure,
    report_request,
    report_success,
)
from cdnetworks_purge.utils.request_builder import apply_defaults, build_request
from cdnetworks_purge.utils.validation import validate_configuration


class Stage(enum.StrEnum):
    VALIDATING = "validating"
    BUILDING = "building"
    SIGNING = "signing"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RunResult:
    stage: Stage
    response: PurgeResponse | None = None
    error: str | None = None
    # stage the run was in when it failed
    failed_at: Stage | None = None

    @property
    def ok(self) -> bool:
        return self.stage is Stage.SUCCEEDED


def run_purge(
    provider: InputProvider,
    reporter: Reporter,
    *,
    default_api_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
    now: datetime | None = None,
) -> RunResult:
    """
    Validate inputs, submit one signed purge request and report the result.
    Every failure ends the run and is reported as a single failure message.
    """
    stage = Stage.VALIDATING
    try:
        config = apply_defaults(
            Configuration.from_provider(provider), default_api_url or env.api_url
        )
        config = validate_configuration(config)

        stage = Stage.BUILDING
        request = build_request(config)
        report_request(reporter, config.domain_id, request)

        stage = Stage.SIGNING
        credentials = signing.sign(config.api_user, config.secret_key, now)

        stage = Stage.REQUESTING
        with PurgeClient(
            config.api_url, timeout=timeout or env.timeout, transport=transport
        ) as client:
            response = client.submit(
                config.domain_id, request, credentials, config.on_behalf_of or None
            )
        report_success(reporter, response, config.domain_id, request)
    except Exception as e:
        message = report_failure(reporter, e)
        if env.verbose:
            raise
        return RunResult(Stage.FAILED, error=message, failed_at=stage)

    return RunResult(Stage.SUCCEEDED, response=response)
