"""CDNetworks purge API."""
from __future__ import annotations

import httpx
import pydantic

from cdnetworks_purge.errors import ProtocolError, RemoteError, TransportError
from cdnetworks_purge.models.purge import PurgeRequest, PurgeResponse
from cdnetworks_purge.utils import uris
from cdnetworks_purge.utils.signing import Credentials


class PurgeClient:
    def __init__(
        self,
        api_url: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initializes the client for one api endpoint."""
        self.api_url = api_url
        self.http = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self) -> PurgeClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.http.close()

    def purge_url(self, domain_id: str) -> str:
        return uris.join(self.api_url, "domains", domain_id, "purge", quote=True)

    @staticmethod
    def headers(credentials: Credentials, on_behalf_of: str | None = None) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": credentials.authorization,
            "Date": credentials.date,
            "Accept": "application/json",
        }
        if on_behalf_of:
            headers["On-Behalf-Of"] = on_behalf_of
        return headers

    def submit(
        self,
        domain_id: str,
        request: PurgeRequest,
        credentials: Credentials,
        on_behalf_of: str | None = None,
    ) -> PurgeResponse:
        """Submits a purge request for a domain."""
        try:
            res = self.http.post(
                self.purge_url(domain_id),
                headers=self.headers(credentials, on_behalf_of),
                content=request.to_json(),
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not res.is_success:
            raise RemoteError(res.status_code, res.text)

        try:
            return PurgeResponse.model_validate_json(res.content)
        except pydantic.ValidationError as e:
            raise ProtocolError(f"Invalid purge response: {e}") from e
