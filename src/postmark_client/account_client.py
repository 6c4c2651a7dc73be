from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from .base_client import BaseClient
from .config import ClientOptions, settings
from .models import (
    BaseSignatureOptions,
    DefaultHeaderNames,
    DefaultResponse,
    DomainDetails,
    DomainEditOptions,
    DomainOptions,
    Domains,
    HttpMethod,
    Server,
    ServerOptions,
    Servers,
    SignatureDetails,
    SignatureOptions,
    Signatures,
)

# Paging applied to every listing unless the caller overrides it
DEFAULT_PAGING: Dict[str, Any] = {"count": 100, "offset": 0}


def _paged(filter: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    # None entries are left off the query string; None paging falls back to the default
    given = {k: v for k, v in (filter or {}).items() if v is not None}
    return {**DEFAULT_PAGING, **given}


class AccountClient(BaseClient):
    """Client for the account-level Postmark API (servers, domains, sender signatures).

    Every method maps to exactly one vendor endpoint and returns the parsed
    response model, or raises a ``PostmarkError``.
    """

    def __init__(
        self,
        account_token: Optional[str] = None,
        options: ClientOptions | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        options = options or settings
        super().__init__(
            account_token or options.account_token,
            DefaultHeaderNames.ACCOUNT_TOKEN,
            options,
            http_client,
        )

    # ---------------------------------------------------------------
    # Servers
    # ---------------------------------------------------------------

    async def get_servers(self, filter: Optional[Mapping[str, Any]] = None) -> Servers:
        """Retrieve a page of Servers; ``filter`` may carry ``count``, ``offset`` and ``name``."""
        return await self.process_request_without_body(HttpMethod.GET, "/servers", _paged(filter), Servers)

    async def get_server(self, id: int) -> Server:
        return await self.process_request_without_body(HttpMethod.GET, f"/servers/{id}", {}, Server)

    async def create_server(self, options: ServerOptions | Dict[str, Any]) -> Server:
        return await self.process_request_with_body(HttpMethod.POST, "/servers", options, Server)

    async def edit_server(self, id: int, options: ServerOptions | Dict[str, Any]) -> Server:
        return await self.process_request_with_body(HttpMethod.PUT, f"/servers/{id}", options, Server)

    async def delete_server(self, id: int) -> DefaultResponse:
        return await self.process_request_without_body(HttpMethod.DELETE, f"/servers/{id}", {}, DefaultResponse)

    # ---------------------------------------------------------------
    # Domains
    # ---------------------------------------------------------------

    async def get_domains(self, filter: Optional[Mapping[str, Any]] = None) -> Domains:
        """Retrieve a page of Domains."""
        return await self.process_request_without_body(HttpMethod.GET, "/domains", _paged(filter), Domains)

    async def get_domain(self, id: int) -> DomainDetails:
        return await self.process_request_without_body(HttpMethod.GET, f"/domains/{id}", {}, DomainDetails)

    async def create_domain(self, options: DomainOptions | Dict[str, Any]) -> DomainDetails:
        return await self.process_request_with_body(HttpMethod.POST, "/domains/", options, DomainDetails)

    async def edit_domain(self, id: int, options: DomainEditOptions | Dict[str, Any]) -> DomainDetails:
        return await self.process_request_with_body(HttpMethod.PUT, f"/domains/{id}", options, DomainDetails)

    async def delete_domain(self, id: int) -> DefaultResponse:
        return await self.process_request_without_body(HttpMethod.DELETE, f"/domains/{id}", {}, DefaultResponse)

    async def verify_domain_dkim(self, id: int) -> DomainDetails:
        """Trigger DKIM verification for a Domain."""
        return await self._domain_action(id, "verifyDKIM")

    async def verify_domain_return_path(self, id: int) -> DomainDetails:
        """Trigger Return-Path verification for a Domain."""
        return await self._domain_action(id, "verifyReturnPath")

    async def verify_domain_spf(self, id: int) -> DomainDetails:
        """Trigger SPF verification for a Domain."""
        return await self._domain_action(id, "verifySPF")

    async def rotate_domain_dkim(self, id: int) -> DomainDetails:
        """Create a new DKIM key for a Domain; the old key is revoked once the new one verifies."""
        return await self._domain_action(id, "rotateDKIM")

    async def _domain_action(self, id: int, action: str) -> DomainDetails:
        return await self.process_request_without_body(
            HttpMethod.PUT, f"/domains/{id}/{action}", {}, DomainDetails
        )

    # ---------------------------------------------------------------
    # Sender signatures
    # ---------------------------------------------------------------

    async def get_sender_signature(self, id: int) -> SignatureDetails:
        return await self.process_request_without_body(HttpMethod.GET, f"/senders/{id}", {}, SignatureDetails)

    async def get_sender_signatures(self, filter: Optional[Mapping[str, Any]] = None) -> Signatures:
        """Retrieve a page of Sender Signatures."""
        return await self.process_request_without_body(HttpMethod.GET, "/senders", _paged(filter), Signatures)

    async def create_sender_signature(self, options: SignatureOptions | Dict[str, Any]) -> SignatureDetails:
        return await self.process_request_with_body(HttpMethod.POST, "/senders/", options, SignatureDetails)

    async def edit_sender_signature(
        self, id: int, options: BaseSignatureOptions | Dict[str, Any]
    ) -> SignatureDetails:
        return await self.process_request_with_body(HttpMethod.PUT, f"/senders/{id}", options, SignatureDetails)

    async def delete_sender_signature(self, id: int) -> DefaultResponse:
        return await self.process_request_without_body(HttpMethod.DELETE, f"/senders/{id}", {}, DefaultResponse)

    async def resend_sender_signature_confirmation(self, id: int) -> DefaultResponse:
        """Ask Postmark to send a new confirmation email to the signature's address."""
        return await self.process_request_without_body(
            HttpMethod.POST, f"/senders/{id}/resend", {}, DefaultResponse
        )

    async def verify_sender_signature_spf(self, id: int) -> SignatureDetails:
        return await self.process_request_without_body(
            HttpMethod.POST, f"/senders/{id}/verifySpf", {}, SignatureDetails
        )

    async def request_new_dkim_for_sender_signature(self, id: int) -> SignatureDetails:
        return await self.process_request_without_body(
            HttpMethod.POST, f"/senders/{id}/requestNewDkim", {}, SignatureDetails
        )
