from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class DefaultHeaderNames(str, Enum):
    SERVER_TOKEN = "X-Postmark-Server-Token"
    ACCOUNT_TOKEN = "X-Postmark-Account-Token"


class DeliveryType(str, Enum):
    LIVE = "Live"
    SANDBOX = "Sandbox"


class ServerColor(str, Enum):
    PURPLE = "Purple"
    BLUE = "Blue"
    TURQUOISE = "Turquoise"
    GREEN = "Green"
    RED = "Red"
    YELLOW = "Yellow"
    GREY = "Grey"
    ORANGE = "Orange"


class PostmarkModel(BaseModel):
    """Base for every vendor record.

    Vendor JSON uses PascalCase keys; attributes are snake_case with the
    vendor key as alias. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> Dict[str, Any]:
        """Serialise to the vendor's JSON shape, dropping unset (``None``) fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Generic responses
# ---------------------------------------------------------------------------


class DefaultResponse(PostmarkModel):
    """Acknowledgement returned by delete/resend style endpoints."""

    error_code: int = Field(0, alias="ErrorCode")
    message: str = Field("", alias="Message")


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------


class Server(PostmarkModel):
    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    api_tokens: List[str] = Field(default_factory=list, alias="ApiTokens")
    server_link: Optional[str] = Field(None, alias="ServerLink")
    color: Optional[str] = Field(None, alias="Color")
    smtp_api_activated: Optional[bool] = Field(None, alias="SmtpApiActivated")
    raw_email_enabled: Optional[bool] = Field(None, alias="RawEmailEnabled")
    delivery_type: Optional[str] = Field(None, alias="DeliveryType")
    inbound_address: Optional[str] = Field(None, alias="InboundAddress")
    inbound_hook_url: Optional[str] = Field(None, alias="InboundHookUrl")
    bounce_hook_url: Optional[str] = Field(None, alias="BounceHookUrl")
    open_hook_url: Optional[str] = Field(None, alias="OpenHookUrl")
    delivery_hook_url: Optional[str] = Field(None, alias="DeliveryHookUrl")
    click_hook_url: Optional[str] = Field(None, alias="ClickHookUrl")
    post_first_open_only: Optional[bool] = Field(None, alias="PostFirstOpenOnly")
    inbound_domain: Optional[str] = Field(None, alias="InboundDomain")
    inbound_hash: Optional[str] = Field(None, alias="InboundHash")
    inbound_spam_threshold: Optional[int] = Field(None, alias="InboundSpamThreshold")
    track_opens: Optional[bool] = Field(None, alias="TrackOpens")
    track_links: Optional[str] = Field(None, alias="TrackLinks")
    include_bounce_content_in_hook: Optional[bool] = Field(None, alias="IncludeBounceContentInHook")
    enable_smtp_api_error_hooks: Optional[bool] = Field(None, alias="EnableSmtpApiErrorHooks")


class Servers(PostmarkModel):
    total_count: int = Field(0, alias="TotalCount")
    servers: List[Server] = Field(default_factory=list, alias="Servers")


class ServerOptions(PostmarkModel):
    """Body for creating or editing a Server. Only set fields are sent."""

    name: Optional[str] = Field(None, alias="Name")
    color: Optional[ServerColor] = Field(None, alias="Color")
    smtp_api_activated: Optional[bool] = Field(None, alias="SmtpApiActivated")
    raw_email_enabled: Optional[bool] = Field(None, alias="RawEmailEnabled")
    delivery_type: Optional[DeliveryType] = Field(None, alias="DeliveryType")
    inbound_hook_url: Optional[str] = Field(None, alias="InboundHookUrl")
    bounce_hook_url: Optional[str] = Field(None, alias="BounceHookUrl")
    open_hook_url: Optional[str] = Field(None, alias="OpenHookUrl")
    delivery_hook_url: Optional[str] = Field(None, alias="DeliveryHookUrl")
    click_hook_url: Optional[str] = Field(None, alias="ClickHookUrl")
    post_first_open_only: Optional[bool] = Field(None, alias="PostFirstOpenOnly")
    inbound_domain: Optional[str] = Field(None, alias="InboundDomain")
    inbound_spam_threshold: Optional[int] = Field(None, alias="InboundSpamThreshold")
    track_opens: Optional[bool] = Field(None, alias="TrackOpens")
    track_links: Optional[str] = Field(None, alias="TrackLinks")
    include_bounce_content_in_hook: Optional[bool] = Field(None, alias="IncludeBounceContentInHook")
    enable_smtp_api_error_hooks: Optional[bool] = Field(None, alias="EnableSmtpApiErrorHooks")


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------


class Domain(PostmarkModel):
    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    spf_verified: bool = Field(False, alias="SPFVerified")
    dkim_verified: bool = Field(False, alias="DKIMVerified")
    weak_dkim: bool = Field(False, alias="WeakDKIM")
    return_path_domain_verified: bool = Field(False, alias="ReturnPathDomainVerified")


class Domains(PostmarkModel):
    total_count: int = Field(0, alias="TotalCount")
    domains: List[Domain] = Field(default_factory=list, alias="Domains")


class _DnsDetails(PostmarkModel):
    # DNS records shared by domain and sender signature detail views
    spf_host: Optional[str] = Field(None, alias="SPFHost")
    spf_text_value: Optional[str] = Field(None, alias="SPFTextValue")
    dkim_host: Optional[str] = Field(None, alias="DKIMHost")
    dkim_text_value: Optional[str] = Field(None, alias="DKIMTextValue")
    dkim_pending_host: Optional[str] = Field(None, alias="DKIMPendingHost")
    dkim_pending_text_value: Optional[str] = Field(None, alias="DKIMPendingTextValue")
    dkim_revoked_host: Optional[str] = Field(None, alias="DKIMRevokedHost")
    dkim_revoked_text_value: Optional[str] = Field(None, alias="DKIMRevokedTextValue")
    safe_to_remove_revoked_key_from_dns: Optional[bool] = Field(None, alias="SafeToRemoveRevokedKeyFromDNS")
    dkim_update_status: Optional[str] = Field(None, alias="DKIMUpdateStatus")
    return_path_domain: Optional[str] = Field(None, alias="ReturnPathDomain")
    return_path_domain_cname_value: Optional[str] = Field(None, alias="ReturnPathDomainCNAMEValue")


class DomainDetails(Domain, _DnsDetails):
    """Full Domain record including the DNS values to publish."""


class DomainOptions(PostmarkModel):
    name: str = Field(alias="Name")
    return_path_domain: Optional[str] = Field(None, alias="ReturnPathDomain")


class DomainEditOptions(PostmarkModel):
    return_path_domain: Optional[str] = Field(None, alias="ReturnPathDomain")


# ---------------------------------------------------------------------------
# Sender signatures
# ---------------------------------------------------------------------------


class Signature(PostmarkModel):
    id: int = Field(alias="ID")
    domain: Optional[str] = Field(None, alias="Domain")
    email_address: str = Field(alias="EmailAddress")
    reply_to_email_address: Optional[str] = Field(None, alias="ReplyToEmailAddress")
    name: Optional[str] = Field(None, alias="Name")
    confirmed: bool = Field(False, alias="Confirmed")


class Signatures(PostmarkModel):
    total_count: int = Field(0, alias="TotalCount")
    sender_signatures: List[Signature] = Field(default_factory=list, alias="SenderSignatures")


class SignatureDetails(Signature, _DnsDetails):
    """Full Sender Signature record including verification state."""

    spf_verified: bool = Field(False, alias="SPFVerified")
    dkim_verified: bool = Field(False, alias="DKIMVerified")
    weak_dkim: bool = Field(False, alias="WeakDKIM")
    return_path_domain_verified: bool = Field(False, alias="ReturnPathDomainVerified")


class BaseSignatureOptions(PostmarkModel):
    """Editable Sender Signature fields."""

    name: Optional[str] = Field(None, alias="Name")
    reply_to_email: Optional[str] = Field(None, alias="ReplyToEmail")
    return_path_domain: Optional[str] = Field(None, alias="ReturnPathDomain")


class SignatureOptions(BaseSignatureOptions):
    from_email: str = Field(alias="FromEmail")


# Request bodies may be given either as a model or as raw vendor JSON
RequestBody = Union[PostmarkModel, Dict[str, Any]]
