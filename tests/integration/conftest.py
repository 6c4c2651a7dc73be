"""In-memory stand-in for the Postmark account API, served through httpx's ASGI transport."""

from __future__ import annotations

import itertools
from typing import Any, Dict

import pytest
from fastapi import Body, Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse

ACCOUNT_TOKEN = "account-token"


class VendorError(Exception):
    def __init__(self, status: int, code: int, message: str):
        self.status = status
        self.code = code
        self.message = message


def build_fake_postmark() -> FastAPI:
    app = FastAPI(title="Fake Postmark")
    ids = itertools.count(1)
    servers: Dict[int, dict[str, Any]] = {}
    domains: Dict[int, dict[str, Any]] = {}
    senders: Dict[int, dict[str, Any]] = {}

    @app.exception_handler(VendorError)
    async def vendor_error(request: Request, exc: VendorError) -> JSONResponse:
        return JSONResponse(status_code=exc.status, content={"ErrorCode": exc.code, "Message": exc.message})

    def require_token(x_postmark_account_token: str | None = Header(None)) -> None:
        if x_postmark_account_token != ACCOUNT_TOKEN:
            raise VendorError(401, 10, "No Account or Server API tokens were supplied in the HTTP headers.")

    def lookup(store: Dict[int, dict[str, Any]], item_id: int) -> dict[str, Any]:
        if item_id not in store:
            raise VendorError(422, 0, "Item not found.")
        return store[item_id]

    def page(store: Dict[int, dict[str, Any]], count: int, offset: int) -> list[dict[str, Any]]:
        return list(store.values())[offset : offset + count]

    # -- servers -----------------------------------------------------------

    @app.get("/servers", dependencies=[Depends(require_token)])
    async def list_servers(count: int, offset: int, name: str | None = None) -> dict[str, Any]:
        matching = {k: v for k, v in servers.items() if name is None or name in v["Name"]}
        return {"TotalCount": len(matching), "Servers": page(matching, count, offset)}

    @app.post("/servers", dependencies=[Depends(require_token)])
    async def create_server(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        server_id = next(ids)
        servers[server_id] = {"ID": server_id, "ApiTokens": [f"token-{server_id}"], **payload}
        return servers[server_id]

    @app.get("/servers/{server_id}", dependencies=[Depends(require_token)])
    async def get_server(server_id: int) -> dict[str, Any]:
        return lookup(servers, server_id)

    @app.put("/servers/{server_id}", dependencies=[Depends(require_token)])
    async def edit_server(server_id: int, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        lookup(servers, server_id).update(payload)
        return servers[server_id]

    @app.delete("/servers/{server_id}", dependencies=[Depends(require_token)])
    async def delete_server(server_id: int) -> dict[str, Any]:
        lookup(servers, server_id)
        del servers[server_id]
        return {"ErrorCode": 0, "Message": f"Server {server_id} removed."}

    # -- domains -----------------------------------------------------------

    @app.get("/domains", dependencies=[Depends(require_token)])
    async def list_domains(count: int, offset: int) -> dict[str, Any]:
        return {"TotalCount": len(domains), "Domains": page(domains, count, offset)}

    @app.post("/domains/", dependencies=[Depends(require_token)])
    async def create_domain(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        if any(d["Name"] == payload.get("Name") for d in domains.values()):
            raise VendorError(422, 505, "This domain already exists.")
        domain_id = next(ids)
        domains[domain_id] = {
            "ID": domain_id,
            "SPFVerified": False,
            "DKIMVerified": False,
            "ReturnPathDomainVerified": False,
            "DKIMHost": f"pm._domainkey.{payload['Name']}",
            **payload,
        }
        return domains[domain_id]

    @app.get("/domains/{domain_id}", dependencies=[Depends(require_token)])
    async def get_domain(domain_id: int) -> dict[str, Any]:
        return lookup(domains, domain_id)

    @app.put("/domains/{domain_id}", dependencies=[Depends(require_token)])
    async def edit_domain(domain_id: int, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        lookup(domains, domain_id).update(payload)
        return domains[domain_id]

    @app.delete("/domains/{domain_id}", dependencies=[Depends(require_token)])
    async def delete_domain(domain_id: int) -> dict[str, Any]:
        lookup(domains, domain_id)
        del domains[domain_id]
        return {"ErrorCode": 0, "Message": f"Domain {domain_id} removed."}

    @app.put("/domains/{domain_id}/{action}", dependencies=[Depends(require_token)])
    async def domain_action(domain_id: int, action: str) -> dict[str, Any]:
        domain = lookup(domains, domain_id)
        flags = {
            "verifyDKIM": "DKIMVerified",
            "verifySPF": "SPFVerified",
            "verifyReturnPath": "ReturnPathDomainVerified",
        }
        if action == "rotateDKIM":
            domain["DKIMPendingHost"] = f"new._domainkey.{domain['Name']}"
        elif action in flags:
            domain[flags[action]] = True
        else:
            raise VendorError(404, 0, "Unknown action.")
        return domain

    # -- sender signatures -------------------------------------------------

    @app.get("/senders", dependencies=[Depends(require_token)])
    async def list_senders(count: int, offset: int) -> dict[str, Any]:
        return {"TotalCount": len(senders), "SenderSignatures": page(senders, count, offset)}

    @app.post("/senders/", dependencies=[Depends(require_token)])
    async def create_sender(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        sender_id = next(ids)
        email = payload["FromEmail"]
        senders[sender_id] = {
            "ID": sender_id,
            "EmailAddress": email,
            "Domain": email.split("@", 1)[1],
            "Name": payload.get("Name"),
            "ReplyToEmailAddress": payload.get("ReplyToEmail"),
            "Confirmed": False,
            "SPFVerified": False,
        }
        return senders[sender_id]

    @app.get("/senders/{sender_id}", dependencies=[Depends(require_token)])
    async def get_sender(sender_id: int) -> dict[str, Any]:
        return lookup(senders, sender_id)

    @app.put("/senders/{sender_id}", dependencies=[Depends(require_token)])
    async def edit_sender(sender_id: int, payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
        sender = lookup(senders, sender_id)
        if "Name" in payload:
            sender["Name"] = payload["Name"]
        if "ReplyToEmail" in payload:
            sender["ReplyToEmailAddress"] = payload["ReplyToEmail"]
        return sender

    @app.delete("/senders/{sender_id}", dependencies=[Depends(require_token)])
    async def delete_sender(sender_id: int) -> dict[str, Any]:
        lookup(senders, sender_id)
        del senders[sender_id]
        return {"ErrorCode": 0, "Message": f"Signature {sender_id} removed."}

    @app.post("/senders/{sender_id}/resend", dependencies=[Depends(require_token)])
    async def resend_confirmation(sender_id: int) -> dict[str, Any]:
        sender = lookup(senders, sender_id)
        return {"ErrorCode": 0, "Message": f"Confirmation email for Sender Signature {sender['EmailAddress']} was re-sent."}

    @app.post("/senders/{sender_id}/verifySpf", dependencies=[Depends(require_token)])
    async def verify_sender_spf(sender_id: int) -> dict[str, Any]:
        sender = lookup(senders, sender_id)
        sender["SPFVerified"] = True
        return sender

    @app.post("/senders/{sender_id}/requestNewDkim", dependencies=[Depends(require_token)])
    async def request_new_dkim(sender_id: int) -> dict[str, Any]:
        sender = lookup(senders, sender_id)
        sender["DKIMPendingHost"] = f"new._domainkey.{sender['Domain']}"
        return sender

    return app


@pytest.fixture
def fake_postmark() -> FastAPI:
    return build_fake_postmark()
