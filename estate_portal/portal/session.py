"""Client-side session handling for the portal API.

A ``PortalSession`` is an explicit session context that callers create and
pass around; nothing is kept in module globals. Its lifecycle is::

    anonymous -> authenticated(role, claims) -> expired | logged_out

``PortalClient`` drives the HTTP calls and moves the session through those
states: a successful login authenticates it, a rejected token expires it.
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

import httpx
from jose import jwt, JWTError

from estate_portal.auth.schemas import Role

logger = logging.getLogger(__name__)

# Error codes that mean the stored token itself is no longer usable
SESSION_ENDING_CODES = {"unauthorized", "invalid_token", "token_expired"}


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"
    LOGGED_OUT = "logged_out"


class SessionError(Exception):
    pass


class PortalClientError(Exception):
    def __init__(self, status_code: int, detail: str, code: Optional[str] = None, payload: Optional[dict] = None):
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.payload = payload or {}
        super().__init__(f"{status_code} {code or ''}: {detail}".strip())


class PortalSession:
    def __init__(self):
        self.state = SessionState.ANONYMOUS
        self.token: Optional[str] = None
        self.claims: Dict[str, Any] = {}
        self.profile: Dict[str, Any] = {}

    @property
    def role(self) -> Optional[Role]:
        role = self.claims.get("role")
        return Role(role) if role else None

    @property
    def expires_at(self) -> Optional[datetime]:
        exp = self.claims.get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(exp, tz=timezone.utc)

    @property
    def is_authenticated(self) -> bool:
        if self.state != SessionState.AUTHENTICATED:
            return False
        expires_at = self.expires_at
        if expires_at is not None and expires_at <= datetime.now(timezone.utc):
            self.expire()
            return False
        return True

    def authenticate(self, token: str, profile: Optional[Dict[str, Any]] = None) -> None:
        # The signature can only be checked server side; the claims are read
        # here for role and expiry bookkeeping only.
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise SessionError(f"Malformed token: {e}") from e

        self.token = token
        self.claims = claims
        self.profile = dict(profile or {})
        self.state = SessionState.AUTHENTICATED

    def expire(self) -> None:
        if self.state == SessionState.AUTHENTICATED:
            logger.info("Portal session expired")
            self.state = SessionState.EXPIRED
        self.token = None

    def logout(self) -> None:
        self.state = SessionState.LOGGED_OUT
        self.token = None
        self.claims = {}
        self.profile = {}

    def auth_headers(self) -> Dict[str, str]:
        if not self.is_authenticated:
            raise SessionError(f"Session is {self.state.value}")
        return {"Authorization": f"Bearer {self.token}"}

    def require_role(self, role: Role) -> None:
        if not self.is_authenticated:
            raise SessionError(f"Session is {self.state.value}")
        if self.role != role:
            raise SessionError(f"{role.value.capitalize()} session required")


class PortalClient:
    """Typed wrapper over the portal HTTP API, bound to one explicit session."""

    def __init__(self, http: httpx.AsyncClient, session: PortalSession, api_prefix: str = "/api"):
        self.http = http
        self.session = session
        self.api_prefix = api_prefix.rstrip("/")

    async def _request(self, method: str, path: str, authenticated: bool = True, **kwargs) -> Dict[str, Any]:
        headers = dict(kwargs.pop("headers", {}) or {})
        if authenticated:
            headers.update(self.session.auth_headers())

        response = await self.http.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)
        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            code = payload.get("code") if isinstance(payload, dict) else None
            detail = payload.get("detail", response.reason_phrase) if isinstance(payload, dict) else response.reason_phrase
            if authenticated and code in SESSION_ENDING_CODES:
                self.session.expire()
            raise PortalClientError(response.status_code, str(detail), code, payload if isinstance(payload, dict) else None)
        return payload

    async def register_lawyer(self, email: str, password: str, first_name: str, last_name: str, bar_number: Optional[str] = None) -> Dict[str, Any]:
        data = await self._request("POST", "/lawyer/register", authenticated=False, json={
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
            "barNumber": bar_number,
        })
        self.session.authenticate(data["token"], data["lawyer"])
        return data["lawyer"]

    async def login_lawyer(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/lawyer/login", authenticated=False, json={"email": email, "password": password})
        self.session.authenticate(data["token"], data["lawyer"])
        return data["lawyer"]

    async def login_client(self, email: str, access_code: str) -> Dict[str, Any]:
        data = await self._request("POST", "/client/login", authenticated=False, json={"email": email, "accessCode": access_code})
        self.session.authenticate(data["token"], data["client"])
        return data["client"]

    async def restore(self, token: str) -> bool:
        """Resume a previously stored token. Returns False if the server rejects it."""
        try:
            self.session.authenticate(token)
            data = await self._request("GET", "/verify-token")
        except (PortalClientError, SessionError):
            self.session.expire()
            return False
        self.session.profile = data["user"]
        return True

    def logout(self) -> None:
        self.session.logout()

    async def dashboard(self) -> Dict[str, Any]:
        self.session.require_role(Role.LAWYER)
        return await self._request("GET", "/lawyer/dashboard")

    async def invite_client(self, client_name: str, client_email: str) -> Dict[str, Any]:
        self.session.require_role(Role.LAWYER)
        return await self._request("POST", "/lawyer/invite-client", json={"clientName": client_name, "clientEmail": client_email})

    async def get_estate_data(self) -> Dict[str, Any]:
        self.session.require_role(Role.CLIENT)
        data = await self._request("GET", "/client/estate-data")
        return data["estateData"]

    async def save_estate_data(self, fields: Dict[str, Any]) -> str:
        self.session.require_role(Role.CLIENT)
        data = await self._request("POST", "/client/estate-data", json=fields)
        return data["message"]
