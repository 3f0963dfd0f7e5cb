"""Bearer-authenticated session and single-shot GraphQL execution."""

from __future__ import annotations

from typing import Any, Dict

import requests

from .config import GRAPHQL_URL, REQUEST_TIMEOUT, USER_AGENT
from .errors import AuthenticationError, QueryError


def build_session(token: str) -> requests.Session:
    """Wrap a static personal access token into a session for the GraphQL API."""
    if not token or not token.strip():
        raise AuthenticationError("GITHUB_TOKEN is not set; a token is required for the viewer query.")
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {token.strip()}",
        }
    )
    return session


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    msg = body.get("message") or body.get("error") or body.get("text")
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}")


def run_graphql_query(session: requests.Session, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
    """Execute one GraphQL request and return its `data` object.

    There is no retry: any transport failure, HTTP error, GraphQL error list
    or malformed body raises a QueryError (AuthenticationError for 401/403).
    """
    payload = {"query": query, "variables": variables}
    try:
        resp = session.post(GRAPHQL_URL, json=payload, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise QueryError(f"GraphQL request to {GRAPHQL_URL} failed: {exc}") from exc

    if resp.status_code in (401, 403):
        log_http_error(resp, GRAPHQL_URL)
        raise AuthenticationError(f"GitHub rejected the token (HTTP {resp.status_code}).")
    if resp.status_code != 200:
        log_http_error(resp, GRAPHQL_URL)
        raise QueryError(f"GraphQL request failed with HTTP {resp.status_code}.")

    try:
        body = resp.json()
    except ValueError as exc:
        raise QueryError("GraphQL response was not valid JSON.") from exc
    if not isinstance(body, dict):
        raise QueryError(f"Unexpected GraphQL response shape: {type(body).__name__}")

    if body.get("errors"):
        messages = ", ".join(
            [str(err.get("message")) for err in body["errors"] if isinstance(err, dict)]
        )
        raise QueryError(f"GraphQL error: {messages or body['errors']}")

    data = body.get("data")
    if not isinstance(data, dict):
        raise QueryError("GraphQL response is missing the `data` object.")
    return data


__all__ = ["build_session", "log_http_error", "run_graphql_query"]
