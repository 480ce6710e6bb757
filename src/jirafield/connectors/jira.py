# src/jirafield/connectors/jira.py
import json
import logging
import requests
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import quote
from ..config import CONFIG
from ..errors import HTTPError, TransportError, DecodeError
from ..models import Issue, IssueResponse

logger = logging.getLogger("jirafield.jira")

Request = Union[requests.Request, requests.PreparedRequest]


def set_common_headers(req: Request, encoded_credentials: str) -> None:
    """Set Basic auth and JSON content headers on an outgoing request, in place."""
    req.headers["Authorization"] = "Basic " + encoded_credentials
    req.headers["Accept"] = "application/json"
    req.headers["Content-Type"] = "application/json"


def _join(base_url: str, path: str) -> str:
    if not base_url:
        raise ValueError("base_url must not be empty")
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def _send(req: requests.Request, encoded_credentials: str, session: Optional[requests.Session], timeout: Optional[float],
          step: str) -> requests.Response:
    run_ctx = {"step": step}
    own_session = session is None
    session = session or requests.Session()
    try:
        prepped = session.prepare_request(req)
        # prepare_request applies netrc and session.auth, which would replace Authorization
        set_common_headers(prepped, encoded_credentials)
        logger.info("%s %s", prepped.method, prepped.url, extra=run_ctx)
        return session.send(prepped, timeout=timeout if timeout is not None else CONFIG.http_timeout)
    except requests.RequestException as e:
        logger.error("Transport error on %s %s: %s", req.method, req.url, e, extra=run_ctx)
        raise TransportError(f"{req.method} {req.url} failed: {e}") from e
    finally:
        if own_session:
            session.close()


def _check_status(resp: requests.Response, step: str) -> None:
    if 200 <= resp.status_code < 300:
        return
    body = resp.text
    logger.error("HTTP %d from %s body=%s", resp.status_code, resp.url, body[:200], extra={"step": step})
    raise HTTPError(resp.status_code, body)


def fetch_issues(
    encoded_credentials: str,
    base_url: str,
    search_path: Optional[str] = None,
    params: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> Tuple[List[Issue], int]:
    """
    GET the issue search endpoint and decode the issue envelope.

    Returns the issues in server order together with the response status code.

    Raises:
      - HTTPError for a non-2xx status, carrying status and raw body text.
      - TransportError when no response was received.
      - DecodeError when a 2xx body is not a valid issue envelope.
    """
    url = _join(base_url, search_path or CONFIG.jira_search_path)
    req = requests.Request("GET", url, params=params)
    resp = _send(req, encoded_credentials, session, timeout, "jira_fetch")
    _check_status(resp, "jira_fetch")

    try:
        payload = resp.json()
    except ValueError as e:
        logger.error("Undecodable search response from %s: %s", url, e, extra={"step": "jira_fetch"})
        raise DecodeError(f"Invalid JSON in search response: {e}", resp.status_code, resp.text) from e
    if not isinstance(payload, dict):
        raise DecodeError("Search response is not a JSON object", resp.status_code, resp.text)
    issues = payload.get("issues")
    if issues is not None and not (isinstance(issues, list) and all(isinstance(i, dict) for i in issues)):
        raise DecodeError("Search response 'issues' is not a list of objects", resp.status_code, resp.text)
    if any(i.get("key") is not None and not isinstance(i["key"], str) for i in issues or []):
        raise DecodeError("Search response has an issue whose 'key' is not a string", resp.status_code, resp.text)

    envelope = IssueResponse.from_dict(payload)
    logger.info("Fetched %d issues (status=%d)", len(envelope.issues), resp.status_code, extra={"step": "jira_fetch"})
    return envelope.issues, resp.status_code


def update_custom_field(
    issue_key: str,
    field_id: str,
    value: Any,
    encoded_credentials: str,
    base_url: str,
    issue_path: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> int:
    """
    PUT ``{"fields": {field_id: value}}`` to the issue and return the status code.

    Success is any 2xx, usually 204 with no body. Non-2xx raises HTTPError whose
    ``status`` is the response status.
    """
    if not issue_key:
        raise ValueError("issue_key must not be empty")
    if not field_id:
        raise ValueError("field_id must not be empty")
    path = (issue_path or CONFIG.jira_issue_path).rstrip("/") + "/" + quote(issue_key, safe="")
    url = _join(base_url, path)
    body = json.dumps({"fields": {field_id: value}})
    req = requests.Request("PUT", url, data=body)
    resp = _send(req, encoded_credentials, session, timeout, "jira_update")
    _check_status(resp, "jira_update")
    logger.info("Updated %s on %s (status=%d)", field_id, issue_key, resp.status_code, extra={"step": "jira_update"})
    return resp.status_code
