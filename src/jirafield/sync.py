import logging
import requests
from typing import Any, Dict, Optional
from jirafield.config import CONFIG
from jirafield.logging_config import setup_logging
from jirafield.connectors import jira as jira_conn
from jirafield.errors import HTTPError, TransportError
from jirafield.models import SyncReport

logger = logging.getLogger("jirafield.sync")

class FieldSync:
    """
    Fetch the issue list once, then set one custom field on every issue, in order.

    A failed update is recorded in the report and the loop moves on; a failed
    fetch propagates. Nothing is retried.
    """
    def __init__(self, encoded_credentials: str, base_url: str, session: Optional[requests.Session] = None):
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.encoded_credentials = encoded_credentials
        self.base_url = base_url
        self.session = session
        self.jira = jira_conn

    @classmethod
    def from_config(cls, session: Optional[requests.Session] = None) -> "FieldSync":
        if not CONFIG.jira_base_url or not CONFIG.jira_encoded_credentials:
            raise RuntimeError("JIRA_BASE_URL and JIRA_ENCODED_CREDENTIALS must be set in .env")
        setup_logging(CONFIG.output_dir, CONFIG.log_level)
        return cls(CONFIG.jira_encoded_credentials, CONFIG.jira_base_url, session=session)

    def run(self, field_id: str, value: Any, params: Optional[Dict[str, Any]] = None) -> SyncReport:
        if not field_id:
            raise ValueError("field_id must not be empty")
        report = SyncReport(field_id=field_id)
        issues, report.fetch_status = self.jira.fetch_issues(
            self.encoded_credentials, self.base_url, params=params, session=self.session
        )
        for issue in issues:
            try:
                self.jira.update_custom_field(
                    issue.key, field_id, value, self.encoded_credentials, self.base_url, session=self.session
                )
                report.updated.append(issue.key)
            except (HTTPError, TransportError, ValueError) as e:
                logger.warning("Failed updating %s on %s: %s", field_id, issue.key, e, extra={"step": "sync_update"})
                report.failed[issue.key] = str(e)
        logger.info("Sync of %s done: updated=%d failed=%d", field_id, len(report.updated), len(report.failed),
                    extra={"step": "sync_done"})
        return report
