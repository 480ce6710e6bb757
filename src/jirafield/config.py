import os
from dotenv import load_dotenv
from dataclasses import dataclass

load_dotenv()

@dataclass
class Config:
    jira_base_url: str = os.getenv("JIRA_BASE_URL")
    # base64 of "user:token", used verbatim in the Basic auth header
    jira_encoded_credentials: str = os.getenv("JIRA_ENCODED_CREDENTIALS")

    jira_search_path: str = os.getenv("JIRA_SEARCH_PATH", "/rest/api/2/search")
    jira_issue_path: str = os.getenv("JIRA_ISSUE_PATH", "/rest/api/2/issue")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", 30))

    output_dir: str = os.getenv("OUTPUT_DIR", "output")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

CONFIG = Config()
