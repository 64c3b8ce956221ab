from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_REPORT_URL = "https://raw.githubusercontent.com/rajansudan39/rajansudan39/main/sample-data.json"


@dataclass(frozen=True)
class DashboardConfig:
    report_url: str = DEFAULT_REPORT_URL

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        url = (os.getenv("WORKLOG_REPORT_URL") or "").strip()
        return cls(report_url=url or cls.report_url)
