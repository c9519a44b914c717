"""CLI configuration loaded from environment variables (and ``.env``)."""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")
load_dotenv()  # .env in the working directory, if any

# ---- Session cookies ----
LINKEDIN_LI_AT: str = os.getenv("LINKEDIN_LI_AT", "")
LINKEDIN_JSESSIONID: str = os.getenv("LINKEDIN_JSESSIONID", "")

# ---- Logging ----
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

# ---- Listing defaults ----
DEFAULT_PAGE_SIZE: int = 20
MAX_PAGE_SIZE: int = 50
