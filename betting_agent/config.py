"""
Application Configuration
Settings for the match analysis API, read from the environment.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Analysis pacing (seconds slept before answering; 0 disables)
ANALYSIS_DELAY_SECONDS = float(os.getenv("ANALYSIS_DELAY_SECONDS", "1.5"))

# Timezone for match dates and log timestamps
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "UTC")

# CORS
BASE_CORS_ORIGINS: List[str] = [
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8000",
]
CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Server
PORT = int(os.getenv("PORT", "8000"))
