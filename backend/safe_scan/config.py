"""
Application configuration using environment variables.
"""
import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

@dataclass
class Settings:
    """Application settings."""
    APP_NAME: str = "S.A.F.E. School Scan"
    APP_VERSION: str = "1.0.0"
    
    # Storage - single named slot holding one JSON array
    STORE_PATH: str = os.getenv("STORE_PATH", os.path.join("data", "safe_scan_assessments.json"))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    
    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: [
        o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",") if o.strip()
    ])

settings = Settings()
