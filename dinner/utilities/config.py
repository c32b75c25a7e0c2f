"""Configuration management for the Dinner Time application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '3000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Upload limits
MAX_UPLOAD_BYTES: Final[int] = int(os.getenv('MAX_UPLOAD_BYTES', str(10 * 1024 * 1024)))
MAX_UPLOAD_FILES: Final[int] = int(os.getenv('MAX_UPLOAD_FILES', '10'))

# Recipe extraction service (disabled when no URL is configured)
EXTRACTION_WEBHOOK_URL: Final[str] = os.getenv('EXTRACTION_WEBHOOK_URL', '')
EXTRACTION_TIMEOUT_SECONDS: Final[float] = float(os.getenv('EXTRACTION_TIMEOUT_SECONDS', '30'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DINNER_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
