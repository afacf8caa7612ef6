"""
Environment configuration module
Loads environment variables; LINE credentials are validated by the webhook entry.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# LINE credentials (required by the webhook only)
LINE_CHANNEL_ACCESS_TOKEN = os.getenv('LINE_CHANNEL_ACCESS_TOKEN')
LINE_CHANNEL_SECRET = os.getenv('LINE_CHANNEL_SECRET')

# Optional environment variables (with defaults)
WEBSITE_URL = os.getenv('WEBSITE_URL', 'https://smartcapital.app')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Override for the intent vocabulary YAML (defaults to the packaged file)
INTENT_RULES_PATH = os.getenv('INTENT_RULES_PATH', '')


def require_line_credentials() -> None:
    """Raise ValueError when LINE credentials are missing."""
    required_vars = {
        'LINE_CHANNEL_ACCESS_TOKEN': LINE_CHANNEL_ACCESS_TOKEN,
        'LINE_CHANNEL_SECRET': LINE_CHANNEL_SECRET,
    }

    missing_vars = [var_name for var_name, var_value in required_vars.items() if not var_value]

    if missing_vars:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")
