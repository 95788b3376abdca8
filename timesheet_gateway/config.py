import os
from typing import Optional, TypedDict

from dotenv import load_dotenv


class AppConfig(TypedDict):
    """Configuration for the application"""

    SPREADSHEET_ID: str
    EMPLOYEE_SHEET_NAME: str
    ACTIVITY_SHEET_PREFIX: str
    GOOGLE_CREDENTIALS: Optional[str]
    GOOGLE_CLIENT_EMAIL: Optional[str]
    GOOGLE_PRIVATE_KEY: Optional[str]
    ALLOWED_ORIGINS: list[str]
    LOG_DIR: str
    HOST: str
    PORT: int


def load_config() -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {
        "SPREADSHEET_ID": os.getenv("SPREADSHEET_ID"),
        "EMPLOYEE_SHEET_NAME": os.getenv("EMPLOYEE_SHEET_NAME"),
    }

    missing = [k for k, v in required_vars.items() if not v]

    credentials_path = os.getenv("GOOGLE_CREDENTIALS")
    client_email = os.getenv("GOOGLE_CLIENT_EMAIL")
    private_key = os.getenv("GOOGLE_PRIVATE_KEY")
    if not credentials_path and not (client_email and private_key):
        missing.append("GOOGLE_CREDENTIALS (or GOOGLE_CLIENT_EMAIL and GOOGLE_PRIVATE_KEY)")

    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")

    return {
        **required_vars,
        "ACTIVITY_SHEET_PREFIX": os.getenv("ACTIVITY_SHEET_PREFIX", "Activity"),
        "GOOGLE_CREDENTIALS": credentials_path,
        "GOOGLE_CLIENT_EMAIL": client_email,
        # keys pasted into .env keep their newlines escaped
        "GOOGLE_PRIVATE_KEY": private_key.replace("\\n", "\n") if private_key else None,
        "ALLOWED_ORIGINS": allowed_origins(),
        "LOG_DIR": os.getenv("LOG_DIR", "logs"),
        "HOST": os.getenv("HOST", "0.0.0.0"),
        "PORT": int(os.getenv("PORT", "5000")),
    }


def credentials_info(config: AppConfig) -> Optional[dict[str, str]]:
    """Inline service account credentials, when given instead of a key file"""
    if config["GOOGLE_CLIENT_EMAIL"] and config["GOOGLE_PRIVATE_KEY"]:
        return {
            "type": "service_account",
            "client_email": config["GOOGLE_CLIENT_EMAIL"],
            "private_key": config["GOOGLE_PRIVATE_KEY"],
            "token_uri": "https://oauth2.googleapis.com/token",
        }
    return None


def allowed_origins() -> list[str]:
    """CORS origins from the comma-separated ALLOWED_ORIGINS, default any"""
    load_dotenv()
    origins = os.getenv("ALLOWED_ORIGINS") or "*"
    return [origin.strip() for origin in origins.split(",") if origin.strip()]
