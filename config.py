import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./password_reset.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    CLIENT_APPLICATION_URL = data.get("CLIENT_APPLICATION_URL", "http://localhost:3000")
    PASSWORD_RESET_TOKEN_VALIDITY_HOURS = data.get("PASSWORD_RESET_TOKEN_VALIDITY_HOURS", 1)
    PASSWORD_RESET_MAIL_SUBJECT = data.get("PASSWORD_RESET_MAIL_SUBJECT", "Password reset")
    SMTP_ENABLED = bool(data.get("SMTP_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_STARTTLS = bool(data.get("SMTP_STARTTLS", True))
    MAIL_FROM = data.get("MAIL_FROM", "no-reply@example.com")
    MAIL_FROM_NAME = data.get("MAIL_FROM_NAME", "Password Reset")
