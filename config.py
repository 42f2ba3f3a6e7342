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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./jobboard.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    PUBLIC_BASE_URL = data.get("PUBLIC_BASE_URL", "http://localhost:8000")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Credentials
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    MAX_HANDLE_ATTEMPTS = int(data.get("MAX_HANDLE_ATTEMPTS", 20))

    # Tokens: one key/ttl pair per purpose, never shared
    EMAIL_VERIFICATION_SECRET = data.get(
        "EMAIL_VERIFICATION_SECRET", "dev-email-secret-change-in-production"
    )
    EMAIL_VERIFICATION_TTL_MINUTES = int(data.get("EMAIL_VERIFICATION_TTL_MINUTES", 60))
    LOGIN_SECRET = data.get("LOGIN_SECRET", "dev-login-secret-change-in-production")
    LOGIN_TTL_MINUTES = int(data.get("LOGIN_TTL_MINUTES", 60 * 24))

    # Password recovery
    OTP_LENGTH = int(data.get("OTP_LENGTH", 6))
    OTP_TTL_MINUTES = int(data.get("OTP_TTL_MINUTES", 30))
    RESET_CODE_TTL_MINUTES = int(data.get("RESET_CODE_TTL_MINUTES", 15))

    # Mail
    MAIL_BACKEND = data.get("MAIL_BACKEND", "console")
    MAIL_FROM = data.get("MAIL_FROM", "No-Reply <no-reply@jobboard.local>")
    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT_SECONDS = int(data.get("SMTP_TIMEOUT_SECONDS", 10))
