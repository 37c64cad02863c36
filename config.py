# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _split(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Settings:
    def __init__(self):
        self.env = os.getenv("APP_ENV", "development")
        if self.env == "production":
            default_uri = os.getenv("MONGODB_URI_PROD", "mongodb://localhost:27017")
            default_db = "University_prod"
        else:
            default_uri = os.getenv("MONGODB_URI_DEV", "mongodb://localhost:27017")
            default_db = "University"
        self.mongodb_uri = os.getenv("MONGODB_URI", default_uri)
        self.mongodb_db = os.getenv("MONGODB_DB", default_db)

        self.api_prefix = os.getenv("API_PREFIX", "/api/v1")
        self.cors_origins = _split(os.getenv("CORS_ORIGINS", "*"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.export_dir = os.getenv("EXPORT_DIR", os.path.join(os.getcwd(), "exports"))

        self.allowed_email_domains = _split(os.getenv("ALLOWED_EMAIL_DOMAINS"))
        self.phone_number_regex = os.getenv("PHONE_NUMBER_REGEX", "")
        self.phone_number_country = os.getenv("PHONE_NUMBER_COUNTRY", "Vietnamese")

        self.default_page_limit = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
        self.max_page_limit = int(os.getenv("MAX_PAGE_LIMIT", "100"))


settings = Settings()

# Allowed student status moves, keyed by the Vietnamese status name.
# A status missing from this table may move to any other status.
STATUS_TRANSITIONS = {
    "Đang học": ["Bảo lưu", "Tạm dừng học", "Đã tốt nghiệp", "Đã thôi học", "Đình chỉ"],
    "Bảo lưu": ["Đang học", "Đã thôi học"],
    "Tạm dừng học": ["Đang học", "Đã thôi học"],
    "Đình chỉ": ["Đang học", "Đã thôi học"],
    "Đã tốt nghiệp": [],
    "Đã thôi học": [],
}

# English aliases accepted wherever a status name is looked up.
STATUS_ALIASES = {
    "Studying": "Đang học",
    "Reserved": "Bảo lưu",
    "Suspended": "Tạm dừng học",
    "Disciplined": "Đình chỉ",
    "Graduated": "Đã tốt nghiệp",
    "Dropped out": "Đã thôi học",
}
