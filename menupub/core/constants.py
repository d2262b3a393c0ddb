from enum import Enum


class Language(str, Enum):
    fr = "fr"
    en = "en"
    it = "it"
    es = "es"


# French is the canonical language: its values live in the unsuffixed columns
DEFAULT_LANGUAGE = Language.fr

# Fields carrying per-language variants as `<field>_<lang>` columns
LOCALIZED_FIELDS = ("title", "text", "description")


class MenuTemplate(str, Enum):
    template1 = "template1"
    template2 = "template2"
    template3 = "template3"
    template4 = "template4"


class RecordStatus(str, Enum):
    active = "active"
    inactive = "inactive"


SUPER_ADMIN_ROLE = "super_admin"

# Substring marking the subcategory whose items render without a heading
GENERAL_SUBCATEGORY_MARKER = "general"

MENU_CACHE_TTL_MS = 5 * 60 * 1000
MENU_CACHE_KEY_PREFIX = "menu_data_"

ALLOWED_IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".webp"}
MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB

MAX_PRICE = 1_000_000
MIN_PASSWORD_LENGTH = 6


def parse_language(value) -> Language:
    """Map free-form input (query params, headers) onto the supported set."""
    if isinstance(value, Language):
        return value
    try:
        return Language((value or "").strip().lower())
    except ValueError:
        return DEFAULT_LANGUAGE
