# menupub/utils/tenant.py
import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """`Chez Léon & Fils` -> `chez-l-on-fils`"""
    slug = _NON_SLUG_CHARS.sub("-", (name or "").lower())
    return slug.strip("-")
