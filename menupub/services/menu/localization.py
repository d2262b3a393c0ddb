"""
Field-level localization for menu records.

French values live in the unsuffixed columns (`title`, `text`,
`description`); other languages use `<field>_<lang>` columns and fall back
to the French value when their variant is missing or empty.
"""
from collections.abc import Mapping
from typing import Any, Optional, Union

from menupub.core.constants import Language, DEFAULT_LANGUAGE, LOCALIZED_FIELDS, parse_language

# (field, language) -> attribute holding the translated value
LOCALIZED_ATTRS = {
    (field, language): f"{field}_{language.value}"
    for field in LOCALIZED_FIELDS
    for language in Language
    if language is not DEFAULT_LANGUAGE
}


def read_attr(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from an ORM row, a pydantic model or a plain mapping."""
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def localized_attr(field_name: str, language: Union[Language, str]) -> Optional[str]:
    return LOCALIZED_ATTRS.get((field_name, parse_language(language)))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def resolve_field(record: Any, field_name: str, language: Union[Language, str] = DEFAULT_LANGUAGE) -> str:
    base = _as_text(read_attr(record, field_name))
    attr = localized_attr(field_name, language)
    if attr is None:
        return base

    translated = _as_text(read_attr(record, attr))
    return translated or base
