from typing import Union

from menupub.core.constants import Language, DEFAULT_LANGUAGE, parse_language

TRANSLATIONS = {
    Language.fr: {
        "menu": {
            "specials": "Nos spécialités",
            "supplements": "Suppléments",
            "load_error": "Impossible de charger le menu",
            "empty": "Le menu sera bientôt disponible",
        },
    },
    Language.en: {
        "menu": {
            "specials": "Our specials",
            "supplements": "Supplements",
            "load_error": "Failed to load menu data",
            "empty": "The menu will be available soon",
        },
    },
    Language.it: {
        "menu": {
            "specials": "Le nostre specialità",
            "supplements": "Supplementi",
            "load_error": "Impossibile caricare il menu",
            "empty": "Il menu sarà presto disponibile",
        },
    },
    Language.es: {
        "menu": {
            "specials": "Nuestras especialidades",
            "supplements": "Suplementos",
            "load_error": "No se pudo cargar el menú",
            "empty": "El menú estará disponible pronto",
        },
    },
}


class Translator:
    """UI labels for one request's language, falling back to French then the key."""

    def __init__(self, language: Union[Language, str] = DEFAULT_LANGUAGE):
        self.language = parse_language(language)

    def _lookup(self, language: Language, key: str):
        value = TRANSLATIONS.get(language, {})
        for part in key.split("."):
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value if isinstance(value, str) else None

    def t(self, key: str) -> str:
        return (
            self._lookup(self.language, key)
            or self._lookup(DEFAULT_LANGUAGE, key)
            or key
        )
