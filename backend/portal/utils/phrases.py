"""Phrase lookup for user-facing labels.

Only the phrases the backend itself emits live here (facet labels and
placeholders). Unknown keys fall back to the key, the same way the portal
frontend renders a missing translation.
"""

PHRASES: dict[str, dict[str, str]] = {
    "en": {
        "content_page_unknown_folder": "Unknown folder",
        "asset_home_unknown_folder": "Unknown folder",
        "today": "Today",
        "yesterday": "Yesterday",
        "this_month": "This month",
        "last_month": "Last month",
        "this_year": "This year",
        "last_year": "Last year",
    },
}

DEFAULT_LANGUAGE = "en"


def t(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a phrase, falling back to English and then to the key."""
    phrases = PHRASES.get(language) or PHRASES[DEFAULT_LANGUAGE]
    return phrases.get(key) or PHRASES[DEFAULT_LANGUAGE].get(key, key)
