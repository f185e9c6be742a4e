# multitrie/core/normalizer.py
# Canonical key form shared by insert and search.


def normalize_key(key: str) -> str:
    """Drop every whitespace character and lower-case the rest."""
    if not key:
        return ""
    return "".join(key.split()).lower()
