"""
Ingredient Matching Service

Functions for building merge keys from ingredient names and finding
catalog/inventory entries for them.
"""


def normalize_identity(name):
    """
    Normalize an ingredient name into a merge key.

    Lowercase, trim, strip one trailing 's'. Only ever used as a key, never
    for display: 'Onions' and 'onion' share a key.
    """
    normalized = ' '.join((name or '').lower().split())
    if normalized.endswith('s'):
        normalized = normalized[:-1]
    return normalized


def index_by_identity(items):
    """Map normalized name -> item. The first item wins on duplicate names."""
    index = {}
    for item in items or ():
        index.setdefault(normalize_identity(item.name), item)
    return index


def find_by_identity(index, name):
    return index.get(normalize_identity(name))
