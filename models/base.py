"""
Model Base Module

Shared helpers for the plain-data models exchanged with collaborators.
Models are built from dictionaries (snake_case or camelCase keys) and
serialize back to snake_case dictionaries.
"""

from dataclasses import asdict

from utils.errors import ValidationError


def pick(data, *keys, default=None):
    """Return the first present, non-None value among several key spellings."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def require_mapping(data, kind):
    """Ensure a collaborator handed over a dictionary."""
    if not isinstance(data, dict):
        raise ValidationError(f'{kind} must be an object')
    return data


class Model:
    """Mixin giving dataclass models a dictionary form."""

    def to_dict(self):
        return asdict(self)
