"""
Density Registry Service

Maps ingredient names to densities, the only route for converting a specific
ingredient between weight and volume.
"""

import logging

from constants import INGREDIENT_DENSITIES, DENSITY_CONVENTIONS
from models import IngredientDensity
from utils.errors import ValidationError

from .units import get_factor

logger = logging.getLogger(__name__)

MATCH_POLICIES = ('longest', 'first')


def grams_per_ml(density):
    """Normalize an IngredientDensity to grams per milliliter."""
    return density.density / get_factor(DENSITY_CONVENTIONS[density.convention])


class DensityRegistry:
    """
    Immutable ingredient density lookup.

    Lookup tries an exact (case-insensitive) name first. On a miss, every
    registered name that contains the query, or is contained in it, is a
    candidate:

    - 'longest' prefers names found inside the query, longest first, so
      'coconut milk' wins over 'milk' for "light coconut milk". Failing that
      it takes the shortest name containing the query, so "onion" finds
      'onions' rather than 'onion powder'. Ties go to the earlier entry.
    - 'first' returns the first candidate in registration order, the
      behaviour existing data may rely on.
    """

    def __init__(self, densities=(), policy='longest'):
        if policy not in MATCH_POLICIES:
            raise ValidationError(f"Unknown density match policy '{policy}'",
                                  f"Use one of: {', '.join(MATCH_POLICIES)}")
        self.policy = policy
        entries = {}
        for density in densities:
            # Later entries replace earlier ones with the same name
            entries.pop(density.key, None)
            entries[density.key] = density
        self._entries = entries

    @classmethod
    def from_table(cls, table=INGREDIENT_DENSITIES, policy='longest'):
        return cls((IngredientDensity(name, value, convention) for name, value, convention in table),
                   policy=policy)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, name):
        return self.find(name) is not None

    def with_densities(self, densities):
        """Return a new registry extended (or overridden) by the given densities."""
        densities = list(densities)
        if not densities:
            return self
        return DensityRegistry(list(self._entries.values()) + densities, policy=self.policy)

    def with_policy(self, policy):
        if policy == self.policy:
            return self
        return DensityRegistry(self._entries.values(), policy=policy)

    def find(self, ingredient_name):
        """Return the IngredientDensity for an ingredient name, or None."""
        query = (ingredient_name or '').strip().lower()
        if not query:
            return None

        if query in self._entries:
            return self._entries[query]

        if self.policy == 'first':
            for key, density in self._entries.items():
                if key in query or query in key:
                    logger.debug("Density for '%s' matched '%s' (first match)", query, key)
                    return density
            return None

        # Names inside the query win (longest first), then names containing it (shortest first)
        best = None
        best_rank = None
        for key, density in self._entries.items():
            if key in query:
                rank = (0, -len(key))
            elif query in key:
                rank = (1, len(key))
            else:
                continue
            if best_rank is None or rank < best_rank:
                best, best_rank = density, rank

        if best is not None:
            logger.debug("Density for '%s' matched '%s' (longest match)", query, best.key)
        return best

    def search(self, query):
        """Entries whose name contains the query (all entries for an empty query)."""
        query = (query or '').strip().lower()
        return [density for key, density in self._entries.items() if query in key]

    def all(self):
        return list(self._entries.values())


# Loaded once, shared read-only
DEFAULT_REGISTRY = DensityRegistry.from_table()


def get_registry(policy=None):
    """Default registry, optionally with a different match policy."""
    if policy is None:
        return DEFAULT_REGISTRY
    return DEFAULT_REGISTRY.with_policy(policy)


def extend_with_catalog(registry, catalog):
    """Registry extended by catalog ingredients that carry a density (g/ml)."""
    if registry is None:
        registry = DEFAULT_REGISTRY
    return registry.with_densities(
        IngredientDensity(ingredient.name, ingredient.density, 'g/ml')
        for ingredient in catalog or ()
        if ingredient.density
    )
