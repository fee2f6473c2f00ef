'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded test data for the collex suites.
'''

import numpy as np
from faker import Faker
from collex import from_iterable, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter backed by faker for values and numpy for randomness."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    # --- sequences for the collection algorithms ---

    def integers(self, count: int, low: int, high: int) -> List[int]:
        """`count` ints in [low, high], duplicates likely when the range is small"""
        return [int(x) for x in self._rng.integers(low, high, size=count, endpoint=True)]

    def sorted_unique(self, count: int, low: int, high: int) -> List[int]:
        """`count` distinct ints in [low, high], ascending"""
        population = np.arange(low, high + 1)
        count = min(count, len(population))
        return sorted(int(x) for x in self._rng.choice(population, size=count, replace=False))

    def words(self, count: int, vocabulary: int = 8) -> List[str]:
        """`count` words drawn from a small faker vocabulary, so repeats occur"""
        pool = [self._fake.unique.word() for _ in range(vocabulary)]
        return [pool[int(i)] for i in self._rng.integers(0, len(pool), size=count)]


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def generator(seed: Optional[int] = None) -> Generator:
    return Generator(seed)
