"""
seeded synthetic records for the test suites.

a schema is a dict of field -> generator entry, where an entry is one of:
  'word'                                  faker provider name
  ('pyint', {'min_value': 1})             faker provider with kwargs
  {'_provider': 'choice', 'from': [...]}  pick one value
  {'_provider': 'literal', 'value': x}    constant
"""
from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from seqy import from_iterable, Enumerable


class Generator:
    """schema interpreter."""

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
        provider = config["_provider"]
        if provider == "choice":
            # numpy scalars would defeat isinstance checks downstream
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            return self._resolve_faker_method(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


def from_schema(schema: Dict[str, Any], count: int, seed: Optional[int] = None) -> Enumerable:
    """generate `count` records up front and wrap them in a restartable enumerable"""
    generator = Generator(seed)
    return from_iterable([generator.create(schema) for _ in range(count)])
