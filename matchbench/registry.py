# registry.py
# Name-keyed catalog of the available matching engines.

from dataclasses import dataclass
from typing import Callable

from .algorithms import ENGINES
from .algorithms.base import MatchEngine


class UnknownAlgorithm(LookupError):
    """Raised when an algorithm name is not registered."""

    def __init__(self, name):
        super().__init__(f"Algorithm not found: {name}")
        self.name = name


@dataclass(frozen=True)
class AlgorithmDescriptor:
    name: str
    factory: Callable[[], MatchEngine]


class AlgorithmRegistry:
    """
    Append-only mapping from algorithm name to a zero-argument factory.

    Registering a name twice replaces the factory but keeps the original
    position, so enumeration order is always first-registration order.
    """

    def __init__(self, descriptors=()):
        self._descriptors = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor):
        self._descriptors[descriptor.name] = descriptor
        return descriptor

    def list_all(self):
        return list(self._descriptors.values())

    def names(self):
        return list(self._descriptors)

    def get(self, name):
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownAlgorithm(name) from None

    def instantiate(self, name):
        return self.get(name).factory()

    def __contains__(self, name):
        return name in self._descriptors

    def __len__(self):
        return len(self._descriptors)

    def __iter__(self):
        return iter(self.list_all())


def default_registry():
    """A new registry holding Naive, KMP, RabinKarp, BoyerMoore and Hybrid, in that order."""
    registry = AlgorithmRegistry()
    for engine_cls in ENGINES:
        registry.register(AlgorithmDescriptor(engine_cls.name, engine_cls))
    return registry
