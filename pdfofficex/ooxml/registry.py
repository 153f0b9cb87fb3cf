"""Registry mapping output kinds to package builders."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Sequence

from ..types import ConversionOptions, OutputKind
from .types import CoreProperties

PackageBuilder = Callable[[Sequence[str], CoreProperties, ConversionOptions], bytes]


class BuilderRegistry:
    """Registry storing the package builder for each output kind."""

    def __init__(self) -> None:
        self._builders: Dict[OutputKind, PackageBuilder] = {}

    def register(self, kind: OutputKind, builder: PackageBuilder) -> None:
        if kind in self._builders:
            raise ValueError(f"Builder for '{kind.value}' is already registered")
        self._builders[kind] = builder

    def get(self, kind: OutputKind) -> PackageBuilder:
        try:
            return self._builders[kind]
        except KeyError as exc:
            raise KeyError(f"No builder registered for '{kind.value}'") from exc

    def kinds(self) -> Iterable[OutputKind]:
        return sorted(self._builders, key=lambda kind: kind.value)


registry = BuilderRegistry()


def register_builder(kind: OutputKind):
    def decorator(func: PackageBuilder) -> PackageBuilder:
        registry.register(kind, func)
        return func

    return decorator


__all__ = ["BuilderRegistry", "PackageBuilder", "register_builder", "registry"]
