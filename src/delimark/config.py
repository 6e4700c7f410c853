"""Processing configuration for delimark.

Configuration is an explicit, immutable value: build a ProcessConfig once
and pass it (or the components it builds) wherever text is processed.
There is no module-level mutable configuration.

Usage:
    config = ProcessConfig.from_dict({
        "catalog": {"block": ["> "], "paired": ["*", "**"]},
        "max_workers": 4,
    })
    tokens = config.process(source)

"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from delimark.catalog import DEFAULT_CATALOG, MarkerCatalog

if TYPE_CHECKING:
    from delimark.lexer import Lexer
    from delimark.tokens import Token
    from delimark.validation import Validator


@dataclass(frozen=True, slots=True)
class ProcessConfig:
    """Immutable processing configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        catalog: Markers recognized by the lexer and validator
        max_workers: Thread pool size for per-line validation
            (None validates sequentially)

    """

    catalog: MarkerCatalog = DEFAULT_CATALOG
    max_workers: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ProcessConfig":
        """Create ProcessConfig from dictionary.

        Only includes keys that are valid ProcessConfig fields; unknown keys
        are silently ignored. "catalog" may be a MarkerCatalog or a dict
        accepted by MarkerCatalog.from_dict().

        Example:
            >>> config = ProcessConfig.from_dict({
            ...     "max_workers": 2,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_workers
            2

        Raises:
            CatalogError: If the catalog dict describes an invalid catalog.
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        catalog = filtered.get("catalog")
        if isinstance(catalog, dict):
            filtered["catalog"] = MarkerCatalog.from_dict(catalog)
        return cls(**filtered)

    def lexer(self) -> "Lexer":
        """Build a Lexer for this configuration."""
        from delimark.lexer import Lexer

        return Lexer(self.catalog)

    def validator(self) -> "Validator":
        """Build a Validator for this configuration."""
        from delimark.validation import Validator

        return Validator(self.catalog, max_workers=self.max_workers)

    def process(self, source: str) -> list["Token"]:
        """Lex and validate source with this configuration."""
        return self.validator().validate(self.lexer().iter_lines(source))


__all__ = ["ProcessConfig"]
