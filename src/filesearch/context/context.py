from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping

# Context code of the catalog data version dimension
DATA_VERSION_CODE = "version"

# Data version meaning "not tied to any specific version"
UNVERSIONED = "-1"


class ContextCodeNotSupported(KeyError):
    """Raised when a context is asked for a code it does not carry."""


@dataclass(frozen=True)
class Context:
    """
    Immutable set of context code to value pairs, e.g. ``{"website": "de"}``.

    Codes keep the order they were given in.
    """

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for code, value in self.values.items():
            if not isinstance(code, str) or not isinstance(value, str):
                raise TypeError(
                    f"Context codes and values must be strings, got {code!r}: {value!r}"
                )
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    @classmethod
    def rehydrate(cls, data_set: Mapping[str, str]) -> "Context":
        """Rebuild a context from its ``to_dict()`` representation."""
        return cls(dict(data_set))

    def supported_codes(self) -> List[str]:
        return list(self.values)

    def supports_code(self, code: str) -> bool:
        return code in self.values

    def get_value(self, code: str) -> str:
        try:
            return self.values[code]
        except KeyError:
            raise ContextCodeNotSupported(
                f"No value found in the context for the code '{code}'"
            ) from None

    def to_dict(self) -> Dict[str, str]:
        return dict(self.values)

    def __str__(self) -> str:
        return "_".join(f"{code}:{value}" for code, value in self.values.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))
