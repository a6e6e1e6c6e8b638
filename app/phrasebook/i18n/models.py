"""Translation models for the resolver.

Defines the translation entry variants, context-scoped override tables and
the bundle that the Translator merges into its state.
"""

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class PluralRange:
    """Inclusive numeric range paired with the template it selects.

    A bound of None leaves that side open. A range with both bounds None
    only matches when no number was supplied at all.

    Attributes:
        low: Lower bound (inclusive), or None.
        high: Upper bound (inclusive), or None.
        template: Template rendered when the range matches.
    """

    low: Optional[int]
    high: Optional[int]
    template: str

    def matches(self, number: Optional[int]) -> bool:
        """Check whether the range selects the given number.

        Args:
            number: Quantity supplied by the caller, or None when absent.

        Returns:
            True if the range matches, False otherwise.
        """
        if number is None:
            return self.low is None and self.high is None
        if self.low is not None:
            return number >= self.low and (self.high is None or number <= self.high)
        if self.high is not None:
            return number <= self.high
        return False


@dataclass(frozen=True)
class LiteralEntry:
    """Single translated template."""

    text: str


@dataclass(frozen=True)
class PluralRangesEntry:
    """Ordered plural ranges; the first matching range wins."""

    ranges: Tuple[PluralRange, ...]


@dataclass(frozen=True)
class ExternalDictionaryEntry:
    """Category name -> template mapping interpreted by a plural extension.

    The categories are copied into a read-only mapping, so the entry neither
    shares the caller's dict nor can be changed after construction.
    """

    categories: Mapping[str, str]

    def __post_init__(self):
        object.__setattr__(self, "categories", MappingProxyType(dict(self.categories)))

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.categories.items())))

    def __deepcopy__(self, memo):
        return self


TranslationEntry = Union[LiteralEntry, PluralRangesEntry, ExternalDictionaryEntry]
TranslationTable = Dict[str, TranslationEntry]

_ENTRY_TYPES = (LiteralEntry, PluralRangesEntry, ExternalDictionaryEntry)


def _range_from_value(value: Any) -> PluralRange:
    if isinstance(value, PluralRange):
        return value
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(
            f"Plural range must be a [low, high, template] triple: {value!r}"
        )
    low, high, template = value
    for bound in (low, high):
        if bound is not None and (isinstance(bound, bool) or not isinstance(bound, int)):
            raise ValueError(f"Plural range bounds must be integers or null: {value!r}")
    if not isinstance(template, str):
        raise ValueError(f"Plural range template must be a string: {value!r}")
    return PluralRange(low=low, high=high, template=template)


def entry_from_value(value: Any) -> TranslationEntry:
    """Coerce raw bundle data into a TranslationEntry.

    - str: LiteralEntry
    - list of [low, high, template] triples: PluralRangesEntry
    - dict of category -> template: ExternalDictionaryEntry

    Args:
        value: Raw value from a bundle, or an already-built entry.

    Returns:
        The matching TranslationEntry variant.

    Raises:
        ValueError: If value has none of the supported shapes.
    """
    if isinstance(value, _ENTRY_TYPES):
        return value
    if isinstance(value, str):
        return LiteralEntry(text=value)
    if isinstance(value, (list, tuple)):
        return PluralRangesEntry(ranges=tuple(_range_from_value(v) for v in value))
    if isinstance(value, Mapping):
        categories = {}
        for category, template in value.items():
            if not isinstance(template, str):
                raise ValueError(
                    f"Plural category {category!r} must map to a string: {template!r}"
                )
            categories[str(category)] = template
        return ExternalDictionaryEntry(categories=categories)
    raise ValueError(f"Unsupported translation value: {value!r}")


def table_from_dict(data: Mapping[str, Any]) -> TranslationTable:
    """Build a TranslationTable from a key -> raw value mapping.

    Args:
        data: Mapping of phrase key to raw translation value.

    Returns:
        TranslationTable with coerced entries.

    Raises:
        ValueError: If data is not a mapping or holds an invalid value.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Translation values must be a mapping: {data!r}")
    return {str(key): entry_from_value(value) for key, value in data.items()}


@dataclass
class ContextTable:
    """Translation table that overrides defaults for a matching context.

    Attributes:
        matches: Attribute name -> required value; all must match.
        values: Translations used while the context matches.
    """

    matches: Dict[str, str] = field(default_factory=dict)
    values: TranslationTable = field(default_factory=dict)

    def is_satisfied_by(self, context: Mapping[str, str]) -> bool:
        """Check whether every required attribute is present and equal.

        An attribute missing from context is a non-match.

        Args:
            context: Active context mapping.

        Returns:
            True if the table applies to the context, False otherwise.
        """
        for attribute, required in self.matches.items():
            if attribute not in context or context[attribute] != required:
                return False
        return True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContextTable":
        """Create ContextTable from {"matches": {...}, "values": {...}}.

        Raises:
            ValueError: If the shape is invalid.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Context table must be a mapping: {data!r}")
        matches = data.get("matches") or {}
        if not isinstance(matches, Mapping):
            raise ValueError(f"Context matches must be a mapping: {matches!r}")
        return cls(
            matches={str(k): str(v) for k, v in matches.items()},
            values=table_from_dict(data.get("values") or {}),
        )


@dataclass
class TranslationBundle:
    """Default translations plus ordered context-scoped overrides.

    Attributes:
        values: Default table, or None when the bundle has none.
        contexts: Context tables in authored order, or None.
    """

    values: Optional[TranslationTable] = None
    contexts: Optional[List[ContextTable]] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TranslationBundle":
        """Create TranslationBundle from its interchange shape.

        Expected format:
            values:
              "Hello": "Hello translated"
              "%n comments": [[0, 0, "%n comments"], [1, 1, "%n comment"], [2, null, "%n comments"]]
            contexts:
              - matches: {gender: male}
                values: {...}

        Args:
            data: Parsed bundle data.

        Returns:
            TranslationBundle instance.

        Raises:
            ValueError: If the shape is invalid.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Translation bundle must be a mapping: {data!r}")

        values = data.get("values")
        contexts = data.get("contexts")
        if contexts is not None and not isinstance(contexts, (list, tuple)):
            raise ValueError(f"Bundle contexts must be a list: {contexts!r}")

        return cls(
            values=table_from_dict(values) if values is not None else None,
            contexts=(
                [ContextTable.from_dict(c) for c in contexts]
                if contexts is not None
                else None
            ),
        )

    def merge(self, other: "TranslationBundle") -> None:
        """Merge another bundle into this one.

        Default values are overwritten key by key; context tables are
        appended after the existing ones.

        Args:
            other: TranslationBundle to merge.
        """
        if other.values is not None:
            if self.values is None:
                self.values = dict(other.values)
            else:
                self.values.update(other.values)

        if other.contexts is not None:
            if self.contexts is None:
                self.contexts = copy.deepcopy(other.contexts)
            else:
                self.contexts.extend(copy.deepcopy(other.contexts))
