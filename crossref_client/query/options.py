"""Query options for CrossRef list endpoints.

Options support both method chaining and named parameter construction:

    options = QueryOptions().query("climate").filter({"type": "journal-article"})
    options = QueryOptions(query="climate", rows=50)

Any key that is not one of the named options is passed through to CrossRef
verbatim as ``key=value``.
"""

from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Dict, Iterator, Optional, Sequence, Union

from typing_extensions import Self, TypeAlias

FilterValue: TypeAlias = Union[str, int, bool, Sequence[Union[str, int, bool]]]
"""A single filter value, or a list of values for the same filter field."""

NAMED_OPTIONS = ("query", "filter", "facet", "offset", "rows")


class QueryOptions(Mapping):
    """An ordered set of query options for a CrossRef list request.

    Options keep the order in which they were first set; this only affects
    the generated URL, never the meaning of the request. Instances behave as
    read-only mappings, so ``options["offset"]`` and ``dict(options)`` work
    and they compare equal to plain dicts with the same content.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the options with optional named parameters.

        Args:
            **kwargs: Option names and values. Names other than ``query``,
                ``filter``, ``facet``, ``offset`` and ``rows`` are passthrough
                parameters.
        """
        self._params: Dict[str, Any] = {}

        if kwargs:
            self.parameters(**kwargs)

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "QueryOptions":
        """Create options from a plain mapping, preserving its key order.

        Use this instead of keyword arguments for passthrough names that are
        not valid Python identifiers (e.g. ``"select"`` is fine, but
        ``"sample-size"`` is not).
        """
        options = cls()
        for key, value in mapping.items():
            options.set(key, value)
        return options

    @classmethod
    def coerce(cls, options: Optional[Mapping]) -> "QueryOptions":
        """Return a fresh ``QueryOptions`` built from *options*.

        The argument is never modified; ``None`` gives an empty option set.
        """
        if options is None:
            return cls()
        if isinstance(options, QueryOptions):
            return options.copy()
        return cls.from_mapping(options)

    def parameters(self, **kwargs: Any) -> Self:
        """Apply options given as keyword arguments, in order.

        Returns:
            self for method chaining
        """
        for key, value in kwargs.items():
            self.set(key, value)
        return self

    def set(self, key: str, value: Any) -> Self:
        """Set any option by name.

        Named options go through their setter; anything else is stored as a
        passthrough parameter.
        """
        if key in NAMED_OPTIONS:
            return getattr(self, key)(value)
        return self.param(key, value)

    def query(self, text: str) -> Self:
        """Free-text search across the resource metadata.

        Queries longer than 2000 characters are truncated when serialized.
        """
        return self._set_param("query", text)

    def filter(
        self, fields: Union[Mapping[str, FilterValue], str, Sequence[str]]
    ) -> Self:
        """Restrict results with CrossRef filters.

        Args:
            fields: Mapping from filter name to a value or a list of values,
                e.g. ``{"type": "journal-article", "has-full-text": True}``.
                A list emits one clause per value. Ready-made clauses, as one
                ``"name:value,..."`` string or a list of them, are sent as is.

        Returns:
            self for method chaining
        """
        if isinstance(fields, Mapping):
            fields = dict(fields)
        return self._set_param("filter", fields)

    def facet(self, enabled: bool = True) -> Self:
        """Ask CrossRef for facet counts alongside the results."""
        return self._set_param("facet", enabled)

    def offset(self, offset: int) -> Self:
        """Index of the first result to return."""
        return self._set_param("offset", offset)

    def rows(self, rows: int) -> Self:
        """Number of results per page (CrossRef defaults to 20)."""
        return self._set_param("rows", rows)

    def param(self, key: str, value: Any) -> Self:
        """Set a passthrough parameter, sent as ``key=value``."""
        return self._set_param(key, value)

    def copy(self) -> Self:
        """Create a deep copy of these options."""
        return deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._params)

    def validate(self) -> Self:
        """Check the paging options before they are sent.

        ``offset`` and ``rows`` must be non-negative integers when set.
        Options set to ``None`` are unset and are not checked.

        Returns:
            self for method chaining

        Raises:
            ValueError: naming every paging option with a bad value.
        """
        problems = []
        for key in ("offset", "rows"):
            value = self._params.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                problems.append(f"{key}={value!r}")
        if problems:
            raise ValueError(
                f"Paging options must be non-negative integers: {', '.join(problems)}"
            )
        return self

    def _set_param(self, key: str, value: Any) -> Self:
        self._params[key] = value
        return self

    def __getitem__(self, key: str) -> Any:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        """Return a string representation of the options."""
        class_name = self.__class__.__name__
        params_str = ", ".join(f"{k}={v!r}" for k, v in self._params.items())
        return f"{class_name}({params_str})"
