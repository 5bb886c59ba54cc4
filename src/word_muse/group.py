"""Functions and types for the generic grouping of records."""

from collections import defaultdict
from decimal import Decimal
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, TypeVar, Union

_TKey = TypeVar("_TKey")
_TValue = TypeVar("_TValue")

Grouping = Mapping[_TKey, List[_TValue]]
KeyFunction = Callable[[_TValue], _TKey]
KeySelector = Union[str, KeyFunction]


def groupby(items: Iterable[_TValue], selector: KeySelector) -> Grouping:
    """Groups items by a field name or by the results of a key function.

    For example, grouping ``[steve, jack, carol]`` by the field ``"team"``
    returns ``{"blue": [steve, carol], "red": [jack]}``.

    Items keep their relative input order within each group. Groups are ordered
    by :func:`group_sort_key`, never by insertion order. Items missing the
    selected field are grouped under the ``None`` key.

    Args:
        items: An iterable of items to be grouped.
        selector: Either the name of a field (mapping key or attribute) or a
            function that generates the key used to group items.

    Returns:
        A new dictionary of the original items grouped by key.

    Raises:
        TypeError: The selector is neither a string nor callable.
    """
    func = make_key_function(selector)
    grouping: Dict[Any, List[Any]] = defaultdict(list)
    for item in items:
        key = func(item)
        grouping[key].append(item)
    return {key: grouping[key] for key in sorted(grouping, key=group_sort_key)}


def make_key_function(selector: KeySelector) -> KeyFunction:
    """Resolves a key selector into a single key-producing function."""
    if callable(selector):
        return selector
    if isinstance(selector, str):
        name = selector
        return lambda item: get_field(item, name)
    raise TypeError(
        f"Key selector must be a field name or callable, not {type(selector).__name__}"
    )


def get_field(item: Any, name: str) -> Any:
    """Returns the named field of a mapping or object, ``None`` if missing.

    A field that is present with the value ``None`` is indistinguishable from a
    missing field, so both land in the ``None`` group.
    """
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def group_sort_key(key: Any) -> Tuple[int, Any]:
    """Returns the sort key imposing a total order over group keys.

    Numbers come first and compare numerically, then strings compared
    lexicographically, then any other key compared by its string rendering.
    The missing key (``None``) is always last.
    """
    if key is None:
        return (3, "")
    if isinstance(key, (Real, Decimal)):
        return (0, key)
    if isinstance(key, str):
        return (1, key)
    return (2, str(key))
