"""
Show — каноническое строковое представление значений

Соглашения:
- str: в двойных кавычках с JSON-экранированием (non-ASCII сохраняется)
- list: ``[1, 2, 3]``
- tuple: ``(1, 2)``, одноэлементный ``(1,)``; namedtuple через repr
- dict: ``{"key": value}`` в порядке вставки
- set / frozenset: элементы отсортированы по их представлению
- остальное: ``repr`` (Pair переопределяет repr через show)

Самоссылающиеся контейнеры отображаются как ``<Circular>``.
"""

import json
from typing import Any, Final, FrozenSet

SHOW_CIRCULAR: Final[str] = "<Circular>"


def show(value: Any) -> str:
    """
    Строковое представление значения.

    Examples:
        >>> show("abc")
        '"abc"'
        >>> show([1, 2, 3])
        '[1, 2, 3]'
    """
    return _show(value, frozenset())


def _show(value: Any, seen: FrozenSet[int]) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if not isinstance(value, (list, tuple, dict, set, frozenset)) or hasattr(value, "_fields"):
        return repr(value)

    if id(value) in seen:
        return SHOW_CIRCULAR
    seen = seen | {id(value)}

    if isinstance(value, list):
        return "[" + ", ".join(_show(item, seen) for item in value) + "]"
    if isinstance(value, tuple):
        items = [_show(item, seen) for item in value]
        if len(items) == 1:
            return f"({items[0]},)"
        return "(" + ", ".join(items) + ")"
    if isinstance(value, dict):
        entries = (f"{_show(key, seen)}: {_show(item, seen)}" for key, item in value.items())
        return "{" + ", ".join(entries) + "}"

    items = sorted(_show(item, seen) for item in value)
    kind = type(value).__name__
    if not items:
        return f"{kind}()"
    body = "{" + ", ".join(items) + "}"
    return body if isinstance(value, set) else f"{kind}({body})"
