"""Story event flags.

Flags are plain ``dict[str, bool]`` entries (``GameState.event_flags``);
an absent flag counts as unset.

Condition strings:
    ``""``            always true
    ``"flag"``        flag is set
    ``"!flag"``       flag is not set
    ``"a & b"``       every term holds
    ``"a | b"``       at least one term holds

``&`` binds tighter than ``|`` and ``!`` applies to a single term, so
``"a & !b | c"`` reads as ``(a and not b) or c``.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping


def has_flag(flags: MutableMapping[str, bool], flag: str) -> bool:
    return flags.get(flag) is True


def set_flag(flags: MutableMapping[str, bool], flag: str) -> None:
    flags[flag] = True


def clear_flag(flags: MutableMapping[str, bool], flag: str) -> None:
    flags[flag] = False


def has_all_flags(flags: MutableMapping[str, bool], flag_ids: Iterable[str]) -> bool:
    return all(has_flag(flags, flag) for flag in flag_ids)


def has_any_flag(flags: MutableMapping[str, bool], flag_ids: Iterable[str]) -> bool:
    return any(has_flag(flags, flag) for flag in flag_ids)


def get_set_flags(flags: MutableMapping[str, bool]) -> list[str]:
    """Names of all flags currently set, in insertion order."""
    return [flag for flag, value in flags.items() if value is True]


def _check_term(flags: MutableMapping[str, bool], term: str) -> bool:
    term = term.strip()
    if term.startswith("!"):
        return not has_flag(flags, term[1:].strip())
    return has_flag(flags, term)


def check_condition(flags: MutableMapping[str, bool], condition: str | None = None) -> bool:
    """Evaluate a flag condition string against ``flags``."""
    if not condition or not condition.strip():
        return True

    return any(
        all(_check_term(flags, term) for term in clause.split("&"))
        for clause in condition.split("|")
    )


__all__ = [
    "has_flag",
    "set_flag",
    "clear_flag",
    "has_all_flags",
    "has_any_flag",
    "get_set_flags",
    "check_condition",
]
