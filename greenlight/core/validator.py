import re
from collections.abc import Hashable, Iterable
from typing import Any

# https://html.spec.whatwg.org/#valid-e-mail-address
EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


class Validator:
    """Collects one error message per field.

    Create a fresh instance for every request; instances are not meant to be
    shared between threads.
    """

    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    @property
    def valid(self) -> bool:
        return not self.errors

    def add_error(self, key: str, message: str) -> None:
        # first message recorded for a key wins
        self.errors.setdefault(key, message)

    def check(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_error(key, message)


def matches(value: str, rx: re.Pattern[str]) -> bool:
    return rx.search(value) is not None


def permitted_value(value: Any, *permitted_values: Any) -> bool:
    return any(value == permitted for permitted in permitted_values)


def unique(values: Iterable[Hashable]) -> bool:
    items = list(values)
    return len(set(items)) == len(items)
