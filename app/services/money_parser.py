"""Parse a won amount out of a short block of Korean subsidy text.

Rules are evaluated in order and the first one that produces a value wins:

1. ``총 보조금 336만원``  -> 336 * 10,000
2. ``3,360,000원``        -> 3,360,000 (only when greater than 100,000)
3. ``336만원``            -> 336 * 10,000

The rule list is plain data so a source with a different layout can pass its
own rules to :func:`parse_won` without touching the orchestration code.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Sequence

MAN_WON = 10000
# 100,000원 이하의 "원" 숫자는 개수/비율 등일 가능성이 높아 무시
MIN_PLAIN_WON = 100000

_NUMBER = r"(\d[\d,]*)"


def _to_int(raw: str) -> int:
    return int(raw.replace(",", ""))


@dataclass(frozen=True)
class MoneyRule:
    name: str
    pattern: Pattern[str]
    convert: Callable[[int], Optional[int]]

    def apply(self, text: str) -> Optional[int]:
        m = self.pattern.search(text)
        if not m:
            return None
        return self.convert(_to_int(m.group(1)))


DEFAULT_RULES: Sequence[MoneyRule] = (
    MoneyRule(
        name="total_man_won",
        pattern=re.compile(r"총\s*보조금\s*" + _NUMBER + r"\s*만원"),
        convert=lambda n: n * MAN_WON,
    ),
    MoneyRule(
        name="plain_won",
        pattern=re.compile(_NUMBER + r"\s*원"),
        convert=lambda n: n if n > MIN_PLAIN_WON else None,
    ),
    MoneyRule(
        name="man_won",
        pattern=re.compile(_NUMBER + r"\s*만원"),
        convert=lambda n: n * MAN_WON,
    ),
)


def parse_won(window_text: str, rules: Sequence[MoneyRule] = DEFAULT_RULES) -> Optional[int]:
    """Return the subsidy amount in won found in ``window_text``, or None."""
    if not window_text:
        return None
    for rule in rules:
        value = rule.apply(window_text)
        if value is not None:
            return value
    return None
