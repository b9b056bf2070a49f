"""Outcome types for a single subsidy extraction."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class NotFoundReason(str, Enum):
    REGION_NOT_FOUND = "REGION_NOT_FOUND"
    TRIM_OR_MONEY_NOT_FOUND = "TRIM_OR_MONEY_NOT_FOUND"
    # 트림 코드로 정확 라벨도, 모델 단위 라벨도 만들 수 없음
    UNKNOWN_TRIM = "UNKNOWN_TRIM"


@dataclass(frozen=True)
class Found:
    amount_won: int
    matched_alias: str

    def __post_init__(self):
        if self.amount_won < 0:
            raise ValueError("amount_won must be non-negative")


@dataclass(frozen=True)
class NotFound:
    reason: NotFoundReason


ExtractionResult = Union[Found, NotFound]
