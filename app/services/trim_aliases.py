"""트림 코드 -> 원본 사이트 표기(라벨) 매핑."""

from enum import Enum
from typing import Dict, List, Optional, Tuple


class TrimCode(str, Enum):
    M3_STD = "M3_STD"
    M3_LR = "M3_LR"
    M3_PERF = "M3_PERF"
    MY_RWD = "MY_RWD"
    MY_LR = "MY_LR"


# 사이트마다 표기가 달라 영문/한글 변형을 모두 둔다. 앞에 있을수록 구체적인 라벨.
TRIM_ALIASES: Dict[TrimCode, Tuple[str, ...]] = {
    TrimCode.M3_STD: ("Model 3 Standard RWD", "Model 3 Standard", "모델 3", "스탠다드", "RWD"),
    TrimCode.M3_LR: ("Model 3 Premium Long Range RWD", "Model 3 Long Range", "롱레인지", "Long Range"),
    TrimCode.M3_PERF: ("Model 3 Performance", "퍼포먼스", "Performance"),
    TrimCode.MY_RWD: ("Model Y Premium RWD", "Model Y RWD", "모델 Y", "Premium RWD", "RWD"),
    TrimCode.MY_LR: ("Model Y Premium Long Range", "Model Y Long Range", "Long Range", "롱레인지", "AWD"),
}

# 트림 라벨이 페이지에 없을 때 쓰는 모델 단위 라벨 (트림 코드 접두사 기준)
MODEL_FAMILY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "M3": ("Model 3", "모델 3"),
    "MY": ("Model Y", "모델 Y"),
}


def parse_trim_code(trim: str) -> Optional[TrimCode]:
    """알려진 코드면 TrimCode, 아니면 None."""
    try:
        return TrimCode(trim)
    except ValueError:
        return None


def aliases_for(trim: str) -> List[str]:
    code = parse_trim_code(trim)
    if code is None:
        return []
    return list(TRIM_ALIASES[code])


def fallback_aliases_for(trim: str) -> List[str]:
    for prefix, labels in MODEL_FAMILY_ALIASES.items():
        if trim.startswith(prefix):
            return list(labels)
    return []
