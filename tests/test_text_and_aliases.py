"""단위 테스트: 공백 정규화 / 트림 별칭"""
from app.services.text import normalize
from app.services.trim_aliases import TrimCode, aliases_for, fallback_aliases_for, parse_trim_code


def test_normalize_collapses_whitespace():
    assert normalize("  서울   특별시\t\n강남구 ") == "서울 특별시 강남구"


def test_normalize_empty():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("   ") == ""


def test_aliases_most_specific_first():
    aliases = aliases_for("M3_LR")
    assert aliases[0] == "Model 3 Premium Long Range RWD"
    assert "롱레인지" in aliases


def test_every_trim_has_aliases():
    for code in TrimCode:
        assert aliases_for(code.value)


def test_unknown_trim_has_no_primary_aliases():
    assert aliases_for("M3_NEW") == []
    assert parse_trim_code("M3_NEW") is None


def test_fallback_by_model_family():
    assert fallback_aliases_for("M3_PERF") == ["Model 3", "모델 3"]
    assert fallback_aliases_for("MY_LR") == ["Model Y", "모델 Y"]
    assert fallback_aliases_for("M3_NEW") == ["Model 3", "모델 3"]
    assert fallback_aliases_for("IONIQ5") == []
