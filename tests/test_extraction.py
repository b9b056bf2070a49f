"""
Unit tests for the context locator and the extraction orchestrator.
"""

from app.services.context_locator import locate_label, locate_window
from app.services.extraction import extract
from app.services.extraction_result import Found, NotFound, NotFoundReason

from fakes import SUBSIDY_PAGE


class TestLocateWindow:
    def test_region_missing(self):
        assert locate_window("<p>부산 250만원</p>", "서울") == NotFound(NotFoundReason.REGION_NOT_FOUND)

    def test_empty_inputs(self):
        assert locate_window("", "서울") == NotFound(NotFoundReason.REGION_NOT_FOUND)
        assert locate_window("서울", "") == NotFound(NotFoundReason.REGION_NOT_FOUND)

    def test_region_is_case_sensitive(self):
        assert isinstance(locate_window("SEOUL 336만원", "seoul"), NotFound)

    def test_window_is_clamped(self):
        text = "a" * 10 + "서울" + "b" * 10
        assert locate_window(text, "서울", radius=5) == "aaaaa" + "서울" + "bbb"
        assert locate_window(text, "서울", radius=1000) == text


class TestLocateLabel:
    def test_case_insensitive(self):
        window = locate_label("xx MODEL 3 long range 336만원", "Model 3 Long Range")
        assert isinstance(window, str)
        assert "336만원" in window

    def test_keeps_more_text_after_label(self):
        window = locate_label("1234567890LABELabcdefghij", "label", before=3, after=8)
        assert window == "890LABELabc"

    def test_missing_label(self):
        assert isinstance(locate_label("서울 Model Y", "Model 3"), NotFound)


class TestExtract:
    def test_exact_alias_in_region(self):
        result = extract(SUBSIDY_PAGE, "서울", "M3_LR")
        assert result == Found(amount_won=3360000, matched_alias="alias:Model 3 Premium Long Range RWD")

    def test_region_not_found(self):
        assert extract(SUBSIDY_PAGE, "대구", "M3_LR") == NotFound(NotFoundReason.REGION_NOT_FOUND)

    def test_region_is_normalized(self):
        assert isinstance(extract(SUBSIDY_PAGE, "  서울 ", "M3_LR"), Found)

    def test_exact_alias_beats_earlier_fallback(self):
        page = (
            "서울 Model 3 총 보조금 200만원"
            + " " * 5000
            + "Model 3 Premium Long Range RWD 총 보조금 336만원"
        )
        result = extract(page, "서울", "M3_LR")
        assert result == Found(amount_won=3360000, matched_alias="alias:Model 3 Premium Long Range RWD")

    def test_fallback_when_no_trim_label(self):
        page = "서울 | 테슬라 Model Y | 총 보조금 300만원"
        result = extract(page, "서울", "MY_LR")
        assert result == Found(amount_won=3000000, matched_alias="fallback:Model Y")

    def test_unrecognised_trim_uses_fallback_only(self):
        page = "서울 | 모델 3 신형 | 총 보조금 280만원"
        result = extract(page, "서울", "M3_NEW")
        assert result == Found(amount_won=2800000, matched_alias="fallback:모델 3")

    def test_unknown_model_family(self):
        assert extract(SUBSIDY_PAGE, "서울", "IONIQ5") == NotFound(NotFoundReason.UNKNOWN_TRIM)

    def test_label_without_amount(self):
        page = "서울 Model 3 Performance 보조금 문의"
        assert extract(page, "서울", "M3_PERF") == NotFound(NotFoundReason.TRIM_OR_MONEY_NOT_FOUND)

    def test_repeatable(self):
        first = extract(SUBSIDY_PAGE, "서울", "M3_LR")
        second = extract(SUBSIDY_PAGE, "서울", "M3_LR")
        assert first == second
