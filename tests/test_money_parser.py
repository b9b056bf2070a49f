"""단위 테스트: 금액 파서"""
from app.services.money_parser import parse_won, MoneyRule, MAN_WON
import re


def test_total_subsidy_in_man_won():
    assert parse_won("총 보조금 336만원") == 3360000


def test_total_subsidy_without_spaces():
    assert parse_won("총보조금336만원") == 3360000


def test_total_subsidy_in_won_with_commas():
    assert parse_won("총 보조금 3,360,000원") == 3360000


def test_total_label_preferred_over_earlier_won_amount():
    text = "차량가 52,990,000원 / 총 보조금 336만원"
    assert parse_won(text) == 3360000


def test_plain_won_above_threshold():
    assert parse_won("지원액 1,234,567 원") == 1234567


def test_small_won_number_ignored():
    assert parse_won("접수 12원") is None
    assert parse_won("잔여 100,000원") is None


def test_falls_back_to_first_man_won():
    assert parse_won("국비 168만원 지방비 168만원") == 1680000


def test_comma_grouped_man_won():
    assert parse_won("보조금 1,200만원") == 12000000


def test_no_amount():
    assert parse_won("Model 3 Long Range") is None
    assert parse_won("") is None
    assert parse_won(", 원") is None


def test_custom_rules():
    rules = (MoneyRule("local_only", re.compile(r"지방비\s*(\d[\d,]*)\s*만원"), lambda n: n * MAN_WON),)
    assert parse_won("국비 168만원 지방비 150만원", rules=rules) == 1500000
