"""단위 테스트: 원본 페이지 조회 (httpx.MockTransport)"""
import asyncio

import httpx
import pytest

from app.services.subsidy_fetcher import SubsidyPageFetcher, SubsidySourceError

URL = "https://ev.or.kr/nportal/buySupprt/initPsLocalCarPirceAction.do"


def _fetcher(handler):
    return SubsidyPageFetcher(url=URL, timeout=5.0, user_agent="Mozilla/5.0", transport=httpx.MockTransport(handler))


def test_fetch_returns_text_with_browser_headers():
    seen = {}

    def handler(request: httpx.Request):
        seen["ua"] = request.headers.get("user-agent")
        seen["accept"] = request.headers.get("accept")
        return httpx.Response(200, text="<p>서울 총 보조금 336만원</p>")

    text = asyncio.run(_fetcher(handler).fetch())
    assert "336만원" in text
    assert seen["ua"] == "Mozilla/5.0"
    assert seen["accept"].startswith("text/html")


def test_fetch_non_2xx_raises():
    def handler(request):
        return httpx.Response(503, text="busy")

    with pytest.raises(SubsidySourceError) as exc_info:
        asyncio.run(_fetcher(handler).fetch())
    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "ev.or.kr HTTP 503"


def test_fetch_network_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SubsidySourceError) as exc_info:
        asyncio.run(_fetcher(handler).fetch())
    assert str(exc_info.value) == "connection refused"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_fetch_timeout_has_diagnostic():
    def handler(request):
        raise httpx.ReadTimeout("", request=request)

    with pytest.raises(SubsidySourceError) as exc_info:
        asyncio.run(_fetcher(handler).fetch())
    assert str(exc_info.value) == "ReadTimeout"


def test_fetch_invalid_url_raises_source_error():
    fetcher = SubsidyPageFetcher(
        url="https://ev.or.kr/\x00x",
        timeout=5.0,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="")),
    )
    with pytest.raises(SubsidySourceError) as exc_info:
        asyncio.run(fetcher.fetch())
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
