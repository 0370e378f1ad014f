# tests/unit/providers/test_providers.py
"""测试各提供商适配器的线路协议映射与响应解析。"""

import json
from collections.abc import Callable
from urllib.parse import parse_qs

import httpx
import pytest
from pydantic import SecretStr
from pytest_mock import MockerFixture

from rimtrans.core.types import ProviderError, ProviderName, ProviderRequest
from rimtrans.providers import (
    ApicaseProvider,
    DeepLProvider,
    GoogleProvider,
    LibreTranslateProvider,
    MyMemoryProvider,
    YandexProvider,
)
from rimtrans.providers.apicase import ApicaseProviderConfig

Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler, calls: list[httpx.Request]) -> httpx.AsyncClient:
    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    return httpx.AsyncClient(transport=httpx.MockTransport(recording))


def _form(request: httpx.Request) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(request.content.decode()).items()}


def _request(provider: ProviderName, **kwargs) -> ProviderRequest:
    return ProviderRequest(
        text="Hello", source_lang="en", target_lang="ru", provider=provider, **kwargs
    )


@pytest.mark.asyncio
async def test_apicase_uses_query_string_and_default_token() -> None:
    calls: list[httpx.Request] = []
    client = _client(
        lambda r: httpx.Response(200, json={"translated": True, "text": "Привет"}), calls
    )
    provider = ApicaseProvider(ApicaseProviderConfig(), client)

    response = await provider.atranslate(_request(ProviderName.APICASE))

    assert response.success
    assert response.translated_text == "Привет"
    assert response.provider == ProviderName.APICASE
    params = calls[0].url.params
    assert (params["token"], params["text"], params["from"], params["to"]) == (
        "vcru",
        "Hello",
        "en",
        "ru",
    )


@pytest.mark.asyncio
async def test_apicase_tries_next_endpoint_on_failure() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "first.test":
            return httpx.Response(503)
        if request.url.host == "second.test":
            return httpx.Response(200, json={"translated": False})
        return httpx.Response(200, json={"translated": True, "text": "Привет"})

    config = ApicaseProviderConfig(
        endpoints=["https://first.test/t", "https://second.test/t", "https://third.test/t"]
    )
    provider = ApicaseProvider(config, _client(handler, calls))

    response = await provider.atranslate(_request(ProviderName.APICASE))

    assert response.success
    assert [c.url.host for c in calls] == ["first.test", "second.test", "third.test"]


@pytest.mark.asyncio
async def test_apicase_fails_when_all_endpoints_fail() -> None:
    calls: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(500), calls)
    provider = ApicaseProvider(ApicaseProviderConfig(), client)

    response = await provider.atranslate(_request(ProviderName.APICASE))

    assert not response.success
    assert response.error_message == "Apicase API failed on all endpoints"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_google_requires_key_without_network_call() -> None:
    calls: list[httpx.Request] = []
    provider = GoogleProvider(
        GoogleProvider.CONFIG_MODEL(), _client(lambda r: httpx.Response(200), calls)
    )

    response = await provider.atranslate(_request(ProviderName.GOOGLE))

    assert not response.success
    assert "API key is required" in (response.error_message or "")
    assert calls == []


@pytest.mark.asyncio
async def test_google_form_body_and_response_parsing() -> None:
    calls: list[httpx.Request] = []
    body = {"data": {"translations": [{"translatedText": "Привет"}]}}
    provider = GoogleProvider(
        GoogleProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json=body), calls),
    )

    response = await provider.atranslate(
        _request(ProviderName.GOOGLE, api_key=SecretStr("g-key"))
    )

    assert response.translated_text == "Привет"
    assert calls[0].method == "POST"
    assert _form(calls[0]) == {
        "key": "g-key",
        "q": "Hello",
        "source": "en",
        "target": "ru",
        "format": "text",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("key", "host"),
    [("abc:fx", "api-free.deepl.com"), ("abc", "api.deepl.com")],
)
async def test_deepl_endpoint_selection_and_header_auth(key: str, host: str) -> None:
    calls: list[httpx.Request] = []
    body = {"translations": [{"text": "Привет"}]}
    provider = DeepLProvider(
        DeepLProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json=body), calls),
        api_key=SecretStr(key),
    )

    response = await provider.atranslate(_request(ProviderName.DEEPL))

    assert response.success
    assert calls[0].url.host == host
    assert calls[0].headers["Authorization"] == f"DeepL-Auth-Key {key}"
    form = _form(calls[0])
    assert (form["source_lang"], form["target_lang"]) == ("EN", "RU")


@pytest.mark.asyncio
async def test_yandex_language_pair() -> None:
    calls: list[httpx.Request] = []
    provider = YandexProvider(
        YandexProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json={"code": 200, "text": ["Привет"]}), calls),
        api_key=SecretStr("y-key"),
    )

    response = await provider.atranslate(_request(ProviderName.YANDEX))

    assert response.translated_text == "Привет"
    assert _form(calls[0])["lang"] == "en-ru"


@pytest.mark.asyncio
async def test_libretranslate_json_body_without_key() -> None:
    calls: list[httpx.Request] = []
    provider = LibreTranslateProvider(
        LibreTranslateProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json={"translatedText": "Привет"}), calls),
    )

    response = await provider.atranslate(_request(ProviderName.LIBRETRANSLATE))

    assert response.success
    payload = json.loads(calls[0].content)
    assert payload == {"q": "Hello", "source": "en", "target": "ru", "format": "text"}


@pytest.mark.asyncio
async def test_mymemory_rejects_unchanged_text() -> None:
    calls: list[httpx.Request] = []
    body = {"responseStatus": 200, "responseData": {"translatedText": "Hello"}}
    provider = MyMemoryProvider(
        MyMemoryProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json=body), calls),
    )

    response = await provider.atranslate(_request(ProviderName.MYMEMORY))

    assert not response.success
    assert "unchanged" in (response.error_message or "")
    assert calls[0].url.params["langpair"] == "en|ru"


@pytest.mark.asyncio
async def test_mymemory_non_200_status_is_failure() -> None:
    calls: list[httpx.Request] = []
    body = {"responseStatus": "403", "responseDetails": "INVALID LANGUAGE PAIR"}
    provider = MyMemoryProvider(
        MyMemoryProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json=body), calls),
    )

    response = await provider.atranslate(_request(ProviderName.MYMEMORY))

    assert not response.success
    assert "INVALID LANGUAGE PAIR" in (response.error_message or "")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "make_response",
    [
        lambda r: httpx.Response(200, content=b"<html>not json</html>"),
        lambda r: httpx.Response(200, json=["unexpected", "shape"]),
        lambda r: httpx.Response(200, json={"translatedText": 42}),
        lambda r: httpx.Response(200, json={"translatedText": "   "}),
        lambda r: httpx.Response(502),
    ],
)
async def test_malformed_responses_become_failures(make_response: Handler) -> None:
    calls: list[httpx.Request] = []
    provider = LibreTranslateProvider(
        LibreTranslateProvider.CONFIG_MODEL(), _client(make_response, calls)
    )

    response = await provider.atranslate(_request(ProviderName.LIBRETRANSLATE))

    assert not response.success
    assert response.provider == ProviderName.LIBRETRANSLATE
    assert response.error_message


@pytest.mark.asyncio
async def test_transport_errors_become_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = LibreTranslateProvider(
        LibreTranslateProvider.CONFIG_MODEL(), _client(handler, [])
    )

    response = await provider.atranslate(_request(ProviderName.LIBRETRANSLATE))

    assert not response.success
    assert "ConnectError" in (response.error_message or "")


@pytest.mark.asyncio
async def test_request_key_only_applies_to_requested_provider() -> None:
    calls: list[httpx.Request] = []
    body = {"data": {"translations": [{"translatedText": "Привет"}]}}
    provider = GoogleProvider(
        GoogleProvider.CONFIG_MODEL(),
        _client(lambda r: httpx.Response(200, json=body), calls),
        api_key=SecretStr("configured"),
    )

    # 请求针对的是 DeepL，Google 作为回退时应使用自己配置的 key
    response = await provider.atranslate(
        _request(ProviderName.DEEPL, api_key=SecretStr("deepl-key"))
    )

    assert response.success
    assert _form(calls[0])["key"] == "configured"


@pytest.mark.asyncio
async def test_apicase_skips_endpoint_with_malformed_text() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "a.test":
            return httpx.Response(200, json={"translated": True, "text": None})
        return httpx.Response(200, json={"translated": True, "text": "Привет"})

    config = ApicaseProviderConfig(endpoints=["https://a.test/t", "https://b.test/t"])
    provider = ApicaseProvider(config, _client(handler, calls))

    response = await provider.atranslate(_request(ProviderName.APICASE))

    assert response.success
    assert response.translated_text == "Привет"
    assert [c.url.host for c in calls] == ["a.test", "b.test"]


@pytest.mark.asyncio
async def test_deepl_without_key_fails_before_any_request() -> None:
    calls: list[httpx.Request] = []
    provider = DeepLProvider(
        DeepLProvider.CONFIG_MODEL(), _client(lambda r: httpx.Response(200), calls)
    )

    result = await provider._execute_translation("Hello", "en", "ru", None)

    assert isinstance(result, ProviderError)
    assert "API key is required" in result.error_message
    assert calls == []


@pytest.mark.asyncio
async def test_invalid_endpoint_url_becomes_failure(mocker: MockerFixture) -> None:
    provider = LibreTranslateProvider(
        LibreTranslateProvider.CONFIG_MODEL(endpoint="https://bad.test/translate"),
        _client(lambda r: httpx.Response(200), []),
    )
    mocker.patch.object(
        provider.client, "request", side_effect=httpx.InvalidURL("Invalid URL")
    )

    response = await provider.atranslate(_request(ProviderName.LIBRETRANSLATE))

    assert not response.success
    assert "InvalidURL" in (response.error_message or "")
