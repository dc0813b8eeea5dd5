"""Tests for the LiteLLM structured-generation client."""

import asyncio
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from vidgenius.config import Config, LLMConfig
from vidgenius.errors import EmptyResponseError, TransportError
from vidgenius.llm_client import LLMClient, _detect_env_var, _prepare_model, build_messages
from vidgenius.models.inputs import AnalysisRequest, ContentKind
from vidgenius.pipeline.request_builder import RESPONSE_SCHEMA, build_request


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _text_request():
    return build_request(AnalysisRequest("hello", ContentKind.TEXT, "Views: 1"))


def _video_request():
    return build_request(
        AnalysisRequest("AAEC", ContentKind.VIDEO_BINARY, "Views: 1", media_type="video/mp4")
    )


class TestBuildMessages:
    def test_text_parts(self):
        system, user = build_messages(_text_request())
        assert system["role"] == "system"
        assert "video content strategist" in system["content"]
        assert user["role"] == "user"
        assert [part["type"] for part in user["content"]] == ["text", "text"]

    def test_video_part_is_data_url(self):
        _, user = build_messages(_video_request())
        media = user["content"][0]
        assert media == {"type": "file", "file": {"file_data": "data:video/mp4;base64,AAEC"}}
        assert user["content"][1] == {"type": "text", "text": "Analyze this video."}


class TestGenerateStructured:
    def setup_method(self):
        self.client = LLMClient(Config())

    def test_returns_raw_text(self):
        mock = AsyncMock(return_value=_response('{"ok": true}'))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            raw = asyncio.run(self.client.generate_structured(_text_request()))
        assert raw == '{"ok": true}'
        mock.assert_awaited_once()
        kwargs = mock.await_args.kwargs
        assert kwargs["model"] == "gemini/gemini-2.5-flash"
        assert kwargs["response_format"]["json_schema"]["schema"] is RESPONSE_SCHEMA
        assert "timeout" not in kwargs

    def test_call_failure_is_transport_error(self):
        mock = AsyncMock(side_effect=RuntimeError("invalid api key"))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            with pytest.raises(TransportError) as exc_info:
                asyncio.run(self.client.generate_structured(_text_request()))
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert mock.await_count == 1

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_response(self, content):
        mock = AsyncMock(return_value=_response(content))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            with pytest.raises(EmptyResponseError):
                asyncio.run(self.client.generate_structured(_text_request()))

    def test_no_choices(self):
        mock = AsyncMock(return_value=SimpleNamespace(choices=[]))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            with pytest.raises(EmptyResponseError):
                asyncio.run(self.client.generate_structured(_text_request()))

    def test_missing_message(self):
        mock = AsyncMock(return_value=SimpleNamespace(choices=[SimpleNamespace(message=None)]))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            with pytest.raises(EmptyResponseError):
                asyncio.run(self.client.generate_structured(_text_request()))


class TestProviderSetup:
    def test_detect_env_var(self):
        assert _detect_env_var("gemini/gemini-2.5-flash") == "GEMINI_API_KEY"
        assert _detect_env_var("gpt-4o") == "OPENAI_API_KEY"
        assert _detect_env_var("mystery-model") is None

    def test_custom_base_gets_openai_prefix(self):
        assert _prepare_model("local-model", "http://localhost:8000") == "openai/local-model"
        assert _prepare_model("gemini/gemini-2.5-flash", "http://x") == "gemini/gemini-2.5-flash"
        assert _prepare_model("local-model", None) == "local-model"

    def test_api_key_exported_and_passed(self):
        cfg = Config(llm=LLMConfig(model="gemini/gemini-2.5-pro", api_key="secret-key"))
        with patch.dict(os.environ, {}, clear=False):
            client = LLMClient(cfg)
            assert os.environ["GEMINI_API_KEY"] == "secret-key"
        mock = AsyncMock(return_value=_response("{}"))
        with patch("vidgenius.llm_client.litellm.acompletion", mock):
            asyncio.run(client.generate_structured(_text_request()))
        assert mock.await_args.kwargs["api_key"] == "secret-key"
        assert "api_base" not in mock.await_args.kwargs
