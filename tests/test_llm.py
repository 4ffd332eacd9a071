"""
LiteLLM 封装：消息构造、参数（超时 / 不重试）、异常统一包装；配置读取。
"""
import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from hireai.core import config
from hireai.core.errors import ExternalServiceError
from hireai.core.llm import Attachment, LLMClient, build_messages


def _resp(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_build_messages_text_only():
    msgs = build_messages("hello", system="be brief")
    assert msgs == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "hello"},
    ]


def test_build_messages_with_document_attachment():
    msgs = build_messages("extract", attachment=Attachment(b"%PDF", "application/pdf"))
    parts = msgs[0]["content"]
    assert parts[0] == {"type": "text", "text": "extract"}
    assert parts[1]["type"] == "file"
    assert parts[1]["file"]["file_data"] == "data:application/pdf;base64,JVBERg=="


def test_acomplete_passes_timeout_and_no_retries():
    client = LLMClient(model="openai/gpt-4o-mini", timeout=12)
    with patch("litellm.acompletion", new=AsyncMock(return_value=_resp("  hi  "))) as mocked:
        out = asyncio.run(client.acomplete("ping"))
    assert out == "hi"
    kwargs = mocked.call_args.kwargs
    assert kwargs["model"] == "openai/gpt-4o-mini"
    assert kwargs["timeout"] == 12
    assert kwargs["num_retries"] == 0


def test_acomplete_wraps_errors():
    client = LLMClient(model="openai/gpt-4o-mini")
    with patch("litellm.acompletion", new=AsyncMock(side_effect=RuntimeError("401 unauthorized"))):
        with pytest.raises(ExternalServiceError, match="401 unauthorized"):
            asyncio.run(client.acomplete("ping"))


def test_acomplete_handles_empty_content():
    client = LLMClient(model="openai/gpt-4o-mini")
    with patch("litellm.acompletion", new=AsyncMock(return_value=_resp(None))):
        assert asyncio.run(client.acomplete("ping")) == ""


def test_client_defaults_from_env(monkeypatch):
    monkeypatch.setenv("HIREAI_DEFAULT_MODEL", "anthropic/claude-3-haiku")
    monkeypatch.setenv("HIREAI_LLM_TIMEOUT", "15")
    client = LLMClient()
    assert client.model == "anthropic/claude-3-haiku"
    assert client.timeout == 15.0


@pytest.mark.parametrize("raw,expected", [("abc", 60.0), ("-1", 60.0), ("30", 30.0)])
def test_llm_timeout_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("HIREAI_LLM_TIMEOUT", raw)
    assert config.llm_timeout_seconds() == expected


def test_max_resume_tokens_floor(monkeypatch):
    monkeypatch.setenv("HIREAI_MAX_RESUME_TOKENS", "10")
    assert config.max_resume_tokens() == 1000
    monkeypatch.setenv("HIREAI_MAX_RESUME_TOKENS", "bad")
    assert config.max_resume_tokens() == 30000


def test_upload_dir_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HIREAI_UPLOAD_DIR", str(tmp_path))
    assert config.get_upload_dir() == tmp_path
