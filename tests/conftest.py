"""
公共夹具：用脚本化的假模型客户端替换 LiteLLM，保证无需 API key / 网络即可运行。

FakeLLMClient 按调用顺序依次返回 responses 中的元素：字符串即模型回复，异常实例则被抛出；
也可传 handler(prompt, attachment) 按 prompt 内容决定回复。
"""
from __future__ import annotations

import json
import os
from typing import Any, Callable

# 测试环境离线：让 LiteLLM 使用内置的模型价格表，避免导入时联网拉取（失败后后台重试线程会引发导入死锁）
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest
from fastapi.testclient import TestClient

from hireai.api.app import app
from hireai.api.deps import get_llm_client
from hireai.core.errors import ExternalServiceError


class FakeLLMClient:
    model = "fake/test-model"

    def __init__(
        self,
        responses: list[Any] | None = None,
        handler: Callable[[str, Any], Any] | None = None,
    ):
        self.responses = list(responses or [])
        self.handler = handler
        self.calls: list[dict[str, Any]] = []

    def _next(self, prompt: str, attachment: Any) -> str:
        self.calls.append({"prompt": prompt, "attachment": attachment})
        if self.handler is not None:
            out = self.handler(prompt, attachment)
        elif self.responses:
            out = self.responses.pop(0)
        else:
            raise ExternalServiceError("no scripted response left")
        if isinstance(out, BaseException):
            raise out
        return out

    async def acomplete(self, prompt: str, system: str | None = None, attachment: Any = None, **kwargs: Any) -> str:
        return self._next(prompt, attachment)


def resume_json(name: str = "Jane Doe", skills: list[str] | None = None, **extra: Any) -> str:
    """模型对解析 prompt 的典型回复（带代码块标记）。"""
    data = {
        "name": name,
        "email": f"{name.split()[0].lower()}@example.com",
        "phone": "+1 555 0100",
        "summary": "Backend engineer",
        "skills": skills if skills is not None else ["Python", "FastAPI"],
        "experience": [
            {"job_title": "Backend Engineer", "company": "Acme", "start_date": "2019", "end_date": "Present", "description": "APIs"}
        ],
        "education": [
            {"institution": "MIT", "degree": "BSc", "field_of_study": "Computer Science", "graduation_date": "2017"}
        ],
    }
    data.update(extra)
    return "```json\n" + json.dumps(data) + "\n```"


@pytest.fixture(autouse=True)
def _upload_dir(tmp_path, monkeypatch):
    """上传暂存目录指向临时目录，测试之间互不影响。"""
    upload_dir = tmp_path / "uploads"
    monkeypatch.setenv("HIREAI_UPLOAD_DIR", str(upload_dir))
    monkeypatch.setenv("HIREAI_CANDIDATE_SOURCE", "sample")
    return upload_dir


@pytest.fixture
def fake_llm():
    """返回一个工厂：fake_llm(responses=..., handler=...) 生成假客户端并注入 API 依赖。"""

    def _make(responses: list[Any] | None = None, handler: Callable[[str, Any], Any] | None = None) -> FakeLLMClient:
        fake = FakeLLMClient(responses=responses, handler=handler)
        app.dependency_overrides[get_llm_client] = lambda: fake
        return fake

    yield _make
    app.dependency_overrides.pop(get_llm_client, None)


@pytest.fixture
def api_client():
    return TestClient(app)
