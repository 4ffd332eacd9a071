"""
LiteLLM 统一多平台模型调用：一套请求逻辑、一套错误处理，换模型只改 model 字符串。

环境变量（任选其一即可）：GEMINI_API_KEY、OPENAI_API_KEY、ANTHROPIC_API_KEY 等，
LiteLLM 会自动读取，无需在代码里区分厂商。
模型名使用 LiteLLM 格式，例如：gemini/gemini-1.5-flash、openai/gpt-4o。

LLMClient 由调用方显式构造并注入各组件（API 层通过依赖项提供），测试时替换为假客户端即可。
"""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from hireai.core.config import get_default_model, llm_timeout_seconds
from hireai.core.errors import ExternalServiceError


@dataclass(frozen=True)
class Attachment:
    """随 prompt 内联发送的文件：原始字节 + MIME 类型。"""
    data: bytes
    mime_type: str

    def as_content_part(self) -> dict[str, Any]:
        """OpenAI 兼容的多模态 content 片段；图片走 image_url，文档走 file。"""
        encoded = base64.b64encode(self.data).decode("ascii")
        data_url = f"data:{self.mime_type};base64,{encoded}"
        if self.mime_type.startswith("image/"):
            return {"type": "image_url", "image_url": {"url": data_url}}
        return {"type": "file", "file": {"file_data": data_url}}


def build_messages(
    prompt: str,
    system: str | None = None,
    attachment: Attachment | None = None,
) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []
    if system:
        messages.append({"role": "system", "content": system})
    if attachment is None:
        messages.append({"role": "user", "content": prompt or ""})
    else:
        messages.append(
            {
                "role": "user",
                "content": [{"type": "text", "text": prompt or ""}, attachment.as_content_part()],
            }
        )
    return messages


def _content_of(resp: Any) -> str:
    return (resp.choices[0].message.content or "").strip()


class LLMClient:
    """
    外部生成式模型的句柄。单次请求、无重试、有超时：
    调用失败统一抛 ExternalServiceError，由各组件决定降级方式。
    """

    def __init__(self, model: str | None = None, timeout: float | None = None, **kwargs: Any):
        self.model = model or get_default_model()
        self.timeout = timeout if timeout is not None else llm_timeout_seconds()
        self.extra = kwargs

    def _params(self, **kwargs: Any) -> dict[str, Any]:
        params: dict[str, Any] = {"timeout": self.timeout, "num_retries": 0}
        params.update(self.extra)
        params.update(kwargs)
        return params

    async def acomplete(
        self,
        prompt: str,
        system: str | None = None,
        attachment: Attachment | None = None,
        **kwargs: Any,
    ) -> str:
        """单轮问答，返回模型回复正文（已 strip）；供 FastAPI 异步端点与并发打分使用。"""
        from litellm import acompletion as litellm_acompletion

        messages = build_messages(prompt, system=system, attachment=attachment)
        try:
            resp = await litellm_acompletion(model=self.model, messages=messages, **self._params(**kwargs))
            return _content_of(resp)
        except Exception as e:
            raise ExternalServiceError(str(e).strip() or type(e).__name__) from e
