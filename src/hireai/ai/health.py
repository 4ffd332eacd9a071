"""
模型连通性自检：让模型只回一个小 JSON，验证调用与解码两段链路。
"""
from __future__ import annotations

from typing import Any

from hireai.ai.structured import decode_json_object
from hireai.core.llm import LLMClient

HEALTH_PROMPT = """
Please return ONLY a JSON object with a success message and the current date.
Do not include any explanations or additional text.
Format: {"status": "success", "message": "AI model is working", "timestamp": "current_timestamp"}
"""


async def check_model(client: LLMClient) -> dict[str, Any]:
    """
    调用失败时 ExternalServiceError 向上抛（由 API 层返回 500）；
    调用成功但解码失败时仍视为成功，附原文与解析错误。
    """
    raw = await client.acomplete(HEALTH_PROMPT)
    try:
        parsed = decode_json_object(raw)
    except ValueError as e:
        return {
            "success": True,
            "modelResponse": None,
            "rawResponse": raw,
            "message": "AI model responded but JSON parsing failed",
            "parseError": str(e) or "Unknown parse error",
        }
    return {
        "success": True,
        "modelResponse": parsed,
        "rawResponse": raw,
        "message": "AI model integration test successful",
    }
