"""
tiktoken：请求前算账，控制送入模型的简历正文长度。

OCR 出来的文本可能极长（扫描件噪声、重复页眉），解析前按 token 截断，避免超出上下文窗口。
"""
from __future__ import annotations

from typing import Optional

# 常用模型与 tiktoken 编码的映射；Gemini 等非 OpenAI 模型用 cl100k_base 估算
_MODEL_ENCODING = {
    "gpt-4o": "o200k_base",
    "gpt-4o-mini": "o200k_base",
    "gpt-4": "cl100k_base",
    "gpt-3.5-turbo": "cl100k_base",
    "gemini": "cl100k_base",
}
_DEFAULT_ENCODING = "cl100k_base"


def _get_encoding_for_model(model_name: Optional[str] = None) -> "tiktoken.Encoding | None":
    """根据模型名获取 tiktoken 编码；未知模型用 cl100k_base。失败时返回 None（调用方用近似）。"""
    import tiktoken
    try:
        name = (model_name or "").strip().lower()
        for key, enc in _MODEL_ENCODING.items():
            if key in name:
                return tiktoken.get_encoding(enc)
        return tiktoken.get_encoding(_DEFAULT_ENCODING)
    except Exception:
        return None


def truncate_to_tokens(text: str, max_tokens: int, model_name: Optional[str] = None) -> str:
    """
    将文本截断到最多 max_tokens 个 token。
    字符数不超过上限时直接返回（token 数不会多于字符数），不加载编码表。
    """
    if not text or len(text) <= max_tokens:
        return text or ""
    enc = _get_encoding_for_model(model_name)
    if enc is None:
        return text[: max_tokens * 4]
    tokens = enc.encode(text)
    if len(tokens) <= max_tokens:
        return text
    return enc.decode(tokens[:max_tokens])
