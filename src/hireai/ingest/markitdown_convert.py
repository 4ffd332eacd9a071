"""
MarkItDown：本地确定性文档转文本，DOCX 提取的第一步。

DOCX 走 mammoth 转换（markitdown[docx]），不依赖网络；失败时由提取器回退到模型 OCR。
"""
from __future__ import annotations

import io
import os

from markitdown import MarkItDown, StreamInfo


_converter_instance: MarkItDown | None = None


def _converter() -> MarkItDown:
    """单例式获取转换器，避免重复初始化。"""
    global _converter_instance
    if _converter_instance is None:
        _converter_instance = MarkItDown()
    return _converter_instance


def bytes_to_markdown(data: bytes, *, filename: str | None = None) -> str:
    """
    将上传文件字节转为 Markdown 字符串。
    filename: 原始文件名，用于推断类型（如 resume.docx）。
    """
    ext = os.path.splitext(filename)[1].lower() if filename else None
    stream_info = StreamInfo(extension=ext or None, filename=filename) if (ext or filename) else None
    result = _converter().convert_stream(io.BytesIO(data), stream_info=stream_info)
    return result.markdown or ""
