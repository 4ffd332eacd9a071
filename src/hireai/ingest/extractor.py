"""
文本提取：按文件类别查分发表，依次执行该类别的尝试链，第一个成功的结果即返回。

- PDF / 图片 / DOC：只走外部模型 OCR（本地库对旧版 .doc 不可靠）
- DOCX：先本地 MarkItDown，失败或无文本再走模型 OCR

每个尝试返回 Attempt（成功带文本，失败带原因），回退由分发表顺序决定，不靠异常跳转。
全部失败时抛 ExtractionError，消息取最后一个尝试的原因。不重试。
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from hireai.core.errors import ExternalServiceError, ExtractionError
from hireai.core.llm import Attachment, LLMClient
from hireai.core.logging import get_logger
from hireai.ingest.markitdown_convert import bytes_to_markdown
from hireai.ingest.validation import file_extension, mime_type_for

logger = get_logger(__name__)

OCR_PROMPT = """
Please extract ALL the text content from this document/image.
This appears to be a resume or CV document.
Please return the complete text content exactly as it appears, maintaining the structure and formatting as much as possible.
Do not summarize or interpret - just extract the raw text content.
"""


class FileKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    DOCX = "docx"
    DOC = "doc"


KIND_BY_EXTENSION: dict[str, FileKind] = {
    ".pdf": FileKind.PDF,
    ".jpg": FileKind.IMAGE,
    ".jpeg": FileKind.IMAGE,
    ".png": FileKind.IMAGE,
    ".gif": FileKind.IMAGE,
    ".bmp": FileKind.IMAGE,
    ".webp": FileKind.IMAGE,
    ".docx": FileKind.DOCX,
    ".doc": FileKind.DOC,
}


@dataclass(frozen=True)
class Attempt:
    """一次提取尝试的结果。"""
    source: str
    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return bool(self.text)


AttemptFn = Callable[[bytes, str, LLMClient], Awaitable[Attempt]]


async def _local_document(data: bytes, filename: str, client: LLMClient) -> Attempt:
    """本地 MarkItDown 转换（线程中执行，转换是阻塞的）；任何异常或空文本都记为失败，交给下一个尝试。"""
    try:
        text = (await asyncio.to_thread(bytes_to_markdown, data, filename=filename)).strip()
    except Exception as e:
        logger.info("Local DOCX conversion failed for %s, trying OCR: %s", filename, e)
        return Attempt("markitdown", error=str(e) or type(e).__name__)
    if not text:
        return Attempt("markitdown", error="No text found in document")
    return Attempt("markitdown", text=text)


async def _model_ocr(data: bytes, filename: str, client: LLMClient) -> Attempt:
    """外部模型 OCR：一次请求，prompt + base64 内联文件。"""
    mime_type = mime_type_for(filename)
    logger.info("Processing %s with MIME type: %s", filename, mime_type)
    try:
        text = await client.acomplete(OCR_PROMPT, attachment=Attachment(data=data, mime_type=mime_type))
    except ExternalServiceError as e:
        return Attempt("ocr", error=f"Failed to extract text using OCR: {e}")
    text = (text or "").strip()
    if not text:
        return Attempt("ocr", error="No text could be extracted from the file using OCR")
    logger.info("Successfully extracted %d characters from %s", len(text), filename)
    return Attempt("ocr", text=text)


EXTRACTION_CHAINS: dict[FileKind, tuple[AttemptFn, ...]] = {
    FileKind.PDF: (_model_ocr,),
    FileKind.IMAGE: (_model_ocr,),
    FileKind.DOCX: (_local_document, _model_ocr),
    FileKind.DOC: (_model_ocr,),
}


def file_kind(filename: str) -> FileKind | None:
    return KIND_BY_EXTENSION.get(file_extension(filename))


async def extract_text(client: LLMClient, data: bytes, filename: str) -> str:
    """
    提取纯文本。不支持的扩展名立即失败，不调用任何外部服务。
    """
    kind = file_kind(filename)
    if kind is None:
        raise ExtractionError(f"Unsupported file format: {file_extension(filename) or filename}")

    last: Attempt | None = None
    for attempt_fn in EXTRACTION_CHAINS[kind]:
        last = await attempt_fn(data, filename, client)
        if last.ok:
            return last.text or ""
        logger.warning("Extraction attempt %s failed for %s: %s", last.source, filename, last.error)
    raise ExtractionError(last.error if last and last.error else "No text could be extracted from the file")
