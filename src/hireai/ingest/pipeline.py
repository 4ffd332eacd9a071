"""
上传流水线：校验 → 暂存 → 提取文本 → 结构化解析，逐文件顺序执行。

单个文件的失败（校验、提取、解析）只让该文件的 ProcessingResult 变为 failed，
不影响同批其他文件。暂存文件在提取与解析结束后删除，无论成败。
"""
from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone
from pathlib import Path

from hireai.agents.resume_parser import parse_resume_text
from hireai.core.errors import HireAIError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.ingest.extractor import extract_text
from hireai.ingest.schemas import ProcessingResult, UploadedFile
from hireai.ingest.storage import read_staged, staged_upload
from hireai.ingest.validation import validate_resume_file

logger = get_logger(__name__)


def new_file_id() -> str:
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


async def process_upload(
    client: LLMClient,
    upload: UploadedFile,
    upload_dir: Path | None = None,
) -> ProcessingResult:
    """处理单个文件，总是返回终态的 ProcessingResult。"""
    result = ProcessingResult(
        id=new_file_id(),
        file_name=upload.name,
        status="processing",
        upload_time=datetime.now(timezone.utc).isoformat(),
        progress=0,
    )

    check = validate_resume_file(upload.name, upload.size, upload.content_type)
    if not check.valid:
        result.status = "failed"
        result.error = check.error
        logger.info("Rejected %s: %s", upload.name, check.error)
        return result

    try:
        async with staged_upload(result.id, upload.name, upload.data, upload_dir=upload_dir) as path:
            result.progress = 25
            text = await extract_text(client, await read_staged(path), upload.name)
            if not text.strip():
                raise HireAIError("No text could be extracted from the file")
            logger.info("Successfully extracted text, length: %d characters", len(text))
            result.extracted_data = await parse_resume_text(client, text)
        result.status = "completed"
        result.progress = 100
    except HireAIError as e:
        result.status = "failed"
        result.error = str(e) or "Unknown error occurred"
        logger.warning("Failed to process %s: %s", upload.name, result.error)
    return result


async def process_uploads(
    client: LLMClient,
    uploads: list[UploadedFile],
    upload_dir: Path | None = None,
) -> list[ProcessingResult]:
    """按顺序处理一批文件。"""
    results: list[ProcessingResult] = []
    for i, upload in enumerate(uploads, 1):
        logger.info("Processing file %d/%d: %s", i, len(uploads), upload.name)
        results.append(await process_upload(client, upload, upload_dir=upload_dir))
    return results
