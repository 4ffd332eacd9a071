"""
上传暂存：每个文件处理期间写入上传目录，离开作用域（无论成功失败）即删除。
磁盘读写放到线程里执行，不阻塞事件循环。
"""
from __future__ import annotations

import asyncio
import re
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from hireai.core.config import get_upload_dir
from hireai.core.logging import get_logger

logger = get_logger(__name__)


def _safe_name(filename: str) -> str:
    name = Path(filename or "upload").name
    return re.sub(r"[^A-Za-z0-9._-]", "_", name) or "upload"


def _write(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


async def read_staged(path: Path) -> bytes:
    return await asyncio.to_thread(path.read_bytes)


@asynccontextmanager
async def staged_upload(
    file_id: str,
    filename: str,
    data: bytes,
    upload_dir: Path | None = None,
) -> AsyncIterator[Path]:
    """
    将文件字节写入 <upload_dir>/<file_id>-<filename>，yield 路径；退出时删除。
    删除失败只记日志，不覆盖处理结果。
    """
    directory = Path(upload_dir) if upload_dir is not None else get_upload_dir()
    path = directory / f"{file_id}-{_safe_name(filename)}"
    await asyncio.to_thread(_write, path, data)
    try:
        yield path
    finally:
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logger.error("Error deleting temporary file %s: %s", path, e)
