"""
上传文件校验：扩展名 / MIME / 大小。纯函数，无副作用；前端校验之外服务端必须再做一遍。
"""
from __future__ import annotations

from dataclasses import dataclass

from hireai.core.config import MAX_UPLOAD_BYTES

ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx", ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp")

ALLOWED_MIME_TYPES = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",  # .docx
    "application/msword",  # .doc
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/bmp",
    "image/webp",
)

# 扩展名 → 发给模型的 MIME
EXTENSION_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
}

SIZE_ERROR = "File size must be less than 10MB"
EXTENSION_ERROR = "Only PDF, DOC, DOCX, and image files (JPG, PNG, GIF, BMP, WebP) are supported"
MIME_ERROR = "Invalid file type"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None


def file_extension(filename: str) -> str:
    """小写扩展名（含点），取最后一个点之后的部分；文件名 ".pdf" 的扩展名即 ".pdf"。没有点返回空串。"""
    name = (filename or "").strip().lower()
    dot = name.rfind(".")
    return name[dot:] if dot != -1 else ""


def mime_type_for(filename: str) -> str:
    return EXTENSION_MIME_TYPES.get(file_extension(filename), "application/octet-stream")


def validate_resume_file(filename: str, size: int, content_type: str | None = None) -> ValidationResult:
    """
    先查大小（超限一律拒绝），再查扩展名，最后查 MIME。
    MIME 仅作参考：为空放行（浏览器有时不带），非空且不在白名单才拒绝。
    """
    if size > MAX_UPLOAD_BYTES:
        return ValidationResult(False, SIZE_ERROR)
    if file_extension(filename) not in ALLOWED_EXTENSIONS:
        return ValidationResult(False, EXTENSION_ERROR)
    mime = (content_type or "").strip().lower()
    if mime and mime not in ALLOWED_MIME_TYPES:
        return ValidationResult(False, MIME_ERROR)
    return ValidationResult(True)
