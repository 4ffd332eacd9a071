# 上传流水线：校验 → 暂存 → 提取（MarkItDown / 模型 OCR）→ 解析

from .extractor import FileKind, extract_text, file_kind
from .pipeline import process_upload, process_uploads
from .schemas import ProcessingResult, UploadedFile
from .validation import ValidationResult, validate_resume_file

__all__ = [
    "FileKind",
    "extract_text",
    "file_kind",
    "process_upload",
    "process_uploads",
    "ProcessingResult",
    "UploadedFile",
    "ValidationResult",
    "validate_resume_file",
]
