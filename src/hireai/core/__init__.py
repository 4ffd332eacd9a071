# 配置、LiteLLM 封装、tiktoken 截断、日志与错误分类

from .config import (
    MAX_UPLOAD_BYTES,
    get_default_model,
    get_upload_dir,
    llm_timeout_seconds,
    max_resume_tokens,
)
from .errors import (
    ExternalServiceError,
    ExtractionError,
    HireAIError,
    ParseError,
    ValidationError,
)
from .llm import Attachment, LLMClient
from .tokens import truncate_to_tokens

__all__ = [
    "MAX_UPLOAD_BYTES",
    "get_default_model",
    "get_upload_dir",
    "llm_timeout_seconds",
    "max_resume_tokens",
    "ExternalServiceError",
    "ExtractionError",
    "HireAIError",
    "ParseError",
    "ValidationError",
    "Attachment",
    "LLMClient",
    "truncate_to_tokens",
]
