"""
HTTP 层的请求与响应模型（各业务模块自己的模型在其 schemas 中定义，这里只放 API 专属的外壳）。
"""
from typing import Optional

from pydantic import Field

from hireai.core.models import CamelModel
from hireai.ingest.schemas import ProcessingResult


class UploadResponse(CamelModel):
    """POST /v1/resumes/upload 响应：逐文件结果 + 汇总提示。"""
    success: bool = Field(True, description="请求本身是否成功（单个文件失败不影响）")
    results: list[ProcessingResult] = Field(default_factory=list, description="逐文件处理结果")
    message: str = Field("", description="如 Processed 3 resume(s)")


class ErrorResponse(CamelModel):
    """所有非 2xx 响应的统一结构。"""
    error: str = Field(..., description="面向用户的错误信息")
    details: Optional[str] = Field(None, description="底层原因（可选）")
