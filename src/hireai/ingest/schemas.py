"""
上传流水线的数据模型：UploadedFile（仅存活于一次请求）与 ProcessingResult（逐文件状态）。
"""
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import Field

from hireai.agents.schemas import ParsedResumeData
from hireai.core.models import CamelModel

Status = Literal["processing", "completed", "failed"]


@dataclass(frozen=True)
class UploadedFile:
    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class ProcessingResult(CamelModel):
    """单个文件的处理状态；status 到 completed / failed 即终态。"""
    id: str = Field(..., description="文件处理 ID")
    file_name: str = Field("", description="原始文件名")
    status: Status = Field("processing", description="processing | completed | failed")
    upload_time: str = Field("", description="接收时间（ISO 8601，UTC）")
    extracted_data: Optional[ParsedResumeData] = Field(None, description="解析出的结构化简历")
    error: Optional[str] = Field(None, description="失败原因")
    progress: Optional[int] = Field(None, ge=0, le=100, description="进度 0–100")

    @property
    def is_terminal(self) -> bool:
        return self.status in ("completed", "failed")
