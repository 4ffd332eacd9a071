"""
简历结构化数据：解析器的数据边界。

模型输出经常缺字段、给 null、把数组写成字符串。这里在校验前统一兜底：
数组字段不是 list 时替换为 []，字符串字段缺失为 ""，因此下游永远拿到完整形状。
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return ""


def _as_object_list(value: Any) -> list[Any]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ExperienceEntry(_ResumeModel):
    """一段工作经历。"""
    job_title: str = Field("", description="职位名称")
    company: str = Field("", description="雇主")
    start_date: str = Field("", description="开始时间，如 January 2020 / 2020")
    end_date: str = Field("", description="结束时间，如 December 2022 / Present")
    description: str = Field("", description="职责或主要成果")

    @field_validator("*", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)


class EducationEntry(_ResumeModel):
    """一段教育经历。"""
    institution: str = Field("", description="学校")
    degree: str = Field("", description="学位，如 Bachelor of Science")
    field_of_study: str = Field("", description="专业")
    graduation_date: str = Field("", description="毕业时间")

    @field_validator("*", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)


class ParsedResumeData(_ResumeModel):
    """解析器唯一产物；挂到 ProcessingResult 后不可变。"""
    name: str = Field("", description="姓名")
    email: str = Field("", description="邮箱")
    phone: str = Field("", description="电话")
    linkedin_url: Optional[str] = Field("", description="LinkedIn 主页（可选）")
    github_url: Optional[str] = Field("", description="GitHub 主页（可选）")
    summary: str = Field("", description="个人简介或求职目标")
    skills: list[str] = Field(default_factory=list, description="技能（允许重复，顺序无意义）")
    experience: list[ExperienceEntry] = Field(default_factory=list, description="工作经历")
    education: list[EducationEntry] = Field(default_factory=list, description="教育经历")

    @field_validator("name", "email", "phone", "linkedin_url", "github_url", "summary", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return _as_text(v)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        return [_as_text(s) for s in v if isinstance(s, (str, int, float)) and not isinstance(s, bool)]

    @field_validator("experience", "education", mode="before")
    @classmethod
    def _entries(cls, v: Any) -> list[Any]:
        return _as_object_list(v)
