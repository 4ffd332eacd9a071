# 简历结构化解析：模型输出 → 固定 schema

from .schemas import EducationEntry, ExperienceEntry, ParsedResumeData
from .resume_parser import parse_resume_text, to_parsed_resume

__all__ = [
    "EducationEntry",
    "ExperienceEntry",
    "ParsedResumeData",
    "parse_resume_text",
    "to_parsed_resume",
]
