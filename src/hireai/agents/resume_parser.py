"""
简历结构化解析：OCR/本地提取得到的纯文本 → 外部模型 → ParsedResumeData。

模型只负责吐 JSON；清洗与兜底由 hireai.ai.structured 与 ParsedResumeData 的校验器完成。
解析失败不重试，直接抛 ParseError，由上传流水线记为该文件失败。
"""
from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from hireai.agents.schemas import ParsedResumeData
from hireai.ai.structured import decode_json_object
from hireai.core.config import max_resume_tokens
from hireai.core.errors import ExternalServiceError, ParseError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.core.tokens import truncate_to_tokens

logger = get_logger(__name__)

PARSE_FAILED_MESSAGE = "Failed to parse AI response into structured data"

RESUME_SCHEMA_PROMPT = """
Given the following resume text, please extract the specified information and return it as a JSON object.
The JSON object should conform to the following schema:

{
  "name": "Full name of the person",
  "email": "Email address",
  "phone": "Phone number",
  "linkedin_url": "LinkedIn profile URL (optional)",
  "github_url": "GitHub profile URL (optional)",
  "summary": "Professional summary or objective",
  "skills": ["skill1", "skill2", "skill3"],
  "experience": [
    {
      "job_title": "Position title",
      "company": "Company name",
      "start_date": "Start date (e.g., 'January 2020' or '2020')",
      "end_date": "End date (e.g., 'December 2022' or 'Present')",
      "description": "Job description or key responsibilities"
    }
  ],
  "education": [
    {
      "institution": "University or school name",
      "degree": "Degree type (e.g., 'Bachelor of Science', 'Master of Arts')",
      "field_of_study": "Major or field of study",
      "graduation_date": "Graduation date (e.g., '2018' or 'May 2018')"
    }
  ]
}

Important guidelines:
- Extract information as accurately as possible from the resume text
- If a field is not available, use appropriate default values (empty string for strings, empty array for arrays)
- For skills, extract both technical skills and soft skills mentioned
- For experience, include all relevant work experiences
- For education, include all degrees and certifications
- Return ONLY the JSON object, no additional text or explanations
"""


def build_resume_prompt(resume_text: str, model_name: str | None = None) -> str:
    """拼装解析 prompt；正文按 HIREAI_MAX_RESUME_TOKENS 截断。"""
    body = truncate_to_tokens(resume_text, max_resume_tokens(), model_name=model_name)
    return f"{RESUME_SCHEMA_PROMPT}\nResume Text:\n---\n{body}\n---\n\nJSON Output:\n"


def to_parsed_resume(raw: str) -> ParsedResumeData:
    """模型原始回复 → ParsedResumeData；不是 JSON 对象时抛 ParseError。"""
    try:
        data = decode_json_object(raw)
    except ValueError as e:
        raise ParseError(PARSE_FAILED_MESSAGE) from e
    if not isinstance(data, dict):
        raise ParseError(PARSE_FAILED_MESSAGE)
    try:
        return ParsedResumeData.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(PARSE_FAILED_MESSAGE) from e


async def parse_resume_text(client: LLMClient, resume_text: str) -> ParsedResumeData:
    """单份简历解析：一次模型调用 + 尽力解码，失败抛 ParseError。"""
    prompt = build_resume_prompt(resume_text, model_name=getattr(client, "model", None))
    try:
        raw = await client.acomplete(prompt)
    except ExternalServiceError as e:
        logger.warning("Resume parse call failed: %s", e)
        raise ParseError(PARSE_FAILED_MESSAGE) from e
    parsed = to_parsed_resume(raw)
    logger.info("Parsed resume data for: %s", parsed.name or "Unknown")
    return parsed
