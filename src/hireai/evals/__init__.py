# Pydantic Evals：解析与打分提示词回归测试

from .datasets import job_match_dataset, resume_parse_dataset

__all__ = ["job_match_dataset", "resume_parse_dataset"]
