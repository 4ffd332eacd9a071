"""
JSON 文件候选人目录：从 HIREAI_CANDIDATES_FILE 读取档案数组（托管数据库导出的快照）。
文件不存在或格式不对时返回空列表。
"""
import json
from pathlib import Path

from pydantic import ValidationError

from hireai.candidates.schemas import CandidateProfile
from hireai.core.config import candidates_file
from hireai.core.logging import get_logger
from .base import CandidateSource

logger = get_logger(__name__)


class JsonFileCandidateSource(CandidateSource):

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else candidates_file()

    def list_candidates(self, limit: int = 100) -> list[CandidateProfile]:
        if not self.path or not self.path.exists():
            logger.warning("Candidates file not found: %s", self.path)
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                items = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read candidates file %s: %s", self.path, e)
            return []
        if not isinstance(items, list):
            return []
        profiles: list[CandidateProfile] = []
        for item in items:
            if len(profiles) >= limit:
                break
            try:
                profiles.append(CandidateProfile.model_validate(item))
            except ValidationError:
                continue
        return profiles
