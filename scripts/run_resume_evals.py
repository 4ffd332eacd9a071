#!/usr/bin/env python3
"""
Pydantic Evals：简历解析 / 职位匹配回归测试。

用法: uv run python scripts/run_resume_evals.py [--dataset parse|match|all]
需要 .env 中配置所用模型的 API key（如 GEMINI_API_KEY / OPENAI_API_KEY）；无 key 时跳过。
"""
from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

# 确保 src 在 path 中（未 pip install -e 时也能直接跑）
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

MATCH_THRESHOLD = 60


async def run_parse_evals() -> None:
    from hireai.agents import parse_resume_text
    from hireai.core.llm import LLMClient
    from hireai.evals import resume_parse_dataset

    client = LLMClient()

    async def task(text: str) -> str:
        parsed = await parse_resume_text(client, text)
        return parsed.name.strip()

    report = await resume_parse_dataset().evaluate(task)
    print("\n=== 简历解析回归 ===\n")
    report.print()


async def run_match_evals() -> None:
    from hireai.agents import ParsedResumeData
    from hireai.core.llm import LLMClient
    from hireai.evals import job_match_dataset
    from hireai.jobs import score_candidate

    client = LLMClient()

    async def task(inputs: dict) -> bool:
        resume = ParsedResumeData.model_validate(inputs["resume"])
        score = await score_candidate(client, "eval", resume, inputs["job_description"])
        return score.score >= MATCH_THRESHOLD

    report = await job_match_dataset().evaluate(task)
    print("\n=== 职位匹配回归 ===\n")
    report.print()


async def main() -> int:
    if not any(os.getenv(k) for k in ("GEMINI_API_KEY", "OPENAI_API_KEY", "ANTHROPIC_API_KEY")):
        print("未配置模型 API key，跳过需 LLM 的 Evals。")
        return 0

    which = "all"
    for i, arg in enumerate(sys.argv[1:], 1):
        if arg in ("--dataset", "-d") and i + 1 < len(sys.argv):
            which = sys.argv[i + 1].lower()
            break
        if not arg.startswith("-"):
            which = arg.lower()
            break
    if which in ("parse", "all"):
        await run_parse_evals()
    if which in ("match", "all"):
        await run_match_evals()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
