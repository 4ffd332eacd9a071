#!/usr/bin/env python3
"""
用本地简历文件跑完整链路：上传流水线（校验 → 提取 → 解析）→ 职位匹配 → 打印排行榜。
用法: uv run python scripts/run_job_match_demo.py <简历文件>... [--jd 职位描述文本文件]
需要 .env 中配置 HIREAI_DEFAULT_MODEL 及对应 API key。
"""
import asyncio
import mimetypes
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

DEFAULT_JD = (
    "Senior Backend Engineer. 5+ years building Python services (FastAPI or Django), "
    "PostgreSQL, async programming, cloud deployment on AWS or GCP."
)


def _args(argv: list[str]) -> tuple[list[Path], str]:
    paths: list[Path] = []
    jd = DEFAULT_JD
    it = iter(argv)
    for arg in it:
        if arg == "--jd":
            jd = Path(next(it)).read_text(encoding="utf-8")
        else:
            paths.append(Path(arg))
    return paths, jd


async def main() -> int:
    from hireai.core.llm import LLMClient
    from hireai.ingest import UploadedFile, process_uploads
    from hireai.jobs import run_job_match_pipeline

    paths, jd = _args(sys.argv[1:])
    if not paths:
        print(__doc__)
        return 1
    missing = [p for p in paths if not p.exists()]
    if missing:
        print(f"文件不存在: {', '.join(str(p) for p in missing)}")
        return 1

    client = LLMClient()
    uploads = [
        UploadedFile(name=p.name, content_type=mimetypes.guess_type(p.name)[0] or "", data=p.read_bytes())
        for p in paths
    ]

    print(f"=== 1. 上传流水线（模型: {client.model}）===\n")
    results = await process_uploads(client, uploads)
    for r in results:
        name = r.extracted_data.name if r.extracted_data else "-"
        print(f"{r.file_name}: {r.status} | {name} | {r.error or ''}")
    print()

    print("=== 2. 职位匹配 ===\n")
    try:
        match = await run_job_match_pipeline(client, results, job_description=jd, job_title="Demo Position")
    except Exception as e:
        print(f"匹配失败: {e}")
        return 1

    print(f"参与打分: {match.total_candidates}，平均分: {match.average_score}\n")
    for c in match.leaderboard:
        print(f"#{c.rank} {c.name or c.candidate_id} | 综合分 {c.score}")
        print(f"   优势: {'; '.join(c.strengths)}")
        print(f"   不足: {'; '.join(c.weaknesses)}")
        print(f"   建议: {c.recommendation}\n")
    print("洞察:", match.match_insights.model_dump(by_alias=True))
    print("\n=== 完成 ===")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
