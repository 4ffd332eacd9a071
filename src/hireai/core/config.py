"""
配置：从环境变量读取，供上传、解析、匹配各模块使用。
"""
import os
from pathlib import Path

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # 从 src/hireai/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        from dotenv import load_dotenv
        load_dotenv(_p)
        break


# 上传文件大小上限：10 MiB，属于对外契约，不开放配置
MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def get_default_model() -> str:
    """LiteLLM 格式的模型名，如 gemini/gemini-1.5-flash、openai/gpt-4o。"""
    return os.getenv("HIREAI_DEFAULT_MODEL", "gemini/gemini-1.5-flash")


def llm_timeout_seconds() -> float:
    """单次模型调用超时（秒）；不重试，超时即视为该单元失败。"""
    raw = os.getenv("HIREAI_LLM_TIMEOUT", "60")
    try:
        value = float(raw)
    except ValueError:
        return 60.0
    return value if value > 0 else 60.0


def max_resume_tokens() -> int:
    """简历正文送入解析 prompt 前的 token 上限。"""
    raw = os.getenv("HIREAI_MAX_RESUME_TOKENS", "30000")
    try:
        return max(1000, int(raw))
    except ValueError:
        return 30000


def candidate_source_id() -> str:
    """候选人目录来源：sample（内置示例，默认）| json（HIREAI_CANDIDATES_FILE 指向的文件）。"""
    return (os.getenv("HIREAI_CANDIDATE_SOURCE") or "sample").strip().lower()


def candidates_file() -> Path | None:
    env_path = os.getenv("HIREAI_CANDIDATES_FILE")
    return Path(env_path) if env_path else None


def log_level() -> str:
    return (os.getenv("HIREAI_LOG_LEVEL") or "INFO").strip().upper()


def get_upload_dir() -> Path:
    """
    上传暂存目录：每个文件处理期间落盘，处理结束即删除。
    默认：项目根下的 .data/uploads；可通过 HIREAI_UPLOAD_DIR 覆盖。
    """
    env_path = os.getenv("HIREAI_UPLOAD_DIR")
    if env_path:
        return Path(env_path)
    # src/hireai/core/config.py -> parents[3] = 项目根
    return Path(__file__).resolve().parents[3] / ".data" / "uploads"
