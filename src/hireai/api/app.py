"""
HireAI HTTP 入口：招聘方上传简历 → 模型提取结构化数据 → 批量分析 / 职位匹配排行榜。

- POST /v1/resumes/upload：多文件上传，逐文件校验、提取、解析，单个失败不影响整批
- POST /v1/resumes/job-match：候选人 vs 职位描述并发打分，返回排行榜与洞察
- POST /v1/resumes/batch-analysis：候选人池统计 + 市场洞察
- POST /v1/candidates/search：候选人目录自然语言搜索
- GET  /v1/ai/health：模型连通性自检

外部模型句柄经 get_llm_client 依赖注入；候选人/招聘方数据的持久化由托管数据库负责，不在本服务内。
"""
from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hireai.ai.health import check_model
from hireai.analysis import BatchAnalysisRequest, BatchAnalysisResponse, analyze_batch
from hireai.candidates import CandidateSearchRequest, CandidateSearchResponse, search_candidates
from hireai.core.errors import ExternalServiceError, ValidationError
from hireai.core.llm import LLMClient
from hireai.core.logging import get_logger
from hireai.ingest import UploadedFile, process_uploads
from hireai.jobs import JobMatchRequest, JobMatchResponse, run_job_match_pipeline

from .deps import get_llm_client
from .schemas import ErrorResponse, UploadResponse

logger = get_logger(__name__)

app = FastAPI(
    title="HireAI API",
    description="AI 招聘助手：简历解析、候选人池分析、职位匹配排行榜",
    version="0.1.0",
)


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(ValidationError)
async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """可由用户修正的入参错误：400 + 原因。"""
    return _error(400, str(exc))


@app.exception_handler(RequestValidationError)
async def _request_shape_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体不是合法 JSON 或结构不对：整请求 400。"""
    return _error(400, "Invalid request body", details=str(exc.errors()))


@app.get("/health")
def health():
    """探活。"""
    return {"status": "ok", "service": "hireai"}


@app.post("/v1/resumes/upload", response_model=UploadResponse)
async def upload_resumes(
    files: list[UploadFile] | None = File(None, description="一个或多个简历文件（PDF/DOC/DOCX/图片）"),
    client: LLMClient = Depends(get_llm_client),
):
    """
    简历批量上传：逐文件顺序处理，每个文件返回一条 ProcessingResult。
    类型/大小不合法的文件记为 failed，不影响其他文件；未上传任何文件返回 400。
    """
    if not files:
        return _error(400, "No files uploaded")
    try:
        uploads = []
        for f in files:
            content = await f.read()
            uploads.append(UploadedFile(name=f.filename or "", content_type=f.content_type or "", data=content))
        results = await process_uploads(client, uploads)
    except Exception as e:
        logger.exception("Upload error")
        return _error(500, "Failed to process resumes", details=str(e))
    return UploadResponse(success=True, results=results, message=f"Processed {len(results)} resume(s)")


@app.post("/v1/resumes/job-match", response_model=JobMatchResponse)
async def job_match(body: JobMatchRequest, client: LLMClient = Depends(get_llm_client)):
    """
    职位匹配：候选人为空或职位描述为空时返回 400，且不发起任何模型调用。
    单个候选人打分失败以默认分计入；洞察失败只影响 matchInsights。
    """
    try:
        result = await run_job_match_pipeline(
            client,
            body.candidates,
            job_description=body.job_description,
            job_title=body.job_title,
        )
    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Job matching error")
        return _error(500, "Failed to analyze job matches", details=str(e))
    return JobMatchResponse(success=True, result=result)


@app.post("/v1/resumes/batch-analysis", response_model=BatchAnalysisResponse)
async def batch_analysis(body: BatchAnalysisRequest, client: LLMClient = Depends(get_llm_client)):
    """候选人池分析：resumesData 为空返回 400；市场洞察失败时统计部分照常返回。"""
    try:
        analysis = await analyze_batch(client, body.resumes_data)
    except ValidationError:
        raise
    except Exception as e:
        logger.exception("Batch analysis error")
        return _error(500, "Failed to analyze resumes", details=str(e))
    return BatchAnalysisResponse(success=True, analysis=analysis)


@app.post("/v1/candidates/search", response_model=CandidateSearchResponse)
async def candidates_search(body: CandidateSearchRequest, client: LLMClient = Depends(get_llm_client)):
    """候选人目录自然语言搜索；模型不可用时降级，不返回 5xx。"""
    return await search_candidates(client, body.query, limit=body.limit)


@app.get("/v1/ai/health")
async def ai_health(client: LLMClient = Depends(get_llm_client)):
    """模型连通性自检：调用失败返回 500，解码失败仍返回 200 并附原文。"""
    try:
        return await check_model(client)
    except ExternalServiceError as e:
        logger.error("AI model test error: %s", e)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "AI model test failed", "details": str(e)},
        )
