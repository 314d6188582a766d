import logging
import tempfile
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from resume_ats.ai import AICompletionError, get_completion_client, suggest_keyword_integration
from resume_ats.core.config.settings import settings
from resume_ats.core.rate_limit import rate_limit
from resume_ats.parsing import parse_document, parse_job_description, parse_resume_text
from resume_ats.schemas import ATSScoreResult, ParsedJobDescription, ParsedResume
from resume_ats.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    EnhanceRequest,
    EnhanceResponse,
    ExtractResponse,
    JobDescriptionRequest,
    ResumeTextRequest,
    ScoreRequest,
)
from resume_ats.scoring import calculate_ats_score, match_keywords

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_EXTENSIONS = {"txt", "pdf", "docx"}
_UPLOAD_CHUNK_BYTES = 1024 * 64


def _raise_ai_http_error(exc: AICompletionError) -> None:
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail={"code": exc.code, "message": str(exc)},
    ) from exc


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resumes/parse", response_model=ParsedResume)
@rate_limit()
async def parse_resume(request: Request, payload: ResumeTextRequest):
    return parse_resume_text(payload.text)


@router.post("/resumes/extract", response_model=ExtractResponse)
@rate_limit()
async def extract_resume(request: Request, file: UploadFile = File(...)):
    filename = file.filename or "uploaded-file"
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext not in ALLOWED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_EXTENSIONS))}.",
        )

    content = await _read_upload(file)
    with tempfile.TemporaryDirectory() as workdir:
        path = Path(workdir) / f"upload.{ext}"
        path.write_bytes(content)
        try:
            document = await run_in_threadpool(parse_document, path)
        except (FileNotFoundError, NotImplementedError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info(
        "resume_upload_extracted source_type=%s bytes=%s warnings=%s",
        document.source_type,
        len(content),
        len(document.warnings),
    )
    return ExtractResponse(document=document, parsed=parse_resume_text(document.text))


@router.post("/jobs/parse", response_model=ParsedJobDescription)
@rate_limit()
async def parse_job(request: Request, payload: JobDescriptionRequest):
    return parse_job_description(payload.text, {"title": payload.title, "company": payload.company})


@router.post("/ats/score", response_model=ATSScoreResult)
@rate_limit()
async def score_resume(request: Request, payload: ScoreRequest):
    return calculate_ats_score(payload.resume, payload.job)


@router.post("/ats/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_resume(request: Request, payload: AnalyzeRequest):
    parsed_resume = parse_resume_text(payload.resume_text)
    parsed_job = parse_job_description(
        payload.job_description,
        {"title": payload.job_title, "company": payload.job_company},
    )
    content = parsed_resume.content.model_copy(update={"raw_text": payload.resume_text})
    score = calculate_ats_score(content, parsed_job)
    return AnalyzeResponse(resume=parsed_resume, job=parsed_job, score=score)


@router.post("/ats/enhance", response_model=EnhanceResponse)
@rate_limit(settings.ai_rate_limit)
async def enhance_resume(request: Request, payload: EnhanceRequest):
    missing = match_keywords(payload.resume, payload.job).missing[: payload.max_keywords]
    if not missing:
        return EnhanceResponse(missing_keywords=[], suggestions=[])

    try:
        client = get_completion_client()
    except AICompletionError as exc:
        _raise_ai_http_error(exc)

    result = suggest_keyword_integration(client, payload.resume, missing)
    if not result.success:
        _raise_ai_http_error(AICompletionError(result.error or "AI enhancement failed.", code="ai_invalid"))
    return EnhanceResponse(missing_keywords=missing, suggestions=result.data or [], latency_ms=result.latency_ms)
