"""
FastAPI backend for the Big-O Analyzer.

Offline pattern-matching analysis by default, with an optional AI mode that
asks a language model instead. The two modes never call each other.
"""

import time
from datetime import datetime
from typing import Literal, Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

import bigo
from bigo.config import logger, settings
from bigo.errors import EmptySnippetError
from bigo.models import AIVerdict, ComplexityAnalysis
from providers.groq_provider import GroqAPIError, GroqProvider, ProviderUnavailableError


# Request/Response Models
class AnalyzeRequest(BaseModel):
    """Request model - code plus the analysis mode."""
    code: str = Field(default="", max_length=settings.MAX_CODE_LENGTH, description="Code to analyze")
    use_ai: bool = Field(default=False, description="Use the language-model analysis instead of pattern matching")


class AnalyzeResponse(BaseModel):
    """Response model with the complexity verdict."""
    success: bool
    mode: Literal["offline", "ai"]
    result: Optional[ComplexityAnalysis] = None
    ai_result: Optional[AIVerdict] = None
    error: Optional[str] = None


class ExampleItem(BaseModel):
    """Bundled example as shown in the example picker."""
    name: str
    language: str
    description: str
    code: str


# Initialize FastAPI
app = FastAPI(
    title="Big-O Analyzer",
    description="Estimate the time complexity of code offline, or with an LLM",
    version=bigo.__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, mode: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "mode": mode, "error": message},
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Big-O Analyzer API",
        "version": bigo.__version__,
        "endpoints": {
            "/analyze": "POST - Analyze time complexity (input: code, use_ai)",
            "/examples": "GET - Bundled example snippets",
            "/health": "GET - Health check",
        },
    }


@app.get("/health")
async def health():
    """Health check."""
    return {"status": "healthy", "ai_available": settings.ai_enabled}


@app.get("/examples", response_model=list[ExampleItem])
async def examples(language: Optional[str] = Query(default=None, description="Filter by language; 'all' for every one")):
    """List the bundled example snippets."""
    return [
        ExampleItem(
            name=example.name,
            language=example.language,
            description=example.description,
            code=example.code,
        )
        for example in bigo.list_examples(language)
    ]


async def _analyze_with_ai(code: str) -> AIVerdict:
    async with GroqProvider() as provider:
        return await provider.analyze(code)


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_code(request: AnalyzeRequest):
    """
    Analyze time complexity.

    Offline mode returns the verdict, where it came from and, for heuristic
    verdicts, the scan signals and an accuracy disclaimer.
    """
    mode = "ai" if request.use_ai else "offline"
    request_id = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
    start_time = time.time()

    logger.info(f"[{request_id}] REQUEST RECEIVED - Mode: {mode} - Code length: {len(request.code)} chars")

    if not request.code.strip():
        logger.info(f"[{request_id}] REQUEST REJECTED - No code provided")
        return _error(400, "Code is required", mode)

    if request.use_ai:
        try:
            ai_result = await _analyze_with_ai(request.code)
        except ProviderUnavailableError:
            logger.error(f"[{request_id}] AI analysis unavailable - GROQ_API_KEY not configured")
            return _error(
                503,
                "AI analysis is currently unavailable. Please try using pattern matching mode instead.",
                mode,
            )
        except GroqAPIError as e:
            elapsed_time = time.time() - start_time
            logger.error(f"[{request_id}] REQUEST FAILED - Time taken: {elapsed_time:.3f}s - Error: {e.message}")
            return _error(502, e.message, mode)

        elapsed_time = time.time() - start_time
        logger.info(f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - Result: {ai_result.notation}")
        return AnalyzeResponse(success=True, mode=mode, ai_result=ai_result)

    try:
        result = bigo.analyze(request.code)
    except EmptySnippetError as e:
        return _error(400, e.message, mode)

    elapsed_time = time.time() - start_time
    logger.info(
        f"[{request_id}] REQUEST COMPLETED - Time taken: {elapsed_time:.3f}s - "
        f"Result: {result.verdict.notation} ({result.source})"
    )
    return AnalyzeResponse(success=True, mode=mode, result=result)


def main():
    """Run the server."""
    import uvicorn

    logger.info(f"Starting Big-O Analyzer on {settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "backend:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
