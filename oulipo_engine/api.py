"""
FastAPI application exposing the Oulipo engine over HTTP.

Every route is a thin call into a shared OulipoService. Broken rules come
back as 200 responses with success=false; only bad configuration is an
HTTP error.
"""

from __future__ import annotations

import importlib.metadata
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, Dict, List

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .core.service import OulipoService
from .errors import OulipoError
from .logging_config import configure_logging
from .schemas.requests import (
    AnagramCheckRequest,
    AnagramRequest,
    CharacterFrequencyRequest,
    CombinatorialRequest,
    HaikuRequest,
    LengthValidationRequest,
    LipogramRequest,
    NPlusSevenRequest,
    SestinaRequest,
    TextRequest,
    UnivocalicRequest,
    WordValidationRequest,
    WorkflowCheckRequest,
    WorkflowSpecRequest,
)
from .schemas.results import ConstraintResult, ConstraintWorkflowConfig, WorkflowResult

# Initialize structured logging
logger = structlog.get_logger()

# Shared service instance; immutable after construction
service = OulipoService()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "Starting Oulipo Engine",
        environment=settings.environment,
        constraints=len(service.constraint_registry()),
    )
    yield
    logger.info("Shutting down Oulipo Engine")


app = FastAPI(
    title=get_settings().app_name,
    description="Constraint checking, transformation and generation for Oulipo writing",
    version=importlib.metadata.version("oulipo-engine"),
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_service() -> OulipoService:
    return service


def _error_detail(code: str, message: str) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message}}


@app.exception_handler(OulipoError)
async def oulipo_error_handler(request: Request, exc: OulipoError) -> JSONResponse:
    logger.warning("Rejected request", path=request.url.path, code=exc.code)
    return JSONResponse(
        status_code=400, content={"detail": _error_detail(exc.code, exc.message)}
    )


def _guard_text(text: str) -> None:
    """Reject texts above the configured size limit with HTTP 413."""
    limit = get_settings().max_text_length
    if len(text) > limit:
        raise HTTPException(
            status_code=413,
            detail=_error_detail(
                "TEXT_TOO_LARGE",
                f"Text is {len(text)} characters; the limit is {limit}",
            ),
        )


def _log_result(rule: str, text: str, result: ConstraintResult) -> ConstraintResult:
    logger.info(
        "Constraint checked",
        rule=rule,
        success=result.success,
        violations=result.violation_count,
        text_length=len(text),
    )
    return result


# Health and Info Endpoints
@app.get("/healthz")
def healthz() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, str]:
    """Return the version of the application."""
    return {"version": importlib.metadata.version("oulipo-engine")}


# Constraint checks
@app.post("/oulipo/lipogram", response_model=ConstraintResult, tags=["constraints"])
def check_lipogram(
    request: LipogramRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.check_lipogram(request.text, request.forbidden_letter)
    return _log_result("lipogram", request.text, result)


@app.post("/oulipo/palindrome", response_model=ConstraintResult, tags=["constraints"])
def check_palindrome(
    request: TextRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    return _log_result("palindrome", request.text, service.check_palindrome(request.text))


@app.post("/oulipo/snowball", response_model=ConstraintResult, tags=["constraints"])
def check_snowball(
    request: TextRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    return _log_result("snowball", request.text, service.check_snowball(request.text))


@app.post("/oulipo/univocalic", response_model=ConstraintResult, tags=["constraints"])
def check_univocalic(
    request: UnivocalicRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.check_univocalic(request.text, request.vowel)
    return _log_result("univocalic", request.text, result)


@app.post("/oulipo/prisoners", response_model=ConstraintResult, tags=["constraints"])
def check_prisoners(
    request: TextRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.check_prisoners_constraint(request.text)
    return _log_result("prisoners", request.text, result)


@app.post("/oulipo/sestina", response_model=ConstraintResult, tags=["constraints"])
def check_sestina(
    request: SestinaRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.check_sestina(request.text, request.end_words)
    return _log_result("sestina", request.text, result)


@app.post("/oulipo/n-plus-7", response_model=ConstraintResult, tags=["transforms"])
def n_plus_7(
    request: NPlusSevenRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    offset = request.offset
    if offset is None:
        offset = get_settings().default_n_plus_offset
    return _log_result("n_plus_7", request.text, service.n_plus_7_transform(request.text, offset))


# Validators
@app.post("/oulipo/validate/length", response_model=ConstraintResult, tags=["validators"])
def validate_length(
    request: LengthValidationRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.validate_text_length(request.text, request.min_length, request.max_length)
    return _log_result("text_length", request.text, result)


@app.post("/oulipo/validate/words", response_model=ConstraintResult, tags=["validators"])
def validate_words(
    request: WordValidationRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.validate_word_count(request.text, request.min_words, request.max_words)
    return _log_result("word_count", request.text, result)


@app.post(
    "/oulipo/validate/character-frequency",
    response_model=ConstraintResult,
    tags=["validators"],
)
def validate_character_frequency(
    request: CharacterFrequencyRequest, service: OulipoService = Depends(get_service)
) -> ConstraintResult:
    _guard_text(request.text)
    result = service.check_character_frequency(
        request.text, request.target_char, request.max_frequency
    )
    return _log_result("character_frequency", request.text, result)


# Suggestions
@app.post("/oulipo/suggestions/lipogram", tags=["suggestions"])
def lipogram_suggestions(
    request: LipogramRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, List[str]]:
    _guard_text(request.text)
    return {
        "suggestions": service.generate_lipogram_suggestions(
            request.text, request.forbidden_letter
        )
    }


@app.post("/oulipo/suggestions/palindrome", tags=["suggestions"])
def palindrome_suggestions(
    request: TextRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, List[str]]:
    _guard_text(request.text)
    return {"suggestions": service.generate_palindrome_suggestions(request.text)}


# Generators
@app.post("/oulipo/generate/haiku", tags=["generators"])
def generate_haiku(
    request: HaikuRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, str]:
    theme = request.theme or get_settings().default_haiku_theme
    return {"theme": theme, "haiku": service.generate_haiku(theme)}


@app.post("/oulipo/generate/anagrams", tags=["generators"])
def generate_anagrams(
    request: AnagramRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, Any]:
    _guard_text(request.word)
    max_results = request.max_results or get_settings().default_anagram_results
    return {
        "word": request.word,
        "anagrams": service.generate_anagrams(request.word, max_results),
    }


@app.post("/oulipo/generate/combinatorial", tags=["generators"])
def generate_combinatorial(
    request: CombinatorialRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, str]:
    poem = service.generate_combinatorial_poem(request.word_sets, request.pattern)
    return {"pattern": request.pattern or "random", "poem": poem}


@app.post("/oulipo/anagram-check", tags=["generators"])
def anagram_check(
    request: AnagramCheckRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, bool]:
    return {"is_anagram": service.check_anagram(request.word1, request.word2)}


# Registry
@app.get("/oulipo/constraints", tags=["registry"])
def list_constraints(
    service: OulipoService = Depends(get_service),
) -> List[Dict[str, Any]]:
    """List every registered constraint type with its config schema."""
    return [info.to_dict() for info in service.list_available_constraints()]


@app.get("/oulipo/constraints/{name}", tags=["registry"])
def get_constraint(
    name: str, service: OulipoService = Depends(get_service)
) -> Dict[str, Any]:
    info = service.constraint_registry().get_constraint_info(name)
    if info is None:
        raise HTTPException(
            status_code=404,
            detail=_error_detail("UNKNOWN_CONSTRAINT", f"Unknown constraint: {name}"),
        )
    return info.to_dict()


# Workflows
def _workflow_to_dict(config: ConstraintWorkflowConfig) -> Dict[str, Any]:
    return {
        "constraints": [
            {"name": name, "config": constraint_config}
            for name, constraint_config in config.constraints
        ],
        "validation_config": config.validation_config.model_dump(),
    }


@app.post("/oulipo/workflows", tags=["workflows"])
def build_workflow(
    request: WorkflowSpecRequest, service: OulipoService = Depends(get_service)
) -> Dict[str, Any]:
    """Parse a loose workflow description without running it."""
    return _workflow_to_dict(service.create_constraint_workflow(request.constraints))


@app.post("/oulipo/workflows/check", response_model=WorkflowResult, tags=["workflows"])
def check_workflow(
    request: WorkflowCheckRequest, service: OulipoService = Depends(get_service)
) -> WorkflowResult:
    _guard_text(request.text)
    config = service.create_constraint_workflow(request.constraints)
    result = service.check_with_workflow(request.text, config)
    logger.info(
        "Workflow checked",
        constraints=config.constraint_names,
        success=result.success,
        failed=result.failed_count,
    )
    return result


@app.post(
    "/oulipo/presets/{preset}/check", response_model=WorkflowResult, tags=["workflows"]
)
def check_preset(
    preset: str, request: TextRequest, service: OulipoService = Depends(get_service)
) -> WorkflowResult:
    _guard_text(request.text)
    result = service.check_with_preset(request.text, preset)
    logger.info("Preset checked", preset=preset, success=result.success)
    return result
