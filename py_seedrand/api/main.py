"""FastAPI main application."""

import math
from enum import Enum
from functools import partial
from typing import Any, Dict, List, Optional, Union

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.engine import SeededRandom
from ..core.murmur_seed import generate_seed
from ..core.string_generator import generate_string
from ..exceptions import SamplingExhaustedError, SeedRandError
from ..logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Seeded Random API",
    description="Deterministic 32-bit random streams from seeds or seed strings",
    version=__version__,
)


class Distribution(str, Enum):
    """Distributions a stream request can sample."""

    UNIFORM = "uniform"
    INT = "int"
    BOOLEAN = "boolean"
    SIGN = "sign"
    NORMAL = "normal"
    NORMAL_INT = "normal_int"
    TRIANGULAR = "triangular"
    BOUNDED_NORMAL = "bounded_normal"


# Keyword arguments each distribution accepts
DISTRIBUTION_PARAMS = {
    Distribution.UNIFORM: ("min", "max"),
    Distribution.INT: ("min", "max", "max_inclusive"),
    Distribution.BOOLEAN: ("probability_true",),
    Distribution.SIGN: ("probability_positive",),
    Distribution.NORMAL: ("mean", "std_dev", "skewness"),
    Distribution.NORMAL_INT: ("mean", "std_dev", "skewness"),
    Distribution.TRIANGULAR: ("min", "max", "mode"),
    Distribution.BOUNDED_NORMAL: ("min", "max"),
}


# Request/Response models
class SeedRequest(BaseModel):
    """Request to derive a seed from text."""

    text: Optional[str] = Field(None, description="Seed text, random when omitted")


class SeedResponse(BaseModel):
    """Derived seed."""

    seed: int
    text_length: int


class StreamRequest(BaseModel):
    """Request a block of values from a seeded stream."""

    seed: Optional[int] = Field(None, ge=0, le=0xFFFFFFFF, description="32-bit seed")
    text: Optional[str] = Field(None, description="Seed text, used when seed is omitted")
    state: Optional[int] = Field(
        None, ge=0, le=0xFFFFFFFF, description="Resume the stream from this state"
    )
    distribution: Distribution = Field(Distribution.UNIFORM, description="Distribution to sample")
    count: int = Field(1, ge=1, description="Number of values")
    params: Dict[str, Any] = Field(default_factory=dict, description="Distribution parameters")
    rounding: str = Field(default_factory=lambda: settings.default_rounding, description="Rounding policy")
    algorithm: str = Field(default_factory=lambda: settings.default_algorithm, description="State stepping algorithm")


class StreamResponse(BaseModel):
    """Values drawn from a stream and the state to resume from."""

    seed: int
    algorithm: str
    initial_state: int
    final_state: int
    values: List[Union[bool, int, float]]


def _draw(rng: SeededRandom, request: StreamRequest) -> list:
    if request.distribution is Distribution.UNIFORM:
        return rng.next_array(request.count, **request.params).tolist()

    draw = {
        Distribution.INT: rng.next_int,
        Distribution.BOOLEAN: rng.next_boolean,
        Distribution.SIGN: rng.next_sign,
        Distribution.NORMAL: rng.next_normal,
        Distribution.NORMAL_INT: rng.next_normal_int,
        Distribution.TRIANGULAR: rng.next_triangular,
        Distribution.BOUNDED_NORMAL: partial(
            rng.next_bounded_normal, max_attempts=settings.bounded_normal_max_attempts
        ),
    }[request.distribution]
    return [draw(**request.params) for _ in range(request.count)]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Seeded Random API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/seeds", response_model=SeedResponse)
async def create_seed(request: SeedRequest):
    """Hash text (or a random string) into a 32-bit seed."""
    text = request.text
    if text is None:
        text = generate_string(settings.default_string_length)
    seed = generate_seed(text)
    logger.info("Seed derived", seed=seed, text_length=len(text), random_text=request.text is None)
    return SeedResponse(seed=seed, text_length=len(text))


@app.post("/streams", response_model=StreamResponse)
def create_stream(request: StreamRequest):
    """
    Draw ``count`` values from the stream of a seed.

    Pass the returned ``final_state`` back as ``state`` to continue the
    same stream in a later request. Parameters that make any value
    non-finite are rejected with a 400.
    """
    if request.count > settings.max_stream_count:
        raise HTTPException(
            status_code=400,
            detail=f"count exceeds maximum of {settings.max_stream_count}",
        )

    unknown = set(request.params) - set(DISTRIBUTION_PARAMS[request.distribution])
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown parameters for {request.distribution.value}: {', '.join(sorted(unknown))}",
        )

    seed = request.seed if request.seed is not None else request.text
    try:
        rng = SeededRandom(seed, rounding=request.rounding, algorithm=request.algorithm)
    except SeedRandError as e:
        logger.warning("Rejected stream request", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    if request.state is not None:
        rng.state = request.state
    initial_state = rng.state

    try:
        values = _draw(rng, request)
    except SamplingExhaustedError as e:
        logger.warning("Bounded normal sampling failed", seed=rng.seed, attempts=e.attempts)
        raise HTTPException(status_code=400, detail=str(e))
    except (TypeError, ValueError, OverflowError) as e:
        logger.error("Stream generation failed", seed=rng.seed, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    # JSON has no inf/nan; they would come back as null
    if not all(math.isfinite(v) for v in values):
        logger.warning("Stream produced non-finite values", seed=rng.seed, params=request.params)
        raise HTTPException(
            status_code=400,
            detail="Parameters produce non-finite values, which cannot be returned as JSON",
        )

    logger.info(
        "Stream generated",
        seed=rng.seed,
        distribution=request.distribution.value,
        count=request.count,
    )
    return StreamResponse(
        seed=rng.seed,
        algorithm=rng.algorithm.value,
        initial_state=initial_state,
        final_state=rng.state,
        values=values,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
