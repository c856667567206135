"""
MoodCam Recs - HTTP API
=======================

JSON endpoints used by the webcam front end.

Run with:
    python -m moodcam_recs.cli serve --port 3000

or directly with uvicorn (logging is configured at startup):
    uvicorn moodcam_recs.app:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .recommender import MoodRecommender
from .errors import MoodCamError, InvalidInput
from .config import EXPOSE_ERROR_DETAILS, integration_status
from .utils import setup_logging
from . import __version__

logger = logging.getLogger(__name__)


class AnalyzeMoodRequest(BaseModel):
    image: Optional[str] = None


class RecommendationRequest(BaseModel):
    mood: Optional[str] = None


# =============================================================================
# ERROR TRANSLATION
# =============================================================================

def error_response(error: Exception, message: str) -> JSONResponse:
    """
    Turn a pipeline failure into an HTTP response.

    Args:
        error: Raised exception
        message: Endpoint-level error message for 500 responses

    Returns:
        400 for InvalidInput, 500 for everything else
    """
    if isinstance(error, InvalidInput):
        return JSONResponse(status_code=400, content={"error": error.message})

    body = {"error": message}
    if EXPOSE_ERROR_DETAILS:
        if isinstance(error, MoodCamError):
            body["details"] = error.details if error.details is not None else error.message
        else:
            body["details"] = str(error)
    return JSONResponse(status_code=500, content=body)


MISSING_BODY_ERRORS = {
    "/analyze-mood": "No image provided",
    "/get-recommendations": "No mood provided",
}


def validation_error_response(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Turn a request body FastAPI could not parse into a 400.

    A missing body gets the endpoint's missing-field message; malformed JSON
    or a wrongly typed field gets a generic one.
    """
    errors = exc.errors()
    message = "Invalid request body"
    if errors and all(e.get("type") == "missing" for e in errors):
        message = MISSING_BODY_ERRORS.get(request.url.path, message)
    logger.warning(
        "Rejected request body for %s: %s",
        request.url.path, [e.get("type") for e in errors],
    )
    return JSONResponse(status_code=400, content={"error": message})


def get_recommender(request: Request) -> MoodRecommender:
    """Recommender held by the app, created on first use."""
    state = request.app.state
    if state.recommender is None:
        state.recommender = MoodRecommender()
    return state.recommender


# =============================================================================
# APP FACTORY
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    status = integration_status()
    logger.info("🎵 MoodCam Recs API starting (v%s)", __version__)
    logger.info("🤖 Gemini AI: %s", status["gemini"])
    logger.info("🎧 Spotify: %s", status["spotify"])
    yield


def create_app(recommender: Optional[MoodRecommender] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        recommender: Pipeline to serve (created lazily if None)
    """
    app = FastAPI(
        title="MoodCam Recs",
        description="Webcam mood detection to Spotify track recommendations",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.recommender = recommender

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return validation_error_response(request, exc)

    @app.post("/analyze-mood")
    def analyze_mood(body: AnalyzeMoodRequest, request: Request):
        try:
            mood = get_recommender(request).analyze_mood(body.image)
        except MoodCamError as e:
            logger.error("Error analyzing mood: %s", e)
            return error_response(e, "Failed to analyze mood")
        except Exception as e:
            logger.exception("Unexpected error analyzing mood")
            return error_response(e, "Failed to analyze mood")
        return {"mood": mood}

    @app.post("/get-recommendations")
    def get_recommendations(body: RecommendationRequest, request: Request):
        try:
            result = get_recommender(request).recommend(body.mood)
        except MoodCamError as e:
            logger.error("Error getting recommendations: %s", e)
            return error_response(e, "Failed to get music recommendations")
        except Exception as e:
            logger.exception("Unexpected error getting recommendations")
            return error_response(e, "Failed to get music recommendations")
        return result.to_dict()

    @app.get("/health")
    def health():
        return {"status": "ok", "message": "MoodCam Recs API is running"}

    return app


app = create_app()
