"""FastAPI server exposing the Wearorithm REST API."""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import APIRouter, FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from logic.validation import (
    AnalysisPublic,
    AuthResponse,
    FavoriteUpdate,
    FeedbackCreate,
    FeedbackPublic,
    LoginRequest,
    MessageResponse,
    OutfitPublic,
    PaletteRequest,
    PaletteResponse,
    ProfilePublic,
    ProfileUpdate,
    RecommendationRequest,
    RegisterRequest,
    StyleStats,
    WardrobeItemCreate,
    WardrobeItemPublic,
    WardrobeItemUpdate,
    describe_errors,
)
from server.deps import CurrentUser, Service
from tools.uploads import read_limited
from wearorithm_app.app import WearorithmApp
from wearorithm_app.errors import WearorithmError
from wearorithm_app.logging_config import configure_logging, correlation_context, get_logger, log_event

configure_logging()

LOGGER = get_logger(__name__)
CORRELATION_HEADER = "X-Correlation-ID"

router = APIRouter(prefix="/api")


# Auth


@router.post("/auth/register", response_model=AuthResponse)
def register(payload: RegisterRequest, service: Service) -> dict:
    return service.register(payload)


@router.post("/auth/login", response_model=AuthResponse)
def login(payload: LoginRequest, service: Service) -> dict:
    return service.login(payload)


# Profile


@router.get("/profile", response_model=ProfilePublic)
def read_profile(current_user: CurrentUser, service: Service):
    return service.get_profile(current_user.id)


@router.put("/profile", response_model=ProfilePublic)
def update_profile(payload: ProfileUpdate, current_user: CurrentUser, service: Service):
    return service.update_profile(current_user.id, payload)


# Outfits


@router.post("/recommendations", response_model=List[OutfitPublic])
def recommend(payload: RecommendationRequest, current_user: CurrentUser, service: Service):
    return service.recommend_outfits(current_user.id, payload.occasion, payload.mood, payload.count)


@router.get("/outfits", response_model=List[OutfitPublic])
def read_outfits(current_user: CurrentUser, service: Service):
    return service.list_outfits(current_user.id)


@router.get("/outfits/{outfit_id}", response_model=OutfitPublic)
def read_outfit(outfit_id: str, current_user: CurrentUser, service: Service):
    return service.get_outfit(current_user.id, outfit_id)


@router.put("/outfits/{outfit_id}/favorite", response_model=OutfitPublic)
def set_favorite(outfit_id: str, payload: FavoriteUpdate, current_user: CurrentUser, service: Service):
    return service.set_favorite(current_user.id, outfit_id, payload.is_favorite)


@router.delete("/outfits/{outfit_id}", response_model=MessageResponse)
def delete_outfit(outfit_id: str, current_user: CurrentUser, service: Service) -> dict:
    service.delete_outfit(current_user.id, outfit_id)
    return {"message": "Outfit deleted successfully"}


# Image analysis


@router.post("/analyze-image", response_model=AnalysisPublic)
def analyze_image(
    current_user: CurrentUser,
    service: Service,
    image: Optional[UploadFile] = File(default=None),
):
    """Score an uploaded outfit photo. Only ``image/*`` up to the size limit."""

    if image is None:
        return service.analyze_image(current_user.id, None, None, None)
    data = read_limited(image.file, service.config.max_upload_bytes)
    return service.analyze_image(current_user.id, image.filename, image.content_type, data)


@router.get("/analyses", response_model=List[AnalysisPublic])
def read_analyses(current_user: CurrentUser, service: Service):
    return service.list_analyses(current_user.id)


# Wardrobe


@router.get("/wardrobe", response_model=List[WardrobeItemPublic])
def read_wardrobe(current_user: CurrentUser, service: Service, category: Optional[str] = None):
    return service.list_wardrobe(current_user.id, category)


@router.post("/wardrobe", response_model=WardrobeItemPublic)
def add_wardrobe_item(payload: WardrobeItemCreate, current_user: CurrentUser, service: Service):
    return service.add_wardrobe_item(current_user.id, payload)


@router.put("/wardrobe/{item_id}", response_model=WardrobeItemPublic)
def update_wardrobe_item(item_id: str, payload: WardrobeItemUpdate, current_user: CurrentUser, service: Service):
    return service.update_wardrobe_item(current_user.id, item_id, payload)


@router.delete("/wardrobe/{item_id}", response_model=MessageResponse)
def delete_wardrobe_item(item_id: str, current_user: CurrentUser, service: Service) -> dict:
    service.delete_wardrobe_item(current_user.id, item_id)
    return {"message": "Item deleted successfully"}


# Colors


@router.post("/colors/palette", response_model=PaletteResponse)
def color_palette(payload: PaletteRequest, current_user: CurrentUser, service: Service) -> dict:
    return {"complementary_colors": service.color_palette(payload.base_colors)}


# Feedback and stats


@router.post("/feedback", response_model=FeedbackPublic)
def submit_feedback(payload: FeedbackCreate, current_user: CurrentUser, service: Service):
    return service.submit_feedback(current_user.id, payload)


@router.get("/feedback", response_model=List[FeedbackPublic])
def read_feedback(current_user: CurrentUser, service: Service):
    return service.list_feedback(current_user.id)


@router.get("/stats", response_model=StyleStats)
def read_stats(current_user: CurrentUser, service: Service) -> dict:
    return service.style_stats(current_user.id)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(WearorithmError)
    async def _wearorithm_error(_: Request, exc: WearorithmError) -> JSONResponse:
        return _message(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        return _message(400, describe_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _message(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        log_event(
            LOGGER,
            logging.ERROR,
            "unhandled_exception",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return _message(500, str(exc) or "Internal Server Error")


def create_app(wearorithm: WearorithmApp | None = None) -> FastAPI:
    """Build the ASGI app around a :class:`WearorithmApp` instance."""

    service = wearorithm or WearorithmApp()
    app = FastAPI(title="Wearorithm", version="0.1.0")
    app.state.wearorithm = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=service.config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        with correlation_context(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            start = time.perf_counter()
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            if request.url.path.startswith("/api"):
                log_event(
                    LOGGER,
                    logging.INFO,
                    "http_request",
                    method=request.method,
                    path=request.url.path,
                    status=response.status_code,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                    correlation_id=correlation_id,
                )
            return response

    @app.get("/healthz")
    def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "wearorithm",
            "environment": service.config.environment or "local",
            "model": service.config.recommendation_model,
            "aiEnabled": service.gateway.ai_enabled,
        }

    _register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


__all__ = ["app", "create_app", "get_app", "router"]
