# main.py
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import Settings
from models import EmailRequest
from services.draft import ReplyGenerator
from services.llm import GeminiClient

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = Settings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.api_key:
        logger.warning("GEMINI_API_KEY is not set; generate calls will fail upstream")
    async with httpx.AsyncClient(timeout=settings.timeout) as http:
        app.state.generator = ReplyGenerator(GeminiClient(settings, http))
        logger.info("Email generator ready (upstream %s)", settings.api_url)
        yield


app = FastAPI(title="Email Reply Generator", lifespan=lifespan)

# ------------- CORS -------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
# ------------------------------------------------


def get_generator(request: Request) -> ReplyGenerator:
    return request.app.state.generator


router = APIRouter(prefix="/api/email", default_response_class=PlainTextResponse)


@router.post("/generate")
async def generate_email(
    email_request: Optional[EmailRequest] = Body(default=None),
    generator: ReplyGenerator = Depends(get_generator),
):
    # failures come back as reply text, always with a 200
    return await generator.generate_email_reply(email_request)


@router.get("/health")
def health():
    return "Email Generator Service is running!"


@router.get("/")
def root():
    return "Email Generator API is online! Use /api/email/health for health check."


app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )
