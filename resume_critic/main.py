import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import sentry_sdk

from resume_critic.api.v1.health import router as health_router
from resume_critic.api.v1.resume import router as resume_router
from resume_critic.core.body_limit import BodySizeLimitMiddleware, RequestBodyTooLarge, body_too_large_handler
from resume_critic.core.cors import ALLOWED_METHODS, cors_allowed_origins
from resume_critic.core.config import settings
from dotenv import load_dotenv
from resume_critic.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

logger = logging.getLogger(__name__)

app = FastAPI(title="Resume Critic API", version="0.1.0", lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=ALLOWED_METHODS,
    allow_headers=["*"],
)


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("request_validation_failed path=%s errors=%s", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "Invalid request body",
            "details": "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()[:5]
            ),
        },
    )


app.add_exception_handler(RequestValidationError, _validation_exception_handler)
app.add_exception_handler(RequestBodyTooLarge, body_too_large_handler)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(resume_router, prefix="/api", tags=["Resume"])


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
