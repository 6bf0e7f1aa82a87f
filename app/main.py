from contextlib import asynccontextmanager
import logging
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from app.database import create_store
from app.errors import AuthenticationDenied, ValidationFailed
from app.routers import auth, challenges, students

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One authorized client for the whole process, shared read-only by requests
    app.state.store = create_store()
    yield


app = FastAPI(lifespan=lifespan)


@app.exception_handler(AuthenticationDenied)
def authentication_denied_handler(request: Request, exc: AuthenticationDenied):
    return JSONResponse({"success": False, "message": exc.message}, status_code=401)


@app.exception_handler(ValidationFailed)
def validation_failed_handler(request: Request, exc: ValidationFailed):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=400)


@app.exception_handler(RequestValidationError)
def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    return JSONResponse({"error": f"Invalid request body: {', '.join(fields) or 'malformed'}"}, status_code=400)


@app.get("/health")
def health_check():
    """Lightweight health check, does not touch the spreadsheet."""
    return {"status": "ok"}


app.include_router(auth.router)
app.include_router(students.router)
app.include_router(challenges.router)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(BASE_DIR, "public"))
# Mounted last so the API routes above take precedence
if os.path.isdir(STATIC_DIR):
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")


def run():
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))
