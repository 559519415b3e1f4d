import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from core.logger import setup_logging
from core.config import settings
from core.errors import ScanError, ValidationError

from controllers.health import router as health_router
from controllers.scan import router as scan_router

from services.scan_service import ScanService


setup_logging()
log = logging.getLogger("app")

app = FastAPI(title="Wallet Risk Scanner (pay-per-scan)")

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- request logger ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    log.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


# --- error taxonomy -> JSON ---
@app.exception_handler(ScanError)
async def scan_error_handler(request: Request, exc: ScanError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # malformed bodies share the 400 {"error": ...} contract with a missing address
    errors = exc.errors()
    first = errors[0] if errors else {}
    if first.get("type") == "json_invalid":
        err = ValidationError("Request body is not valid JSON")
    else:
        where = ".".join(str(p) for p in first.get("loc", ()) if p != "body") or "body"
        err = ValidationError(f"Malformed request: {where}: {first.get('msg', 'invalid value')}")
    return JSONResponse(status_code=err.status_code, content=err.payload())


# --- Routers ---
app.include_router(health_router)
app.include_router(scan_router)

# --- Scan pipeline (settings injected once) ---
app.state.scan_service = ScanService.from_settings(settings)


@app.get("/", include_in_schema=False)
def index():
    page = Path(settings.STATIC_DIR) / "index.html"
    if not page.is_file():
        return JSONResponse(status_code=404, content={"error": "index.html not found"})
    return FileResponse(page)


if __name__ == "__main__":
    import uvicorn

    log.info("Server running on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
