import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import CORS_ORIGINS, PORT, ROUTE_PREFIX
from database import engine, Base
from routers import students, welcome
from utils.results import error_envelope

logger = logging.getLogger(__name__)

# Auto-create tables (or manage migrations externally)
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Student Records API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Malformed path parameters (e.g. a non-integer student id) are client errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=error_envelope("Validation error", exc.errors()),
    )

# Exception handler for HTTPException, including unmatched routes
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": "error", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

app.include_router(
    students.router,
    prefix=ROUTE_PREFIX,
)

app.include_router(
    welcome.router,
    prefix=ROUTE_PREFIX,
)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Student Records API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
