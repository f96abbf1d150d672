from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
import logging
import time

from .core.config import settings
from .core.database import close_db_connections
from .core.exceptions import general_exception_handler
from .core.logging import setup_logging

from .routers import health
from .routers.admin import catalog, semesters, instructors, courses, classes, students

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Registrar API")
    yield
    logger.info("Shutting down Registrar API")
    await close_db_connections()
    logger.info("Shutdown complete")

app = FastAPI(
    title="Registrar API - Course Registration Administration",
    description="Administrative backend for departments, courses, classes, semesters and students",
    version=settings.app_version,
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {process_time:.3f}s")
    return response

app.add_exception_handler(Exception, general_exception_handler)

# Include all routers
app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(semesters.router)
app.include_router(instructors.router)
app.include_router(courses.router)
app.include_router(classes.router)
app.include_router(students.router)

@app.get("/")
async def root():
    return {
        "message": "Registrar API",
        "version": settings.app_version,
        "status": "active"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
