from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import uvicorn
import logging
import sys

from .config import settings

# Configure Logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    from .database import engine, Base, SessionLocal
    from .core.container import init_container, container
    from . import models  # noqa: F401  (register tables)
    from .seed import seed_catalog

    init_container()
    logger.info(f"[STARTUP] Using database {container.config.database_url()}")

    # Create tables
    Base.metadata.create_all(bind=engine)

    if container.config.seed_catalog():
        db = SessionLocal()
        try:
            await seed_catalog(db)
        finally:
            db.close()
    else:
        logger.info("[STARTUP] Catalog seeding disabled")

    yield

    # --- SHUTDOWN ---
    engine.dispose()
    logger.info("[OK] Shutdown complete.")


app = FastAPI(
    title="Microservicio Catálogo - API",
    description=(
        "API REST para la gestión del catálogo de libros de la biblioteca. "
        "Permite consultar información de libros, verificar disponibilidad, "
        "actualizar estado y realizar búsquedas."
    ),
    version="1.0.0",
    contact={"name": "Equipo de Desarrollo", "email": "desarrollo@analisys.co"},
    servers=[
        {"url": f"http://localhost:{settings.port}", "description": "Servidor de Desarrollo"},
        {"url": "https://api-catalogo.biblioteca.analisys.co", "description": "Servidor de Producción"},
    ],
    lifespan=lifespan
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed path/query/body input is a 400, not FastAPI's default 422"""
    logger.info(f"[API] Invalid input on {request.method} {request.url.path}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# ========== Include API Routers ==========
from .api.routers import books

app.include_router(books.router)


if __name__ == "__main__":
    uvicorn.run("library_catalog.main:app", host=settings.host, port=settings.port, reload=False)
