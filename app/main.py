"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

la traduction des erreurs de la base en réponses HTTP (400 / 500, sans détail interne)

Inclut les routers sous /api (ex : /api/todos).

Initialise la base au démarrage (lifespan).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn app.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import StoreFailure, ValidationFailure
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db

from app.api.v1.routers import todos, users, notes

import uvicorn

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "todos", "description": "Todos, recherche par titre et filtrage par tag"},
        {"name": "notes", "description": "Notes d'un utilisateur et leurs tags"},
        {"name": "users", "description": "Propriétaires des notes"},
        {"name": "health", "description": "État du service"},
    ],
)

# CORS (CORS_ORIGINS dans l'env, "*" par défaut)
allow_all = settings.cors_origins == ["*"] or not settings.cors_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if allow_all else settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)


# -----------------------------
# Erreurs
# -----------------------------
@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": "Invalid or missing field"})


@app.exception_handler(StoreFailure)
async def store_failure_handler(request: Request, exc: StoreFailure) -> JSONResponse:
    logger.exception("store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": exc.errors(),
        },
    )


# Routers
app.include_router(todos.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(notes.router, prefix="/api")

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)


@app.get("/", tags=["health"])
def root() -> dict:
    return {"message": f"{settings.APP_NAME} running", "docs": "/docs"}


@app.get("/health", tags=["health"])
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, reload=False)  # http://localhost:3000
