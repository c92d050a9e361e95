from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from crimewatch.config import get_settings
from crimewatch.interfaces.api.routes import register_routes
from crimewatch.infrastructure.database import initialize_database, engine
from crimewatch.infrastructure.notifications import PresenceRegistry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepara la base de datos y el registro de presencia; los libera al cerrar."""

    initialize_database()
    app.state.presence_registry = PresenceRegistry()
    yield
    app.state.presence_registry.clear()
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    app = FastAPI(lifespan=lifespan)

    # Autoriza peticiones desde los clientes web configurados.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
