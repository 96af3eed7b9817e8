import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from medibloc.api.appointments import router as appointments_router
from medibloc.api.auth import router as auth_router
from medibloc.api.countries import router as countries_router
from medibloc.api.diseases import router as diseases_router
from medibloc.api.doctors import router as doctors_router
from medibloc.api.health import router as health_router
from medibloc.api.medical_records import router as medical_records_router
from medibloc.api.medicines import router as medicines_router
from medibloc.api.patient_diseases import router as patient_diseases_router
from medibloc.api.patients import router as patients_router
from medibloc.api.pharmacies import router as pharmacies_router
from medibloc.api.prescriptions import router as prescriptions_router
from medibloc.api.root import router as root_router
from medibloc.api.stats import router as stats_router
from medibloc.api.symptoms import router as symptoms_router
from medibloc.controllers.resources import build_controllers
from medibloc.core.config import settings
from medibloc.core.errors import install_error_handlers
from medibloc.core.log_config import configure_logging
from medibloc.db.base import Base
from medibloc.db.session import SessionLocal

logger = logging.getLogger(__name__)

API_ROUTERS = (
    auth_router,
    patients_router,
    doctors_router,
    appointments_router,
    diseases_router,
    symptoms_router,
    medicines_router,
    pharmacies_router,
    countries_router,
    prescriptions_router,
    medical_records_router,
    patient_diseases_router,
    stats_router,
)


def create_app(session_factory: sessionmaker = SessionLocal) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=session_factory.kw["bind"])
            logger.info("database tables ensured")
        logger.info("MediBloc API ready (env=%s, prefix=%s)", settings.APP_ENV, settings.API_PREFIX)
        yield
        logger.info("MediBloc API shutting down")

    app = FastAPI(title="MediBloc API", lifespan=lifespan)

    # CORS middleware for frontend access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.state.session_factory = session_factory
    app.state.controllers = build_controllers(session_factory)

    app.include_router(root_router)
    app.include_router(health_router)
    for router in API_ROUTERS:
        app.include_router(router, prefix=settings.API_PREFIX)

    return app


app = create_app()
