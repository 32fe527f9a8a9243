from logging import getLogger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi_offline import FastAPIOffline
from gqlhttp.interfaces.schemas import Options
from gqlhttp.middleware.requestlogger import RequestLogger
from gqlhttp.routers.application import build_application_router
from gqlhttp.config.general import general

logger = getLogger(__name__)


def create_app(options: Options) -> FastAPI:
    app = FastAPIOffline(
        title=general.PROJECT_NAME,
        version=general.API_VERSION,
        root_path=general.MOUNT_PATH,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=general.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogger)

    app.include_router(build_application_router(options))
    logger.info(
        "graphql endpoint mounted at %s%s", general.MOUNT_PATH, general.GRAPHQL_PATH
    )
    return app
