from fastapi import APIRouter
from gqlhttp.interfaces.schemas import Options
from gqlhttp.routers.graphql import build_router


def build_application_router(options: Options) -> APIRouter:
    router = APIRouter(prefix="")
    router.include_router(build_router(options))
    return router
