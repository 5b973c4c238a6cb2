from fastapi import APIRouter
from api.v1.routes.i18n import router as i18n_router
from api.v1.routes.feeds import router as feeds_router


# Main v1 router (includes all endpoints)
router = APIRouter()
router.include_router(i18n_router)
router.include_router(feeds_router)
