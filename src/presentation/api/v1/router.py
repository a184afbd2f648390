from fastapi import APIRouter

from .credit import credit_router
from .customer import customer_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(customer_router, tags=["Customers"])
router.include_router(credit_router, tags=["Credits"])
