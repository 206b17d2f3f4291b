# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/routes/__init__.py

Ensamblador de rutas del módulo Notifications.

Incluye:
- POST /adyen/notifications
- GET  /adyen/payments/result
- GET  /metrics
"""

from fastapi import APIRouter

from .notifications import router as notifications_router
from .metrics import router as metrics_router

router = APIRouter()

router.include_router(notifications_router)
router.include_router(metrics_router)

__all__ = ["router"]
