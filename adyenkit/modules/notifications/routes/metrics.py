# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/routes/metrics.py

Endpoint Prometheus: GET /metrics

Fecha: 19/10/2026
"""

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.responses import PlainTextResponse

from adyenkit.modules.notifications.metrics.prometheus_exporter import render_prometheus_metrics

router = APIRouter(tags=["adyen:metrics"])


@router.get("/metrics", response_class=PlainTextResponse)
async def prometheus_metrics() -> PlainTextResponse:
    """Devuelve las métricas en formato Prometheus para scraping."""
    return PlainTextResponse(render_prometheus_metrics(), media_type=CONTENT_TYPE_LATEST)

# Fin del archivo adyenkit/modules/notifications/routes/metrics.py
