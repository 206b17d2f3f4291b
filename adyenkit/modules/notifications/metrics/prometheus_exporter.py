# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/metrics/prometheus_exporter.py

Exporter Prometheus de la capa de notificaciones.
Registro propio (no el global de prometheus_client).

Fecha: 19/10/2026
"""

import logging

from prometheus_client import CollectorRegistry, Counter, generate_latest

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------
# Registro
# --------------------------------------------------------------------------
registry = CollectorRegistry()

# --------------------------------------------------------------------------
# Definición de métricas
# --------------------------------------------------------------------------

NOTIFICATIONS_RECEIVED_TOTAL = Counter(
    "adyen_notifications_received_total",
    "Total de notificaciones recibidas",
    registry=registry,
)
NOTIFICATIONS_VERIFIED_TOTAL = Counter(
    "adyen_notifications_verified_total",
    "Notificaciones por resultado de verificación HMAC (success/failure)",
    ["result"],
    registry=registry,
)
NOTIFICATIONS_REJECTED_TOTAL = Counter(
    "adyen_notifications_rejected_total",
    "Notificaciones rechazadas por razón",
    ["reason"],  # unauthorized/missing_signature/invalid_signature/invalid_payload
    registry=registry,
)
REDIRECTS_VERIFIED_TOTAL = Counter(
    "adyen_redirects_verified_total",
    "Redirects de resultado por esquema y resultado de verificación",
    ["scheme", "result"],
    registry=registry,
)


# --------------------------------------------------------------------------
# Funciones auxiliares
# --------------------------------------------------------------------------
def render_prometheus_metrics() -> bytes:
    """Salida actual de las métricas en formato Prometheus."""
    return generate_latest(registry)


def observe_notification_received() -> None:
    NOTIFICATIONS_RECEIVED_TOTAL.inc()


def observe_notification_verified(result: str) -> None:
    """
    Registra el resultado de la verificación HMAC.

    Args:
        result: success/failure
    """
    NOTIFICATIONS_VERIFIED_TOTAL.labels(result=result).inc()
    logger.debug("[Prometheus] Notificación verified=%s", result)


def observe_notification_rejected(reason: str) -> None:
    NOTIFICATIONS_REJECTED_TOTAL.labels(reason=reason).inc()
    logger.debug("[Prometheus] Notificación rejected reason=%s", reason)


def observe_redirect_verified(scheme: str, result: str) -> None:
    REDIRECTS_VERIFIED_TOTAL.labels(scheme=scheme, result=result).inc()
    logger.debug("[Prometheus] Redirect scheme=%s verified=%s", scheme, result)


__all__ = [
    "registry",
    "render_prometheus_metrics",
    "observe_notification_received",
    "observe_notification_verified",
    "observe_notification_rejected",
    "observe_redirect_verified",
]

# Fin del archivo adyenkit/modules/notifications/metrics/prometheus_exporter.py
