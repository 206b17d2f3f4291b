# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/__init__.py

Capa web delgada: recepción de notificaciones de Adyen y del redirect de
resultado del HPP. Sólo verifica; no persiste.

Estructura:
- schemas: DTO Notification
- metrics: Contadores Prometheus
- routes: Router FastAPI (/adyen/...) y /metrics

Fecha: 19/10/2026
"""
