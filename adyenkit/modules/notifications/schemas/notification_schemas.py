# -*- coding: utf-8 -*-
"""
adyenkit/modules/notifications/schemas/notification_schemas.py

DTO de una notificación HTTP de Adyen.

El mapa de wire llega con claves camelCase (pspReference, eventCode, ...);
from_params() las convierte a snake_case y descarta las que no son campos
del modelo (hmacSignature incluido).

Fecha: 19/10/2026
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from adyenkit.modules.signatures.utils.key_normalizer import underscore

TRUTHY_WIRE_VALUES = (True, 1, "1", "true")

AUTHORISATION_EVENT = "AUTHORISATION"


class Notification(BaseModel):
    """Notificación de evento de pago enviada por Adyen."""

    model_config = ConfigDict(frozen=True)

    event_code: str = Field(min_length=1, description="Tipo de evento (AUTHORISATION, CAPTURE, ...)")
    psp_reference: str = Field(min_length=1, description="Referencia de Adyen del pago")
    original_reference: Optional[str] = Field(default=None, description="pspReference original (modificaciones)")
    merchant_reference: Optional[str] = Field(default=None, description="Referencia del comercio")
    merchant_account_code: Optional[str] = Field(default=None, description="Cuenta de comercio")
    event_date: Optional[str] = Field(default=None, description="Fecha del evento tal como llega")
    success: bool = Field(default=False, description="Resultado del evento")
    live: bool = Field(default=False, description="True si viene del entorno live")
    payment_method: Optional[str] = Field(default=None)
    operations: Optional[str] = Field(default=None, description="Operaciones posibles, separadas por coma")
    reason: Optional[str] = Field(default=None)
    currency: Optional[str] = Field(default=None, max_length=3)
    value: Optional[int] = Field(default=None, description="Importe en unidades menores")

    @field_validator("success", "live", mode="before")
    @classmethod
    def _coerce_wire_boolean(cls, v: Any) -> bool:
        return v in TRUTHY_WIRE_VALUES

    @field_validator("original_reference", "value", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "Notification":
        """
        Construye la notificación desde el mapa plano de wire.

        Raises:
            pydantic.ValidationError: Si faltan event_code / psp_reference o hay tipos inválidos
        """
        converted: Dict[str, Any] = {}
        for key, value in params.items():
            field_name = underscore(str(key))
            if field_name in cls.model_fields:
                converted[field_name] = value
        return cls(**converted)

    def is_authorisation(self) -> bool:
        return self.event_code == AUTHORISATION_EVENT

    def is_successful_authorisation(self) -> bool:
        return self.is_authorisation() and self.success


__all__ = ["Notification", "AUTHORISATION_EVENT"]

# Fin del archivo adyenkit/modules/notifications/schemas/notification_schemas.py
