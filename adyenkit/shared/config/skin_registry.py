# -*- coding: utf-8 -*-
"""
adyenkit/shared/config/skin_registry.py

Registro de skins (perfil de comerciante en Adyen: skin code + shared secret).

Se construye en el arranque a partir de AdyenSettings y después sólo se lee
durante el manejo de requests. El registro protege sus escrituras con un lock;
las lecturas trabajan sobre el dict vigente.

Fecha: 19/10/2026
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from adyenkit.shared.config.settings_adyen import AdyenSettings, get_adyen_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Skin:
    """Skin registrado."""

    name: str
    skin_code: str
    shared_secret: str = field(repr=False)
    default_form_params: Mapping[str, Any] = field(default_factory=dict)


class SkinRegistry:
    """
    Tabla de skins indexada por nombre simbólico y por skin code.

    Ejemplo:
        registry = SkinRegistry()
        registry.register("main", "X7hsNDWp", "4468D978...")
        registry.shared_secret_by_code("X7hsNDWp")
    """

    def __init__(self) -> None:
        self._skins: Dict[str, Skin] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: AdyenSettings) -> "SkinRegistry":
        """Crea el registro con los skins declarados en configuración."""
        registry = cls()
        for name, skin in settings.adyen_skins.items():
            registry.register(
                name,
                skin.skin_code,
                skin.shared_secret,
                skin.default_form_params,
            )
        return registry

    def register(
        self,
        name: str,
        skin_code: str,
        shared_secret: str,
        default_form_params: Optional[Mapping[str, Any]] = None,
    ) -> Skin:
        """Registra (o reemplaza) un skin bajo `name`."""
        skin = Skin(
            name=str(name),
            skin_code=skin_code,
            shared_secret=shared_secret,
            default_form_params=MappingProxyType(dict(default_form_params or {})),
        )
        with self._lock:
            skins = dict(self._skins)
            skins[skin.name] = skin
            self._skins = skins
        logger.debug("Skin registrado: name=%s skin_code=%s", skin.name, skin.skin_code)
        return skin

    @property
    def skins(self) -> Mapping[str, Skin]:
        return MappingProxyType(self._skins)

    def by_name(self, name: Optional[str]) -> Optional[Skin]:
        if name is None:
            return None
        return self._skins.get(str(name))

    def by_code(self, skin_code: Optional[str]) -> Optional[Skin]:
        if not skin_code:
            return None
        for skin in self._skins.values():
            if skin.skin_code == skin_code:
                return skin
        return None

    def shared_secret_by_code(self, skin_code: Optional[str]) -> Optional[str]:
        skin = self.by_code(skin_code)
        return skin.shared_secret if skin else None

    def resolve(self, skin_code_or_name: Optional[str]) -> Optional[Skin]:
        """Busca primero por nombre y después por skin code."""
        return self.by_name(skin_code_or_name) or self.by_code(skin_code_or_name)

    def __len__(self) -> int:
        return len(self._skins)

    def __contains__(self, name: object) -> bool:
        return name in self._skins


# Singleton global
_skin_registry: Optional[SkinRegistry] = None


def get_skin_registry() -> SkinRegistry:
    """
    Obtiene el registro global, construido desde get_adyen_settings().

    Returns:
        SkinRegistry: Registro de skins
    """
    global _skin_registry
    if _skin_registry is None:
        _skin_registry = SkinRegistry.from_settings(get_adyen_settings())
    return _skin_registry


def reset_skin_registry() -> None:
    """Descarta el singleton (útil para tests)."""
    global _skin_registry
    _skin_registry = None


__all__ = [
    "Skin",
    "SkinRegistry",
    "get_skin_registry",
    "reset_skin_registry",
]

# Fin del archivo adyenkit/shared/config/skin_registry.py
