# -*- coding: utf-8 -*-
"""
adyenkit/modules/signatures/facades/__init__.py

Punto de entrada del paquete de fachadas del módulo Signatures.

Este __init__ NO importa submódulos: hpp_request depende de
adyenkit.shared.config, que a su vez importa los enums de este módulo.
Cada fachada se importa explícitamente:

    from adyenkit.modules.signatures.facades.hpp_signature import sign_hpp_params
    from adyenkit.modules.signatures.facades.hpp_request import HppRequest, HppResponse
    from adyenkit.modules.signatures.facades.notification_signature import verify_notification
    from adyenkit.modules.signatures.facades.form_signature import redirect_signature_check
"""
