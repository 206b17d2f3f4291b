# -*- coding: utf-8 -*-
from .notification_schemas import Notification

__all__ = ["Notification"]
