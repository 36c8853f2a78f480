from __future__ import annotations

from summify.api.app import create_app

__all__ = ["create_app"]
