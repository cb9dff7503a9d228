# ==============================================================================
# Файл: simplex_terrain/export/__init__.py
# Назначение: Превью полей для хоста (рендер, не формат хранения).
# ==============================================================================
from __future__ import annotations

from .image_exporters import field_to_gray8, write_height_preview

__all__ = [
    "field_to_gray8",
    "write_height_preview",
]
