# ==============================================================================
# Файл: run_simplex.py
# Назначение: Замена кнопки "Simplex Noise" на террейне: берёт плоскую карту
#             высот, накладывает fBm и (опционально) пишет превью PNG.
# Запуск: python run_simplex.py [preset.json] [preview.png]
# ==============================================================================
import logging
import sys

import numpy as np

from simplex_terrain import apply_fbm_to_heightmap, load_preset, NoiseError
from simplex_terrain.export import write_height_preview
from simplex_terrain.setup_logging import setup_logging

logger = logging.getLogger(__name__)

# --- НАСТРОЙКИ ---
HEIGHTMAP_SIZE = 257          # типичный размер heightmap террейна (2^n + 1)
FLAT_TERRAIN_HEIGHT = 0.0
PREVIEW_SCALE = 2


def run_simplex(preset_path=None, preview_path=None) -> int:
    setup_logging()

    try:
        preset = load_preset(preset_path)
        existing = np.full((HEIGHTMAP_SIZE, HEIGHTMAP_SIZE), FLAT_TERRAIN_HEIGHT, dtype=np.float64)
        heights = apply_fbm_to_heightmap(existing, preset)
    except NoiseError as e:
        logger.error(f"Генерация не удалась: {e}")
        return 1

    logger.info(
        f"Результат: min={heights.min():.4f}, max={heights.max():.4f}, mean={heights.mean():.4f}"
    )
    if preview_path:
        write_height_preview(preview_path, heights, scale=PREVIEW_SCALE)
    return 0


if __name__ == "__main__":
    args = sys.argv[1:]
    preset_arg = args[0] if len(args) > 0 and args[0] != "-" else None
    preview_arg = args[1] if len(args) > 1 else None
    sys.exit(run_simplex(preset_arg, preview_arg))
