import logging
import sys
from pathlib import Path


def setup_logging(level: int = logging.DEBUG, log_dir: str = "logs"):
    """
    Настраивает глобальный логгер.
    - Формат с временем, уровнем и местом вызова.
    - Вывод в консоль (stdout) и в файл logs/simplex_terrain.log.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / "simplex_terrain.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode="w", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # повторный вызов не плодит хендлеры
    )

    logging.getLogger("simplex_terrain").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
