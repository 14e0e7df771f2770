from __future__ import annotations

import logging
import os
from logging import Logger
from pathlib import Path
from datetime import datetime
from typing import Optional

LOG_DIR_ENV = "CSVLITE_LOG_DIR"
LOG_LEVEL_ENV = "CSVLITE_LOG_LEVEL"


class LogManager:
    """
    Gestisce un logger gerarchico 'csvlite.*' con:
    - cartella log da CSVLITE_LOG_DIR, altrimenti logs/ accanto alla root del progetto
      (checkout con pyproject.toml) o ~/.csvlite/logs per i pacchetti installati,
    - file UTF-8 giornaliero 'csvlite_YYYYMMDD.log',
    - StreamHandler su console,
    - prevenzione handler duplicati,
    - livello default INFO (configurabile anche con CSVLITE_LOG_LEVEL).
    """

    _configured: bool = False
    _base_logger_name: str = "csvlite"
    _logfile_path: Optional[Path] = None

    def __init__(self, component: str = "app", level: Optional[int] = None) -> None:
        self.component = component.strip() or "app"
        self.level = level if level is not None else self._env_level()
        self._ensure_configured()

    @staticmethod
    def _env_level() -> int:
        name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
        level = logging.getLevelName(name) if name else logging.INFO
        # getLevelName restituisce una stringa per i nomi sconosciuti
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def _project_root(cls) -> Path:
        # .../csvlite/logger.py -> project_root = parent of 'csvlite'
        return Path(__file__).resolve().parents[1]

    @classmethod
    def _logs_dir(cls) -> Path:
        override = os.environ.get(LOG_DIR_ENV)
        if override:
            return Path(override)
        project_root = cls._project_root()
        if (project_root / "pyproject.toml").is_file():
            return project_root / "logs"
        # Installazione non editable: niente logs/ dentro site-packages
        return Path.home() / ".csvlite" / "logs"

    @classmethod
    def _ensure_configured(cls) -> None:
        if cls._configured:
            return

        logs_dir = cls._logs_dir()
        logs_dir.mkdir(parents=True, exist_ok=True)

        log_name = f"csvlite_{datetime.now():%Y%m%d}.log"
        cls._logfile_path = logs_dir / log_name

        base_logger = logging.getLogger(cls._base_logger_name)
        base_logger.setLevel(logging.DEBUG)
        base_logger.propagate = False  # Evita doppie stampe sul root

        # Formati
        common_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        file_fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(lineno)d | %(message)s"

        # Evita duplicati controllando gli handler già presenti
        existing_file = any(
            isinstance(h, logging.FileHandler)
            and getattr(h, "baseFilename", None) == str(cls._logfile_path)
            for h in base_logger.handlers
        )
        existing_stream = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in base_logger.handlers
        )

        if not existing_file:
            fh = logging.FileHandler(cls._logfile_path, encoding="utf-8")
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(file_fmt))
            base_logger.addHandler(fh)

        if not existing_stream:
            sh = logging.StreamHandler()
            sh.setLevel(logging.WARNING)
            sh.setFormatter(logging.Formatter(common_fmt))
            base_logger.addHandler(sh)

        cls._configured = True
        base_logger.debug("Logger configurato. File: %s", cls._logfile_path)

    def get_logger(self, level: Optional[int] = None) -> Logger:
        base = logging.getLogger(self._base_logger_name)
        logger = base.getChild(self.component)
        logger.setLevel(level if level is not None else self.level)
        return logger

    @classmethod
    def logfile_path(cls) -> Optional[Path]:
        return cls._logfile_path
