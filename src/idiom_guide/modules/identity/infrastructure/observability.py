"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).
Soporta modo "Pretty Print" para depuración visual.
"""

import functools
import inspect
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable

import psutil

logger = logging.getLogger("idiom_guide")


def configure_logging(level=logging.INFO, log_file: str | None = None):
    """
    Configura el logging raíz: consola siempre, archivo (DEBUG) si se indica.
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Limpiar handlers previos para evitar duplicados
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
            )
        )
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        logging.debug(f"🔭 Logs persistentes en: {log_file}")


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    # Si esta variable de entorno existe, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def _argument_names(
        signature: inspect.Signature, args: tuple, kwargs: dict[str, Any]
    ) -> list[str]:
        """Nombres de los argumentos recibidos (nunca los valores), sin self/cls."""
        try:
            bound = signature.bind(*args, **kwargs)
        except TypeError:
            # Llamada inválida: la propia función lanzará el error real
            return sorted(kwargs)
        return [name for name in bound.arguments if name not in ("self", "cls")]

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str):
        def decorator(func: Callable):
            signature = inspect.signature(func)

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()
                fields = ObservabilityService._argument_names(signature, args, kwargs)

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"fields": fields, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)

                    end_time = time.time()
                    end_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.completed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(end_time - start_time, 3),
                            "end_ram_mb": end_ram,
                            "ram_delta_mb": round(end_ram - start_ram, 2),
                            "fields": fields,
                            "status": "success",
                        },
                    )
                    return result

                except Exception as e:
                    end_time = time.time()
                    crash_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(end_time - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            "fields": fields,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

            return wrapper

        return decorator
