import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from errors import ConfigError
from schemas import HEIR_FIELDS, FaraidhConfig

logger = logging.getLogger(__name__)


def load_json(path: str) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> FaraidhConfig:
    """
    Baca tabel aturan madzhab dari file JSON (kunci sama dengan FaraidhConfig).
    Nama golongan yang tidak dikenal ditolak agar salah ketik tidak diam-diam
    mematikan aturan hajb.
    """
    try:
        raw = load_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Tidak dapat membaca konfigurasi {path}: {exc}") from exc

    try:
        config = FaraidhConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Konfigurasi {path} tidak valid: {exc}") from exc

    known = set(HEIR_FIELDS)
    for blocker, blocked in config.ibtal_rules.items():
        unknown = [name for name in [blocker, *blocked] if name not in known]
        if unknown:
            raise ConfigError(f"Golongan tidak dikenal pada ibtal_rules: {', '.join(unknown)}")
    unknown = [name for name in config.radd_eligible if name not in known]
    if unknown:
        raise ConfigError(f"Golongan tidak dikenal pada radd_eligible: {', '.join(unknown)}")

    logger.info("Konfigurasi madzhab %s dimuat dari %s", config.madzhab, path)
    return config
