# app/rules/hajb.py

import logging
from typing import List

from schemas import HEIR_FIELDS, FaraidhConfig, HeirCounts

logger = logging.getLogger(__name__)


def apply_hajb(heirs: HeirCounts, config: FaraidhConfig) -> HeirCounts:
    """
    Terapkan tabel hajb: setiap penghalang yang ADA pada input asli
    menggugurkan semua golongan yang dihalanginya. Hanya satu lapis,
    penghalangan bertingkat harus sudah tertulis di tabel.
    """
    blocked = set()
    for blocker in config.ibtal_rules:
        if heirs.count(blocker) > 0:
            blocked |= config.blocks(blocker)

    updates = {name: 0 for name in blocked if name in HEIR_FIELDS}
    return heirs.model_copy(update=updates)


def blocked_heirs(original: HeirCounts, eligible: HeirCounts) -> List[str]:
    """Golongan yang hadir di input tetapi gugur (mahjub), dalam urutan baku."""
    mahjub = [
        name for name in HEIR_FIELDS
        if original.count(name) > 0 and eligible.count(name) == 0
    ]
    if mahjub:
        logger.debug("Mahjub: %s", ", ".join(mahjub))
    return mahjub
