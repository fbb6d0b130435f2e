# app/special/dhawil_arham.py
import logging
from typing import List

from schemas import HeirCounts, HeirResult

logger = logging.getLogger(__name__)


def calculate_dhuwu(heirs: HeirCounts, residual: int) -> List[HeirResult]:
    """
    Pembagian kepada dzawil arham (kerabat non-fard & non-'ashobah).
    Golongan dzawil arham belum ada di HeirCounts, jadi tidak ada yang
    menerima; sisa dilaporkan sebagai 'undistributed' oleh pemanggil.
    """
    if residual > 0:
        logger.debug("Dzawil arham belum dimodelkan, sisa %s tidak dibagikan", residual)
    return []
