# app/special/router.py
from typing import Dict, List, Tuple

from schemas import HeirCounts

from .gharrawain import is_gharrawain
from .musytarakah import apply_musytarakah, is_musytarakah


def apply_special_cases(heirs: HeirCounts) -> Tuple[Dict[str, object], List[str]]:
    """
    Deteksi kasus istimewa sekali per perhitungan (atas ahli waris yang
    tidak mahjub). Hasilnya 'calc_mode' yang dibaca oleh tahap furudh.
    """
    notes: List[str] = []
    calc_mode: Dict[str, object] = {"mode": "normal", "musytarakah": False}

    # 1) Gharrawain → cabang tersendiri di tahap furudh (ibu & ayah)
    if is_gharrawain(heirs):
        calc_mode["mode"] = "gharrawain"

    # 2) Musytarakah → hanya catatan
    if is_musytarakah(heirs):
        calc_mode["musytarakah"] = True
        notes.extend(apply_musytarakah(heirs))

    return calc_mode, notes
