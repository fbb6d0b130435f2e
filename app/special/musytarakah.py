# app/special/musytarakah.py
from typing import List

from app.rules.kinship import maternal_sibling_count
from schemas import HeirCounts


def is_musytarakah(heirs: HeirCounts) -> bool:
    # suami, ibu/nenek, ≥2 saudara seibu, dan saudara laki-laki kandung
    has_mother_side = heirs.ibu > 0 or heirs.nenek_ayah > 0 or heirs.nenek_ibu > 0
    return (
        heirs.suami > 0
        and has_mother_side
        and maternal_sibling_count(heirs) >= 2
        and heirs.saudara_laki_kandung > 0
    )


def apply_musytarakah(heirs: HeirCounts) -> List[str]:
    """
    Penggabungan saudara kandung ke dalam 1/3 saudara seibu belum dimodelkan.
    Pembagian berjalan normal (saudara kandung hanya mendapat sisa bila ada);
    fungsi ini hanya mencatat bahwa kasus tersebut terdeteksi.
    """
    return [
        "Masalah Musytarakah (Himariyah) terdeteksi; penggabungan saudara kandung "
        "dengan saudara seibu tidak diterapkan, pembagian mengikuti kaidah umum."
    ]
