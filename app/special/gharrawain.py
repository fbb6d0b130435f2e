# app/special/gharrawain.py
from fractions import Fraction
from typing import List, Tuple

from app.rules.kinship import has_descendant, has_spouse
from schemas import HeirCounts, HeirResult


def is_gharrawain(heirs: HeirCounts) -> bool:
    # syarat: suami/istri, ayah, ibu; tanpa keturunan
    return has_spouse(heirs) and heirs.ayah == 1 and heirs.ibu == 1 and not has_descendant(heirs)


def apply_gharrawain(spouse: HeirResult, net_estate: int) -> Tuple[HeirResult, List[str]]:
    """
    Masalah Gharrawain ('Umariyatain): Ibu mendapat 1/3 dari SISA setelah
    bagian suami/istri, bukan 1/3 dari seluruh harta. Ayah tidak diberi fard
    di sini; ia mengambil sisa sebagai 'ashobah.
    """
    remainder = net_estate - spouse.total_share
    mother_share = remainder // 3
    mother_portion = (1 - spouse.portion) / 3

    notes = [
        "Masalah Gharrawain terdeteksi: pasangan, ayah, dan ibu tanpa keturunan.",
        f"Ibu mendapat 1/3 sisa setelah {spouse.type} ({remainder:,} ÷ 3 = {mother_share:,}),"
        f" setara {mother_portion} harta; ayah mengambil sisanya sebagai 'ashobah.",
    ]
    mother = HeirResult(
        type="ibu",
        count=1,
        total_share=mother_share,
        individual_share=mother_share,
        portion=Fraction(mother_portion),
        category="fard",
    )
    return mother, notes
