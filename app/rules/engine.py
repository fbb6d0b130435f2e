# app/rules/engine.py

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Dict, List, Tuple

from app.math.rational import scale
from app.rules.kinship import (
    has_descendant,
    has_female_descendant,
    maternal_sibling_count,
    sibling_count,
)
from app.rules.madhab import HEIR_NAMES
from app.special.gharrawain import apply_gharrawain
from schemas import HeirCounts, HeirResult

logger = logging.getLogger(__name__)

HALF = Fraction(1, 2)
THIRD = Fraction(1, 3)
QUARTER = Fraction(1, 4)
SIXTH = Fraction(1, 6)
EIGHTH = Fraction(1, 8)
TWO_THIRDS = Fraction(2, 3)

# Satu kelompok 'ashobah: (golongan, jumlah orang, bobot per orang)
AsabahMember = Tuple[str, int, int]


# =========================
# Helper buat HeirResult
# =========================
def _fard(type_: str, count: int, fraction: Fraction, net_estate: int) -> HeirResult:
    total = scale(net_estate, fraction)
    return HeirResult(
        type=type_,
        count=count,
        total_share=total,
        individual_share=total // count if count > 1 else total,
        portion=fraction,
        category="fard",
    )


def _shared_fard(members: List[Tuple[str, int]], group_fraction: Fraction,
                 net_estate: int) -> List[HeirResult]:
    """
    Bagian golongan yang dibagi RATA per kepala lintas golongan
    (saudara seibu laki-laki & perempuan).
    """
    heads = sum(count for _, count in members)
    per_head = scale(net_estate, group_fraction) // heads
    results = []
    for type_, count in members:
        if count <= 0:
            continue
        results.append(HeirResult(
            type=type_,
            count=count,
            total_share=per_head * count,
            individual_share=per_head,
            portion=group_fraction * count / heads,
            category="fard",
        ))
    return results


def _one_or_group(count: int) -> Fraction:
    # 1 orang → 1/2, ≥2 orang → 2/3 bersama
    return HALF if count == 1 else TWO_THIRDS


# =========================
# Mesin penentu furūḍ
# =========================
def determine_furudh(heirs: HeirCounts, net_estate: int,
                     calc_mode: Dict[str, object]) -> Tuple[List[HeirResult], List[str]]:
    """
    Menghasilkan daftar bagian tetap (furūḍ) dalam urutan baku:
    pasangan → orang tua (atau cabang Gharrawain) → keturunan → kakek/nenek → saudara.
    `heirs` adalah ahli waris setelah hajb.
    Urutan ini juga menentukan siapa yang menerima sisa pembulatan pada 'aul.
    """
    results: List[HeirResult] = []
    notes: List[str] = []
    descendant = has_descendant(heirs)

    def add(type_: str, count: int, fraction: Fraction, reason: str):
        if count > 0:
            results.append(_fard(type_, count, fraction, net_estate))
            notes.append(f"{HEIR_NAMES[type_]}: {fraction} karena {reason}")

    # -----------------------
    # 1) Suami / Istri
    # -----------------------
    if descendant:
        add("istri", heirs.istri, EIGHTH, "pewaris punya anak/cucu")
        add("suami", heirs.suami, QUARTER, "pewaris punya anak/cucu")
    else:
        add("istri", heirs.istri, QUARTER, "pewaris tidak punya anak/cucu")
        add("suami", heirs.suami, HALF, "pewaris tidak punya anak/cucu")

    # -----------------------
    # 2) Ibu & Ayah (atau Gharrawain)
    # -----------------------
    if calc_mode.get("mode") == "gharrawain":
        spouse = results[0]
        mother, n = apply_gharrawain(spouse, net_estate)
        results.append(mother)
        notes.extend(n)
    else:
        if heirs.ibu > 0:
            if descendant:
                add("ibu", 1, SIXTH, "ada keturunan")
            elif sibling_count(heirs) > 0:
                add("ibu", 1, SIXTH, "ada saudara")
            else:
                add("ibu", 1, THIRD, "tanpa keturunan & saudara")
        if heirs.ayah > 0 and descendant:
            add("ayah", 1, SIXTH, "ada keturunan")

    # -----------------------
    # 3) Anak & Cucu Perempuan
    # -----------------------
    if heirs.anak_perempuan > 0 and heirs.anak_laki == 0:
        add("anak_perempuan", heirs.anak_perempuan, _one_or_group(heirs.anak_perempuan),
            "tanpa anak laki-laki")

    if (heirs.cucu_perempuan > 0 and heirs.anak_laki == 0
            and heirs.anak_perempuan == 0 and heirs.cucu_laki == 0):
        add("cucu_perempuan", heirs.cucu_perempuan, _one_or_group(heirs.cucu_perempuan),
            "tanpa anak dan cucu laki-laki")

    # -----------------------
    # 4) Kakek & Nenek
    # -----------------------
    if heirs.kakek_ayah > 0 and heirs.ayah == 0 and descendant:
        add("kakek_ayah", 1, SIXTH, "ada keturunan dan ayah tiada")

    if heirs.ibu == 0:
        add("nenek_ayah", heirs.nenek_ayah, SIXTH, "ibu tiada")
        add("nenek_ibu", heirs.nenek_ibu, SIXTH, "ibu tiada")

    # -----------------------
    # 5) Saudari kandung / seayah (tanpa keturunan, ayah & saudara lk)
    # -----------------------
    no_agnate_above = not descendant and heirs.ayah == 0 and heirs.kakek_ayah == 0
    if (heirs.saudara_perempuan_kandung > 0 and no_agnate_above
            and heirs.saudara_laki_kandung == 0):
        add("saudara_perempuan_kandung", heirs.saudara_perempuan_kandung,
            _one_or_group(heirs.saudara_perempuan_kandung),
            "tanpa keturunan, ayah/kakek & saudara laki-laki kandung")

    if (heirs.saudara_perempuan_seayah > 0 and no_agnate_above
            and heirs.saudara_laki_kandung == 0 and heirs.saudara_perempuan_kandung == 0
            and heirs.saudara_laki_seayah == 0):
        add("saudara_perempuan_seayah", heirs.saudara_perempuan_seayah,
            _one_or_group(heirs.saudara_perempuan_seayah),
            "tanpa keturunan, ayah/kakek, saudara kandung & saudara laki-laki seayah")

    # -----------------------
    # 6) Saudara seibu – lintas gender, rata bagi
    # -----------------------
    total_li_umm = maternal_sibling_count(heirs)
    if total_li_umm > 0:
        group = SIXTH if total_li_umm == 1 else THIRD
        seibu = [("saudara_laki_seibu", heirs.saudara_laki_seibu),
                 ("saudara_perempuan_seibu", heirs.saudara_perempuan_seibu)]
        results.extend(_shared_fard(seibu, group, net_estate))
        notes.append(f"Saudara seibu ({total_li_umm} orang): {group} bersama, dibagi rata lintas gender")

    logger.debug("Furudh: %s", [(r.type, str(r.portion)) for r in results])
    return results, notes


# =========================
# Penentu 'ashobah (tingkat terdekat mengambil seluruh sisa)
# =========================
def determine_ashobah(heirs: HeirCounts) -> List[AsabahMember]:
    """
    Kelompok 'ashobah yang berhak atas sisa. Hanya tingkat terdekat yang
    tidak kosong yang mengambil sisa; laki-laki berbobot 2, perempuan 1.
    Urutan anggota menentukan siapa yang menerima sisa pembulatan (terakhir).
    """
    descendant = has_descendant(heirs)
    female_desc = has_female_descendant(heirs)

    tiers: List[List[AsabahMember]] = [
        # Anak laki-laki (+ anak perempuan, bil-ghair)
        [("anak_laki", heirs.anak_laki, 2), ("anak_perempuan", heirs.anak_perempuan, 1)]
        if heirs.anak_laki > 0 else [],
        # Cucu laki-laki (+ cucu perempuan)
        [("cucu_laki", heirs.cucu_laki, 2), ("cucu_perempuan", heirs.cucu_perempuan, 1)]
        if heirs.cucu_laki > 0 else [],
        # Ayah: tanpa keturunan sama sekali (termasuk Gharrawain)
        [("ayah", 1, 1)] if heirs.ayah > 0 and not descendant else [],
        # Kakek: ayah tiada, tanpa keturunan
        [("kakek_ayah", 1, 1)] if heirs.kakek_ayah > 0 and heirs.ayah == 0 and not descendant else [],
        # Saudara laki-laki kandung (+ saudari kandung)
        [("saudara_laki_kandung", heirs.saudara_laki_kandung, 2),
         ("saudara_perempuan_kandung", heirs.saudara_perempuan_kandung, 1)]
        if heirs.saudara_laki_kandung > 0 else [],
        # Saudari kandung ma'a al-ghair (bersama anak/cucu perempuan)
        [("saudara_perempuan_kandung", heirs.saudara_perempuan_kandung, 1)]
        if heirs.saudara_perempuan_kandung > 0 and female_desc else [],
        # Saudara laki-laki seayah (+ saudari seayah)
        [("saudara_laki_seayah", heirs.saudara_laki_seayah, 2),
         ("saudara_perempuan_seayah", heirs.saudara_perempuan_seayah, 1)]
        if heirs.saudara_laki_seayah > 0 else [],
        # Saudari seayah ma'a al-ghair
        [("saudara_perempuan_seayah", heirs.saudara_perempuan_seayah, 1)]
        if heirs.saudara_perempuan_seayah > 0 and female_desc else [],
        # 'Ashobah jauh
        [("keponakan_laki", heirs.keponakan_laki, 2)] if heirs.keponakan_laki > 0 else [],
        [("paman_kandung", heirs.paman_kandung, 2)] if heirs.paman_kandung > 0 else [],
        [("paman_seayah", heirs.paman_seayah, 2)] if heirs.paman_seayah > 0 else [],
    ]

    for tier in tiers:
        members = [m for m in tier if m[1] > 0]
        if members:
            return members
    return []
