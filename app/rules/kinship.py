# app/rules/kinship.py

from schemas import HeirCounts

# =========================
# Predikat keberadaan ahli waris
# =========================


def has_male_descendant(heirs: HeirCounts) -> bool:
    return heirs.anak_laki > 0 or heirs.cucu_laki > 0


def has_female_descendant(heirs: HeirCounts) -> bool:
    return heirs.anak_perempuan > 0 or heirs.cucu_perempuan > 0


def has_descendant(heirs: HeirCounts) -> bool:
    """Anak atau cucu dari anak laki-laki (far'u waris)."""
    return has_male_descendant(heirs) or has_female_descendant(heirs)


def has_spouse(heirs: HeirCounts) -> bool:
    return heirs.suami > 0 or heirs.istri > 0


def sibling_count(heirs: HeirCounts) -> int:
    """Jumlah seluruh saudara/saudari (kandung, seayah, seibu)."""
    return (
        heirs.saudara_laki_kandung + heirs.saudara_perempuan_kandung
        + heirs.saudara_laki_seayah + heirs.saudara_perempuan_seayah
        + heirs.saudara_laki_seibu + heirs.saudara_perempuan_seibu
    )


def maternal_sibling_count(heirs: HeirCounts) -> int:
    return heirs.saudara_laki_seibu + heirs.saudara_perempuan_seibu
