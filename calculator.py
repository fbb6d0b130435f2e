# calculator.py

from __future__ import annotations

import logging
from fractions import Fraction
from typing import List, Optional, Tuple

from app.math.ashl import compute_ashl
from app.math.rational import reduce_fraction, scale, sum_fractions
from app.rules.engine import AsabahMember, determine_ashobah, determine_furudh
from app.rules.hajb import apply_hajb, blocked_heirs
from app.rules.madhab import HEIR_NAMES, SAUDARA_SEIBU, get_config
from app.special.dhawil_arham import calculate_dhuwu
from app.special.router import apply_special_cases
from errors import ConfigError, InputValidationError
from schemas import (
    AshlInfo,
    CalculationInput,
    CalculationResult,
    CalculationSummary,
    FaraidhConfig,
    HeirResult,
    ValidationIssue,
)
from validation import validate

logger = logging.getLogger(__name__)

SPOUSES = ("suami", "istri")

# --------------------------
# AUL yang umum dijumpai (kitab)
# --------------------------
VALID_AUL = {
    6: {7, 8, 9, 10},
    12: {13, 15, 17},
    24: {27},
}


# --------------------------
# Helper umum
# --------------------------
def _individual(total: int, count: int) -> int:
    return total // count if count > 1 else total


def _resolve_config(calculation_input: CalculationInput,
                    config: Optional[FaraidhConfig],
                    errors: List[ValidationIssue]) -> Optional[FaraidhConfig]:
    """Pilih tabel aturan; konflik madzhab dicatat sebagai pelanggaran validasi."""
    madzhab = calculation_input.madzhab
    if config is not None:
        if madzhab is not None and madzhab != config.madzhab:
            errors.append(ValidationIssue(
                field="madzhab",
                message=f"Madzhab '{madzhab}' berbeda dengan konfigurasi '{config.madzhab}'",
                code="MADZHAB_MISMATCH",
            ))
        return config

    if any(e.code == "UNKNOWN_MADZHAB" for e in errors):
        return None
    try:
        return get_config(madzhab)
    except ConfigError as exc:
        errors.append(ValidationIssue(field="madzhab", message=str(exc),
                                      code="UNSUPPORTED_MADZHAB"))
        return None


# --------------------------
# AUL
# --------------------------
def _apply_awl(fard_results: List[HeirResult], ashl_info: AshlInfo, net_estate: int,
               notes: List[str]) -> List[HeirResult]:
    """
    Total furudh melebihi harta: Ashlul Mas'alah dinaikkan menjadi total saham,
    setiap bagian = saham / total saham. Yang terakhir menyerap sisa pembulatan.
    """
    asl = ashl_info.asl_masalah
    total_siham = ashl_info.total_siham
    notes.append(f"Terjadi Aul: total saham {total_siham} > AM awal {asl}")
    if asl in VALID_AUL and total_siham in VALID_AUL[asl]:
        notes.append("Aul ini adalah kasus klasik yang umum")
    notes.append(f"Ashlul Mas'alah diganti: dari {asl} menjadi AM akhir {total_siham}")

    adjusted: List[HeirResult] = []
    distributed = 0
    last = len(fard_results) - 1
    for idx, (r, siham) in enumerate(zip(fard_results, ashl_info.siham)):
        portion = reduce_fraction(siham, total_siham)
        total = net_estate - distributed if idx == last else scale(net_estate, portion)
        distributed += total
        adjusted.append(r.model_copy(update={
            "total_share": total,
            "individual_share": _individual(total, r.count),
            "portion": portion,
        }))
        notes.append(f"{HEIR_NAMES[r.type]} = {siham} × {net_estate:,} ÷ {total_siham} = {total:,}")
    return adjusted


# --------------------------
# 'ASHOBAH (campur 2:1)
# --------------------------
def _distribute_ashobah(members: List[AsabahMember], residual: int, total_fard: Fraction,
                        notes: List[str]) -> List[HeirResult]:
    """
    Sisa harta dibagi ke satu kelompok 'ashobah dengan bobot per kepala
    (laki-laki 2, perempuan 1). Anggota terakhir menyerap sisa pembulatan.
    """
    total_bobot = sum(count * weight for _, count, weight in members)
    residue_fraction = 1 - total_fard

    results: List[HeirResult] = []
    distributed = 0
    detail = []
    last = len(members) - 1
    for idx, (type_, count, weight) in enumerate(members):
        bobot = count * weight
        if idx == last:
            total = residual - distributed
        else:
            total = residual * bobot // total_bobot
        distributed += total
        results.append(HeirResult(
            type=type_,
            count=count,
            total_share=total,
            individual_share=_individual(total, count),
            portion=residue_fraction * bobot / total_bobot,
            category="asabah",
        ))
        detail.append(f"{HEIR_NAMES[type_]} bobot {bobot} → {total:,}")

    if len(members) == 1:
        notes.append(f"{HEIR_NAMES[members[0][0]]} mendapat sisa {residual:,} sebagai Ashobah")
    else:
        notes.append(f"Ashobah campur (2:1): total bobot = {total_bobot}; " + "; ".join(detail))
    return results


# --------------------------
# RADD
# --------------------------
def _apply_radd(fard_results: List[HeirResult], residual: int,
                total_fard: Fraction, config: FaraidhConfig,
                notes: List[str]) -> Optional[Tuple[List[HeirResult], List[HeirResult]]]:
    """
    Kembalikan sisa kepada dzawil furudh sebanding pembilang furudh masing-masing.
    Pasangan tidak ikut kecuali konfigurasi mengizinkan atau ia satu-satunya
    yang tersisa. Hasil: (fard_results yang sudah ditambah radd, porsi radd saja),
    atau None bila tidak ada yang berhak.
    """
    if all(r.type in SAUDARA_SEIBU for r in fard_results):
        notes.append("Ahli waris hanya saudara seibu: sisa tidak di-radd-kan")
        return None

    indexed = list(enumerate(fard_results))
    eligible = [(i, r) for i, r in indexed if config.is_residue_eligible(r.type)]
    if not any(r.type not in SPOUSES for _, r in eligible):
        # tidak ada dzawil furudh selain pasangan → sisa kembali ke pasangan
        spouses = [(i, r) for i, r in indexed if r.type in SPOUSES]
        if spouses:
            eligible = spouses
            notes.append("Tidak ada ahli waris radd selain pasangan; sisa dikembalikan kepada pasangan")
    if not eligible:
        return None

    total_w = sum(r.portion.numerator for _, r in eligible)
    residue_fraction = 1 - total_fard
    updated = list(fard_results)
    radd_parts: List[HeirResult] = []
    distributed = 0
    last = len(eligible) - 1
    for pos, (i, r) in enumerate(eligible):
        w = r.portion.numerator
        amount = residual - distributed if pos == last else residual * w // total_w
        distributed += amount
        radd_portion = residue_fraction * w / total_w
        radd_parts.append(HeirResult(
            type=r.type,
            count=r.count,
            total_share=amount,
            individual_share=_individual(amount, r.count),
            portion=radd_portion,
            category="radd",
        ))
        total = r.total_share + amount
        updated[i] = r.model_copy(update={
            "total_share": total,
            "individual_share": _individual(total, r.count),
            "portion": r.portion + radd_portion,
        })
        notes.append(f"Radd: {HEIR_NAMES[r.type]} +{amount:,} ({w}/{total_w} dari sisa {residual:,})")
    return updated, radd_parts


# --------------------------
# Kalkulasi utama
# --------------------------
def calculate_faraidh(calculation_input: CalculationInput,
                      config: Optional[FaraidhConfig] = None) -> CalculationResult:
    """
    Hitung pembagian waris lengkap: utang & wasiat → hajb → kasus istimewa →
    furudh → aul / 'ashobah / radd → rekonsiliasi. Input yang tidak valid
    memunculkan InputValidationError berisi seluruh pelanggaran.
    """
    errors = validate(calculation_input)
    config = _resolve_config(calculation_input, config, errors)
    if errors:
        logger.debug("Input tidak valid: %s", [e.code for e in errors])
        raise InputValidationError(errors)

    notes: List[str] = []
    heirs = calculation_input.heirs

    # 1) Utang & wasiat
    utang = calculation_input.utang
    after_debt = calculation_input.total_assets - utang
    wasiat = scale(after_debt, calculation_input.wasiat_fraction.to_fraction())
    net_estate = after_debt - wasiat
    notes.append(
        f"Harta bersih = {calculation_input.total_assets:,} - utang {utang:,}"
        f" - wasiat {wasiat:,} = {net_estate:,}"
    )

    # 2) Hajb
    eligible = apply_hajb(heirs, config)
    ibtal = blocked_heirs(heirs, eligible)
    for name in ibtal:
        notes.append(f"{HEIR_NAMES[name]} mahjūb (terhalang).")

    # 3) Kasus istimewa
    calc_mode, special_notes = apply_special_cases(eligible)
    notes.extend(special_notes)
    is_gharrawain = calc_mode["mode"] == "gharrawain"

    # 4) Furudh
    notes.append("Menentukan furudh ahli waris sesuai ketentuan syar'i")
    fard_results, fard_notes = determine_furudh(eligible, net_estate, calc_mode)
    notes.extend(fard_notes)

    fractions = [r.portion for r in fard_results]
    total_fard = sum_fractions(fractions)
    ashl_info = compute_ashl(fractions)
    if fard_results:
        notes.append(f"Menentukan Ashlul Mas'alah: {ashl_info.asl_masalah}")
        for c in ashl_info.comparisons:
            notes.append(f"Penyebut {c.a} & {c.b} = {c.relation}")

    asabah_results: List[HeirResult] = []
    radd_results: Optional[List[HeirResult]] = None
    dhuwu_results: Optional[List[HeirResult]] = None
    awl_applied = False
    awl_ratio: Optional[Fraction] = None
    radd_applied = False

    # 5) Aul bila total furudh > 1
    if total_fard > 1:
        fard_results = _apply_awl(fard_results, ashl_info, net_estate, notes)
        awl_applied = True
        awl_ratio = reduce_fraction(ashl_info.asl_masalah, ashl_info.total_siham)
    else:
        residual = net_estate - sum(r.total_share for r in fard_results)

        # 6) 'Ashobah
        if residual > 0:
            members = determine_ashobah(eligible)
            if members:
                asabah_results = _distribute_ashobah(members, residual, total_fard, notes)
                residual = 0

        # 7) Radd
        if residual > 0 and fard_results:
            radd = _apply_radd(fard_results, residual, total_fard, config, notes)
            if radd is not None:
                fard_results, radd_results = radd
                radd_applied = True
                residual = 0

        # 8) Dzawil arham
        if residual > 0:
            dhuwu_results = calculate_dhuwu(eligible, residual)
            if not dhuwu_results:
                notes.append(f"Sisa {residual:,} tidak terbagi (dzawil arham belum dimodelkan)")

    distributed_to_heirs = sum(r.total_share for r in fard_results)
    distributed_to_heirs += sum(r.total_share for r in asabah_results)
    distributed_to_heirs += sum(r.total_share for r in dhuwu_results or [])
    total_distributed = utang + wasiat + distributed_to_heirs
    undistributed = calculation_input.total_assets - total_distributed
    if undistributed:
        logger.warning("Sisa harta %s tidak terbagi", undistributed)

    if awl_applied:
        method = "awl"
    elif radd_applied:
        method = "radd"
    elif dhuwu_results:
        method = "dhuwu"
    else:
        method = "normal"
    logger.info("Metode pembagian: %s (harta bersih %s)", method, net_estate)

    summary = CalculationSummary(
        asl_masalah=ashl_info.total_siham if awl_applied else ashl_info.asl_masalah,
        total_siham=ashl_info.total_siham,
        distribution_method=method,
    )

    return CalculationResult(
        utang=utang,
        wasiat=wasiat,
        net_estate=net_estate,
        fard_results=fard_results,
        asabah_results=asabah_results,
        radd_results=radd_results,
        dhuwu_results=dhuwu_results,
        awl_applied=awl_applied,
        awl_ratio=awl_ratio,
        ibtal_applied=ibtal,
        radd_applied=radd_applied,
        is_gharrawain=is_gharrawain,
        total_distributed=total_distributed,
        undistributed=undistributed,
        calculation_summary=summary,
        notes=notes,
    )
