# Di dalam file: validation.py

from typing import List

from app.rules.madhab import KNOWN_MADZHAB
from schemas import HEIR_FIELDS, CalculationInput, HeirCounts, ValidationIssue

# Golongan yang hanya boleh 0 atau 1 orang
ZERO_ONE_FIELDS = ["suami", "ayah", "ibu", "kakek_ayah", "nenek_ayah", "nenek_ibu"]
MAX_ISTRI = 4


def _issue(field: str, message: str, code: str) -> ValidationIssue:
    return ValidationIssue(field=field, message=message, code=code)


def validate_heir_counts(heirs: HeirCounts) -> List[ValidationIssue]:
    """Cek konsistensi jumlah ahli waris. Semua pemeriksaan dijalankan."""
    errors: List[ValidationIssue] = []

    if heirs.suami >= 1 and heirs.istri >= 1:
        errors.append(_issue("heirs", "Tidak boleh ada suami dan istri bersamaan",
                             "INVALID_SPOUSE_COMBINATION"))

    for field in HEIR_FIELDS:
        if heirs.count(field) < 0:
            errors.append(_issue(f"heirs.{field}", f"Jumlah {field} tidak boleh negatif",
                                 "NEGATIVE_HEIR_COUNT"))

    for field in ZERO_ONE_FIELDS:
        if heirs.count(field) not in (0, 1):
            errors.append(_issue(f"heirs.{field}", f"{field} harus bernilai 0 atau 1",
                                 "INVALID_ZERO_ONE_VALUE"))

    if not 0 <= heirs.istri <= MAX_ISTRI:
        errors.append(_issue("heirs.istri", f"Jumlah istri harus antara 0 dan {MAX_ISTRI}",
                             "INVALID_WIFE_COUNT"))

    return errors


def validate(calculation_input: CalculationInput) -> List[ValidationIssue]:
    """
    Validasi input perhitungan. Mengembalikan SEMUA pelanggaran
    (list kosong berarti valid); pemanggil yang memutuskan apakah fatal.
    """
    errors: List[ValidationIssue] = []
    total_assets = calculation_input.total_assets
    utang = calculation_input.utang
    wasiat = calculation_input.wasiat_fraction

    # Harta & utang
    if total_assets < 0:
        errors.append(_issue("total_assets", "Total aset tidak boleh negatif", "NEGATIVE_ASSETS"))
    if utang < 0:
        errors.append(_issue("utang", "Utang tidak boleh negatif", "NEGATIVE_DEBT"))
    if utang > total_assets:
        errors.append(_issue("utang", "Utang tidak boleh melebihi total aset", "DEBT_EXCEEDS_ASSETS"))

    # Wasiat (maks. 1/3)
    if wasiat.den <= 0:
        errors.append(_issue("wasiat_fraction.den", "Penyebut wasiat harus positif",
                             "INVALID_WASIAT_DENOMINATOR"))
    if wasiat.num < 0:
        errors.append(_issue("wasiat_fraction.num", "Pembilang wasiat tidak boleh negatif",
                             "NEGATIVE_WASIAT"))
    if wasiat.num * 3 > wasiat.den:
        errors.append(_issue("wasiat_fraction", "Wasiat tidak boleh melebihi 1/3 harta bersih",
                             "WASIAT_EXCEEDS_ONE_THIRD"))

    errors.extend(validate_heir_counts(calculation_input.heirs))

    madzhab = calculation_input.madzhab
    if madzhab is not None and madzhab not in KNOWN_MADZHAB:
        errors.append(_issue("madzhab", f"Madzhab '{madzhab}' tidak dikenal", "UNKNOWN_MADZHAB"))

    return errors
