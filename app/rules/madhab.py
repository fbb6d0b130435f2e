# app/rules/madhab.py

from typing import Dict, List, Optional

from errors import ConfigError
from schemas import FaraidhConfig, HeirInfo

KNOWN_MADZHAB = ("syafii", "hanafi", "maliki", "hanbali")

SAUDARA_KANDUNG_SEAYAH = [
    "saudara_laki_kandung",
    "saudara_perempuan_kandung",
    "saudara_laki_seayah",
    "saudara_perempuan_seayah",
]
SAUDARA_SEIBU = ["saudara_laki_seibu", "saudara_perempuan_seibu"]

# =========================
# Hajb (penghalang) madzhab Syafi'i
# Hanya penghalangan mutlak; syarat yang bergantung pada keadaan lain
# (ibu dengan nenek, keturunan dengan saudara) diperiksa di tahap furudh
# dan 'ashobah. Mesin tidak menghitung penutupan transitif sendiri.
# =========================
SYAFII_IBTAL_RULES: Dict[str, List[str]] = {
    "anak_laki": ["cucu_laki", "cucu_perempuan"],
    "anak_perempuan": ["cucu_laki", "cucu_perempuan"],
    "ayah": ["kakek_ayah", *SAUDARA_KANDUNG_SEAYAH, "paman_kandung", "paman_seayah"],
    "kakek_ayah": [*SAUDARA_KANDUNG_SEAYAH],
    "saudara_laki_kandung": ["saudara_laki_seayah", "saudara_perempuan_seayah", "keponakan_laki"],
    "saudara_perempuan_kandung": ["saudara_laki_seayah", "saudara_perempuan_seayah"],
}

# Dzawil furudh yang menerima radd (pasangan tidak termasuk)
SYAFII_RADD_ELIGIBLE: List[str] = [
    "ibu",
    "nenek_ayah",
    "nenek_ibu",
    "anak_perempuan",
    "cucu_perempuan",
    "saudara_perempuan_kandung",
    "saudara_perempuan_seayah",
    "saudara_laki_seibu",
    "saudara_perempuan_seibu",
]

DEFAULT_CONFIG = FaraidhConfig(
    locale="id-ID",
    madzhab="syafii",
    currency="IDR",
    radd_for_spouse=False,
    ibtal_rules=SYAFII_IBTAL_RULES,
    radd_eligible=SYAFII_RADD_ELIGIBLE,
)

_REGISTRY: Dict[str, FaraidhConfig] = {"syafii": DEFAULT_CONFIG}


def get_config(madzhab: Optional[str] = None) -> FaraidhConfig:
    """Ambil tabel aturan madzhab. Saat ini hanya Syafi'i yang dimodelkan."""
    if madzhab is None:
        return DEFAULT_CONFIG
    try:
        return _REGISTRY[madzhab]
    except KeyError:
        raise ConfigError(f"Madzhab '{madzhab}' belum didukung") from None


# =========================
# Katalog nama ahli waris (sinkron dengan HeirCounts)
# =========================
HEIR_CATALOG: List[HeirInfo] = [
    HeirInfo(name="suami", name_id="Suami", name_ar="زوج"),
    HeirInfo(name="istri", name_id="Istri", name_ar="زوجة"),
    HeirInfo(name="ayah", name_id="Ayah", name_ar="أب"),
    HeirInfo(name="ibu", name_id="Ibu", name_ar="أم"),
    HeirInfo(name="kakek_ayah", name_id="Kakek", name_ar="جد"),
    HeirInfo(name="nenek_ayah", name_id="Nenek dari Ayah", name_ar="جدة من الأب"),
    HeirInfo(name="nenek_ibu", name_id="Nenek dari Ibu", name_ar="جدة من الأم"),
    HeirInfo(name="anak_laki", name_id="Anak Laki-laki", name_ar="ابن"),
    HeirInfo(name="anak_perempuan", name_id="Anak Perempuan", name_ar="بنت"),
    HeirInfo(name="cucu_laki", name_id="Cucu Laki-laki", name_ar="ابن ابن"),
    HeirInfo(name="cucu_perempuan", name_id="Cucu Perempuan", name_ar="بنت ابن"),
    HeirInfo(name="saudara_laki_kandung", name_id="Saudara Laki-laki Kandung", name_ar="أخ لأبوين"),
    HeirInfo(name="saudara_perempuan_kandung", name_id="Saudari Kandung", name_ar="أخت لأبوين"),
    HeirInfo(name="saudara_laki_seayah", name_id="Saudara Laki-laki Seayah", name_ar="أخ لأب"),
    HeirInfo(name="saudara_perempuan_seayah", name_id="Saudari Seayah", name_ar="أخت لأب"),
    HeirInfo(name="saudara_laki_seibu", name_id="Saudara Laki-laki Seibu", name_ar="أخ لأم"),
    HeirInfo(name="saudara_perempuan_seibu", name_id="Saudari Seibu", name_ar="أخت لأم"),
    HeirInfo(name="keponakan_laki", name_id="Keponakan Laki-laki (dari Sdr Lk Kandung)", name_ar="ابن أخ لأبوين"),
    HeirInfo(name="paman_kandung", name_id="Paman Kandung", name_ar="عم لأبوين"),
    HeirInfo(name="paman_seayah", name_id="Paman Seayah", name_ar="عم لأب"),
]

HEIR_NAMES: Dict[str, str] = {h.name: h.name_id for h in HEIR_CATALOG}
