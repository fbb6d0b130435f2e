# Di dalam file: schemas.py

from fractions import Fraction
from typing import Annotated, Dict, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, WithJsonSchema


def _parse_fraction(value):
    # Terima "1/2", int, atau Fraction (hasil dump JSON dibaca ulang)
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (str, int)):
        return Fraction(value)
    return value


# Pecahan eksak (fractions.Fraction), diserialisasi sebagai "num/den"
FractionField = Annotated[
    Fraction,
    BeforeValidator(_parse_fraction),
    PlainSerializer(lambda f: f"{f.numerator}/{f.denominator}", return_type=str),
    WithJsonSchema({"type": "string", "examples": ["1/2"]}),
]

HeirCategory = Literal["fard", "asabah", "radd", "dhuwu"]
DistributionMethod = Literal["normal", "awl", "radd", "dhuwu"]


# --- Pecahan mentah dari pengguna (boleh tidak valid, dicek di validation) ---
class FractionInput(BaseModel):
    num: int = 0
    den: int = 1

    def to_fraction(self) -> Fraction:
        return Fraction(self.num, self.den)


# --- Jumlah ahli waris per golongan ---
class HeirCounts(BaseModel):
    """
    Jumlah orang per golongan ahli waris. Urutan field adalah urutan baku
    yang dipakai di seluruh perhitungan (misalnya daftar mahjub).
    Batasan nilai (0/1, istri maks. 4) dicek oleh validation.validate,
    bukan oleh model ini.
    """
    model_config = ConfigDict(frozen=True)

    # Pasangan
    suami: int = 0
    istri: int = 0
    # Orang tua
    ayah: int = 0
    ibu: int = 0
    # Kakek & nenek shahih
    kakek_ayah: int = 0
    nenek_ayah: int = 0
    nenek_ibu: int = 0
    # Keturunan
    anak_laki: int = 0
    anak_perempuan: int = 0
    cucu_laki: int = 0            # dari anak laki-laki
    cucu_perempuan: int = 0       # dari anak laki-laki
    # Saudara
    saudara_laki_kandung: int = 0
    saudara_perempuan_kandung: int = 0
    saudara_laki_seayah: int = 0
    saudara_perempuan_seayah: int = 0
    saudara_laki_seibu: int = 0
    saudara_perempuan_seibu: int = 0
    # Ashobah jauh
    keponakan_laki: int = 0       # dari saudara laki-laki kandung
    paman_kandung: int = 0
    paman_seayah: int = 0

    def count(self, name: str) -> int:
        return getattr(self, name)


HEIR_FIELDS: List[str] = list(HeirCounts.model_fields)


# --- Skema Input untuk Kalkulasi ---
class CalculationInput(BaseModel):
    total_assets: int                 # total harta (tirkah) dalam satuan mata uang terkecil
    utang: int = 0
    wasiat_fraction: FractionInput = FractionInput()
    heirs: HeirCounts = HeirCounts()
    madzhab: Optional[str] = None


# --- Skema Output untuk Setiap Golongan Ahli Waris ---
class HeirResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: str                  # nama golongan, misal "istri", "anak_laki"
    count: int
    total_share: int
    individual_share: int      # total_share // count bila count > 1
    portion: FractionField     # bagian dari harta bersih
    category: HeirCategory


class CalculationSummary(BaseModel):
    asl_masalah: int
    total_siham: int
    distribution_method: DistributionMethod


# --- Skema Output Utama ---
class CalculationResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    utang: int
    wasiat: int
    net_estate: int

    fard_results: List[HeirResult]
    asabah_results: List[HeirResult]
    radd_results: Optional[List[HeirResult]] = None
    dhuwu_results: Optional[List[HeirResult]] = None

    awl_applied: bool
    awl_ratio: Optional[FractionField] = None
    ibtal_applied: List[str]
    radd_applied: bool
    is_gharrawain: bool = False

    total_distributed: int
    undistributed: int = 0     # sisa yang tidak terserap (dzawil arham belum dimodelkan)
    calculation_summary: CalculationSummary
    notes: List[str] = []

    def all_results(self) -> List[HeirResult]:
        return [*self.fard_results, *self.asabah_results, *(self.dhuwu_results or [])]


# --- Skema Kesalahan Validasi ---
class ValidationIssue(BaseModel):
    field: str
    message: str
    code: str


# --- Skema Konfigurasi Madzhab ---
class FaraidhConfig(BaseModel):
    """
    Tabel aturan satu madzhab. Nilai ini disuntikkan ke mesin perhitungan,
    sehingga mengganti madzhab cukup dengan mengganti nilai ini.
    """
    model_config = ConfigDict(frozen=True)

    locale: str = "id-ID"
    madzhab: str = "syafii"
    currency: str = "IDR"
    radd_for_spouse: bool = False
    ibtal_rules: Dict[str, List[str]]
    radd_eligible: List[str]

    def blocks(self, category: str) -> frozenset:
        return frozenset(self.ibtal_rules.get(category, ()))

    def is_residue_eligible(self, category: str) -> bool:
        if category in ("suami", "istri"):
            return self.radd_for_spouse
        return category in self.radd_eligible


# --- Skema Katalog Ahli Waris (untuk tampilan) ---
class HeirInfo(BaseModel):
    name: str       # kunci golongan
    name_id: str    # Nama dalam bahasa Indonesia
    name_ar: str    # Nama dalam bahasa Arab


# --- Skema Output dengan Terbilang ---
class HeirResultText(HeirResult):
    description: str
    total_share_text: str
    total_share_formatted: str      # nominal dengan mata uang, mis. "Rp 1.000.000"
    individual_share_text: Optional[str] = None


class TextResults(BaseModel):
    total_assets_text: str
    utang_text: str
    wasiat_text: str
    net_estate_text: str
    net_estate_formatted: str
    heir_results: List[HeirResultText]


class CalculationResultWithText(CalculationResult):
    text_results: TextResults


# --- Skema untuk Perbandingan Penyebut Furudh ---
class ComparisonItem(BaseModel):
    a: int                     # penyebut pertama
    b: int                     # penyebut kedua
    relation: str              # mumatsalah, mudakholah, muwafaqoh, mubayanah
    lcm: int                   # KPK kedua penyebut


# --- Skema untuk Ashlul Mas'alah ---
class AshlInfo(BaseModel):
    asl_masalah: int           # KPK semua penyebut
    siham: List[int]           # saham tiap furudh atas asl_masalah
    total_siham: int
    comparisons: List[ComparisonItem]
