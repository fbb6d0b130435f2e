# app/text/terbilang.py

from typing import Dict, List, Tuple

# Angka 0-11 (0 kosong: dipakai sebagai penyambung)
_WORDS = [
    "", "satu", "dua", "tiga", "empat", "lima",
    "enam", "tujuh", "delapan", "sembilan", "sepuluh", "sebelas",
]

# Skala besar, dari yang terbesar
_SCALES: List[Tuple[int, str]] = [
    (10 ** 33, "desiliun"),
    (10 ** 30, "noniliun"),
    (10 ** 27, "oktiliun"),
    (10 ** 24, "septiliun"),
    (10 ** 21, "sekstiliun"),
    (10 ** 18, "kuantiliun"),
    (10 ** 15, "kuadriliun"),
    (10 ** 12, "triliun"),
    (10 ** 9, "miliar"),
    (10 ** 6, "juta"),
]

MAX_TERBILANG = 10 ** 36 - 1

HEIR_DESCRIPTIONS: Dict[str, str] = {
    "suami": "suami",
    "istri": "istri",
    "ayah": "ayah",
    "ibu": "ibu",
    "kakek_ayah": "kakek dari pihak ayah",
    "nenek_ayah": "nenek dari pihak ayah",
    "nenek_ibu": "nenek dari pihak ibu",
    "anak_laki": "anak laki-laki",
    "anak_perempuan": "anak perempuan",
    "cucu_laki": "cucu laki-laki dari anak laki-laki",
    "cucu_perempuan": "cucu perempuan dari anak laki-laki",
    "saudara_laki_kandung": "saudara laki-laki kandung",
    "saudara_perempuan_kandung": "saudara perempuan kandung",
    "saudara_laki_seayah": "saudara laki-laki seayah",
    "saudara_perempuan_seayah": "saudara perempuan seayah",
    "saudara_laki_seibu": "saudara laki-laki seibu",
    "saudara_perempuan_seibu": "saudara perempuan seibu",
    "keponakan_laki": "keponakan laki-laki dari saudara laki-laki kandung",
    "paman_kandung": "paman kandung",
    "paman_seayah": "paman seayah",
}


def _convert(value: int) -> str:
    # value > 0
    if value < 12:
        return _WORDS[value]
    if value < 20:
        return f"{_WORDS[value - 10]} belas"
    if value < 100:
        puluh, sisa = divmod(value, 10)
        head = f"{_WORDS[puluh]} puluh"
        return f"{head} {_convert(sisa)}" if sisa else head
    if value < 1000:
        ratus, sisa = divmod(value, 100)
        head = "seratus" if ratus == 1 else f"{_WORDS[ratus]} ratus"
        return f"{head} {_convert(sisa)}" if sisa else head
    if value < 10 ** 6:
        ribu, sisa = divmod(value, 1000)
        head = "seribu" if ribu == 1 else f"{_convert(ribu)} ribu"
        return f"{head} {_convert(sisa)}" if sisa else head

    for base, name in _SCALES:
        if value >= base:
            prefix, sisa = divmod(value, base)
            head = f"{_convert(prefix)} {name}"
            return f"{head} {_convert(sisa)}" if sisa else head
    raise AssertionError("unreachable")


def terbilang(n: int) -> str:
    """
    Ubah bilangan bulat menjadi kata-kata bahasa Indonesia.

    >>> terbilang(1500000)
    'satu juta lima ratus ribu'
    >>> terbilang(-123)
    'minus seratus dua puluh tiga'
    """
    if n < 0:
        return f"minus {terbilang(-n)}"
    if n == 0:
        return "nol"
    if n > MAX_TERBILANG:
        raise OverflowError("Angka terlalu besar untuk diterbilangkan (maks. 10^36 - 1)")
    return _convert(n)


def terbilang_rupiah(amount: int) -> str:
    return f"{terbilang(amount)} rupiah"


def terbilang_fraction(num: int, den: int) -> str:
    """Pecahan warisan, misal 1/2 → 'satu per dua'."""
    if den == 0:
        raise ZeroDivisionError("Penyebut tidak boleh nol")
    if num == 0:
        return "nol"
    if den == 1:
        return terbilang(num)
    return f"{terbilang(num)} per {terbilang(den)}"


def terbilang_heir_description(heir_type: str, count: int) -> str:
    # Golongan yang tidak dikenal ditulis apa adanya
    description = HEIR_DESCRIPTIONS.get(heir_type, heir_type)
    return f"{terbilang(count)} orang {description}"
