# app/math/rational.py

from fractions import Fraction
from functools import reduce
from math import gcd as _gcd
from typing import Iterable, List

ZERO = Fraction(0, 1)


def gcd(a: int, b: int) -> int:
    """FPB (Euclid), selalu non-negatif."""
    return _gcd(a, b)


def lcm(a: int, b: int) -> int:
    """KPK; lcm(0, x) == 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b) * b)


def reduce_fraction(num: int, den: int) -> Fraction:
    """
    Sederhanakan pecahan num/den:
    - tanda dipindah ke pembilang (penyebut selalu positif)
    - dibagi FPB sampai bentuk paling sederhana
    - nol selalu berbentuk 0/1
    Penyebut nol adalah kesalahan pemrograman → ZeroDivisionError.
    """
    if den == 0:
        raise ZeroDivisionError("Denominator cannot be zero")
    if num == 0:
        return ZERO
    g = gcd(num, den)
    num, den = num // g, den // g
    if den < 0:
        num, den = -num, -den
    return Fraction(num, den)


def add_fractions(f1: Fraction, f2: Fraction) -> Fraction:
    common_den = lcm(f1.denominator, f2.denominator)
    num1 = f1.numerator * (common_den // f1.denominator)
    num2 = f2.numerator * (common_den // f2.denominator)
    return reduce_fraction(num1 + num2, common_den)


def sum_fractions(fractions: Iterable[Fraction]) -> Fraction:
    return reduce(add_fractions, fractions, ZERO)


def scale(base: int, fraction: Fraction) -> int:
    """
    base × fraction dengan pembagian bulat ke bawah (tidak pernah dibulatkan).
    Kekurangan akibat pembulatan diselesaikan oleh mesin perhitungan
    (ahli waris terakhir menerima sisa persis).
    """
    if base < 0:
        raise ValueError("Base amount cannot be negative")
    return base * fraction.numerator // fraction.denominator


def to_decimal_string(fraction: Fraction, precision: int = 6) -> str:
    """Pembagian bersusun, paling banyak `precision` digit di belakang koma."""
    sign = "-" if fraction < 0 else ""
    num, den = abs(fraction.numerator), fraction.denominator
    whole, remainder = divmod(num, den)
    if remainder == 0:
        return f"{sign}{whole}"

    digits = []
    for _ in range(precision):
        if remainder == 0:
            break
        remainder *= 10
        digit, remainder = divmod(remainder, den)
        digits.append(str(digit))
    return f"{sign}{whole}.{''.join(digits)}"


def asl_masalah(fractions: Iterable[Fraction]) -> int:
    """Ashlul mas'alah: KPK semua penyebut (1 bila tidak ada pecahan)."""
    asl = 1
    for f in fractions:
        asl = lcm(asl, f.denominator)
    return asl


def to_siham(fractions: Iterable[Fraction], asl: int) -> List[int]:
    """Nyatakan tiap pecahan sebagai saham (pembilang) atas ashlul mas'alah."""
    return [f.numerator * (asl // f.denominator) for f in fractions]
