# app/math/ashl.py

from fractions import Fraction
from typing import List

from app.math.rational import asl_masalah, gcd, lcm, to_siham
from schemas import AshlInfo, ComparisonItem


def bandingkan(a: int, b: int) -> ComparisonItem:
    """
    Bandingkan dua penyebut furudh untuk menentukan:
    - Mumatsalah (sama)
    - Mudakholah (salah satu masuk ke lainnya)
    - Muwafaqoh (ada faktor persekutuan)
    - Mubayanah (berbeda total)
    """
    if a == b:
        relation = "Mumatsalah"
    elif a % b == 0 or b % a == 0:
        relation = "Mudakholah"
    elif gcd(a, b) > 1:
        relation = "Muwafaqoh"
    else:
        relation = "Mubayanah"

    return ComparisonItem(a=a, b=b, relation=relation, lcm=lcm(a, b))


def compute_ashl(fractions: List[Fraction]) -> AshlInfo:
    """
    Menentukan Aslul Mas'alah dari daftar pecahan furudh.
    Langkah:
    1. Ambil penyebut yang berbeda
    2. Bandingkan dua-dua untuk tentukan jenis hubungan
    3. Cari KPK sebagai Aslul Mas'alah
    4. Nyatakan setiap furudh sebagai saham atas Aslul Mas'alah
    """
    if not fractions:
        # Tidak ada furudh → AM = 1
        return AshlInfo(asl_masalah=1, siham=[], total_siham=0, comparisons=[])

    denominators: List[int] = []
    for f in fractions:
        if f.denominator not in denominators:
            denominators.append(f.denominator)

    comparisons: List[ComparisonItem] = []
    for i in range(len(denominators)):
        for j in range(i + 1, len(denominators)):
            comparisons.append(bandingkan(denominators[i], denominators[j]))

    asl = asl_masalah(fractions)
    siham = to_siham(fractions, asl)

    return AshlInfo(
        asl_masalah=asl,
        siham=siham,
        total_siham=sum(siham),
        comparisons=comparisons,
    )
