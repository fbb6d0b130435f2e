# Di dalam file: test_terbilang.py

import pytest

from app.rules.madhab import DEFAULT_CONFIG
from app.text.currency import format_currency
from app.text.report import calculate_with_text
from app.text.terbilang import (
    terbilang,
    terbilang_fraction,
    terbilang_heir_description,
    terbilang_rupiah,
)
from schemas import CalculationInput, HeirCounts


@pytest.mark.parametrize("angka, kata", [
    (0, "nol"),
    (7, "tujuh"),
    (11, "sebelas"),
    (15, "lima belas"),
    (20, "dua puluh"),
    (99, "sembilan puluh sembilan"),
    (100, "seratus"),
    (123, "seratus dua puluh tiga"),
    (1000, "seribu"),
    (1500, "seribu lima ratus"),
    (21_000, "dua puluh satu ribu"),
    (1_500_000, "satu juta lima ratus ribu"),
    (2_000_000_000, "dua miliar"),
    (3_000_000_000_000, "tiga triliun"),
    (10 ** 33, "satu desiliun"),
    (-456, "minus empat ratus lima puluh enam"),
])
def test_terbilang(angka, kata):
    assert terbilang(angka) == kata


def test_terbilang_batas_atas():
    assert terbilang(10 ** 36 - 1).startswith("sembilan ratus sembilan puluh sembilan desiliun")
    with pytest.raises(OverflowError):
        terbilang(10 ** 36)


def test_terbilang_rupiah():
    assert terbilang_rupiah(0) == "nol rupiah"
    assert terbilang_rupiah(5_000_000) == "lima juta rupiah"


def test_terbilang_pecahan():
    assert terbilang_fraction(1, 2) == "satu per dua"
    assert terbilang_fraction(2, 3) == "dua per tiga"
    assert terbilang_fraction(4, 1) == "empat"
    assert terbilang_fraction(0, 8) == "nol"
    with pytest.raises(ZeroDivisionError):
        terbilang_fraction(1, 0)


def test_deskripsi_ahli_waris():
    assert terbilang_heir_description("istri", 1) == "satu orang istri"
    assert terbilang_heir_description("anak_laki", 2) == "dua orang anak laki-laki"
    assert terbilang_heir_description("kerabat", 3) == "tiga orang kerabat"


def test_format_mata_uang():
    assert format_currency(1_000_000) == "Rp 1.000.000"
    assert format_currency(1000, "USD") == "$ 1.000"
    assert format_currency(1000, "EUR") == "1.000 EUR"
    assert format_currency(999) == "Rp 999"


def test_hasil_dengan_teks():
    data = CalculationInput(total_assets=120_000_000, heirs=HeirCounts(suami=1, ayah=1, ibu=1))
    result = calculate_with_text(data)
    text = result.text_results
    assert text.total_assets_text == "seratus dua puluh juta rupiah"
    assert text.utang_text == "nol rupiah"
    assert [h.type for h in text.heir_results] == ["suami", "ibu", "ayah"]
    suami = text.heir_results[0]
    assert suami.description == "satu orang suami"
    assert suami.total_share_text == "enam puluh juta rupiah"
    assert suami.individual_share_text is None
    assert result.is_gharrawain
    assert suami.total_share_formatted == "Rp 60.000.000"
    assert text.net_estate_formatted == "Rp 120.000.000"


def test_hasil_dengan_teks_mengikuti_mata_uang_konfigurasi():
    config = DEFAULT_CONFIG.model_copy(update={"currency": "USD"})
    data = CalculationInput(total_assets=1_200, heirs=HeirCounts(istri=1, anak_laki=1))
    text = calculate_with_text(data, config).text_results
    assert text.net_estate_formatted == "$ 1.200"
    assert [h.total_share_formatted for h in text.heir_results] == ["$ 150", "$ 1.050"]
