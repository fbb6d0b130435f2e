# Di dalam file: test_validation.py

from schemas import CalculationInput, FractionInput, HeirCounts
from validation import validate, validate_heir_counts


def codes_for(**kwargs):
    return [e.code for e in validate(CalculationInput(**kwargs))]


class TestValidasiHarta:

    def test_input_valid(self):
        assert codes_for(total_assets=1000, heirs=HeirCounts(istri=4, anak_laki=3)) == []

    def test_aset_negatif(self):
        assert "NEGATIVE_ASSETS" in codes_for(total_assets=-10)

    def test_utang_negatif(self):
        assert codes_for(total_assets=100, utang=-1) == ["NEGATIVE_DEBT"]

    def test_utang_melebihi_aset(self):
        assert codes_for(total_assets=100, utang=101) == ["DEBT_EXCEEDS_ASSETS"]

    def test_utang_sama_dengan_aset_boleh(self):
        assert codes_for(total_assets=100, utang=100) == []


class TestValidasiWasiat:

    def test_penyebut_nol(self):
        codes = codes_for(total_assets=100, wasiat_fraction=FractionInput(num=0, den=0))
        assert codes == ["INVALID_WASIAT_DENOMINATOR"]

    def test_wasiat_negatif(self):
        codes = codes_for(total_assets=100, wasiat_fraction=FractionInput(num=-1, den=3))
        assert codes == ["NEGATIVE_WASIAT"]

    def test_wasiat_lebih_sepertiga(self):
        codes = codes_for(total_assets=100, wasiat_fraction=FractionInput(num=1, den=2))
        assert codes == ["WASIAT_EXCEEDS_ONE_THIRD"]

    def test_wasiat_tepat_sepertiga(self):
        assert codes_for(total_assets=100, wasiat_fraction=FractionInput(num=2, den=6)) == []


class TestValidasiAhliWaris:

    def test_suami_dan_istri(self):
        errors = validate_heir_counts(HeirCounts(suami=1, istri=1))
        assert [e.code for e in errors] == ["INVALID_SPOUSE_COMBINATION"]

    def test_jumlah_negatif(self):
        errors = validate_heir_counts(HeirCounts(anak_laki=-1))
        assert [e.code for e in errors] == ["NEGATIVE_HEIR_COUNT"]
        assert errors[0].field == "heirs.anak_laki"

    def test_golongan_nol_atau_satu(self):
        errors = validate_heir_counts(HeirCounts(ibu=2, nenek_ibu=3))
        assert [e.code for e in errors] == ["INVALID_ZERO_ONE_VALUE", "INVALID_ZERO_ONE_VALUE"]

    def test_istri_lebih_dari_empat(self):
        errors = validate_heir_counts(HeirCounts(istri=5))
        assert [e.code for e in errors] == ["INVALID_WIFE_COUNT"]

    def test_madzhab_tidak_dikenal(self):
        assert codes_for(total_assets=100, madzhab="zahiri") == ["UNKNOWN_MADZHAB"]

    def test_madzhab_dikenal_lolos_validasi(self):
        assert codes_for(total_assets=100, madzhab="hanafi") == []

    def test_semua_pelanggaran_tanpa_berhenti(self):
        codes = codes_for(
            total_assets=-1,
            wasiat_fraction=FractionInput(num=1, den=1),
            heirs=HeirCounts(suami=1, istri=9, ayah=-1),
        )
        assert codes == [
            "NEGATIVE_ASSETS",
            "DEBT_EXCEEDS_ASSETS",
            "WASIAT_EXCEEDS_ONE_THIRD",
            "INVALID_SPOUSE_COMBINATION",
            "NEGATIVE_HEIR_COUNT",
            "INVALID_ZERO_ONE_VALUE",
            "INVALID_WIFE_COUNT",
        ]
