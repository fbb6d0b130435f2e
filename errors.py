# Di dalam file: errors.py

from typing import List

from schemas import ValidationIssue


class FaraidhError(Exception):
    """Kesalahan dasar kalkulator faraidh."""


class InputValidationError(FaraidhError):
    """
    Input tidak lolos validasi. Membawa seluruh daftar pelanggaran,
    perhitungan tidak dijalankan sama sekali.
    """

    def __init__(self, errors: List[ValidationIssue]):
        self.errors = list(errors)
        message = errors[0].message if errors else "Input tidak valid"
        super().__init__(f"Validation error: {message}")


class ConfigError(FaraidhError):
    """Tabel aturan madzhab tidak dapat dibaca atau tidak didukung."""
