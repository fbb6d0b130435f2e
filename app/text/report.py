# app/text/report.py

from typing import Optional

from app.rules.madhab import get_config
from app.text.currency import format_currency
from app.text.terbilang import terbilang_heir_description, terbilang_rupiah
from calculator import calculate_faraidh
from schemas import (
    CalculationInput,
    CalculationResultWithText,
    FaraidhConfig,
    HeirResultText,
    TextResults,
)


def calculate_with_text(calculation_input: CalculationInput,
                        config: Optional[FaraidhConfig] = None) -> CalculationResultWithText:
    """
    Sama dengan calculate_faraidh, ditambah teks terbilang untuk setiap
    nominal (harta, utang, wasiat, harta bersih, dan bagian ahli waris)
    serta nominal berformat mata uang dari konfigurasi.
    """
    result = calculate_faraidh(calculation_input, config)
    currency = (config or get_config(calculation_input.madzhab)).currency

    heir_results = []
    for r in result.all_results():
        heir_results.append(HeirResultText(
            **r.model_dump(exclude={"portion"}),
            portion=r.portion,
            description=terbilang_heir_description(r.type, r.count),
            total_share_text=terbilang_rupiah(r.total_share),
            total_share_formatted=format_currency(r.total_share, currency),
            individual_share_text=terbilang_rupiah(r.individual_share) if r.count > 1 else None,
        ))

    text_results = TextResults(
        total_assets_text=terbilang_rupiah(calculation_input.total_assets),
        utang_text=terbilang_rupiah(result.utang),
        wasiat_text=terbilang_rupiah(result.wasiat),
        net_estate_text=terbilang_rupiah(result.net_estate),
        net_estate_formatted=format_currency(result.net_estate, currency),
        heir_results=heir_results,
    )
    return CalculationResultWithText(**dict(result), text_results=text_results)
