# Di dalam file: main.py

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.rules.loader import load_config
from app.rules.madhab import HEIR_CATALOG, get_config
from app.text.report import calculate_with_text
from calculator import calculate_faraidh
from errors import InputValidationError
from schemas import CalculationInput, CalculationResult, CalculationResultWithText, HeirInfo
from settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Tabel aturan dimuat sekali saat start; dipakai bersama oleh semua request
if settings.faraidh_config_path:
    faraidh_config = load_config(settings.faraidh_config_path)
else:
    faraidh_config = get_config()
logger.info("Madzhab aktif: %s", faraidh_config.madzhab)

app = FastAPI(
    title="Kalkulator Faraidh",
    description="API untuk perhitungan waris Islam (faraidh) dengan aritmetika pecahan eksak."
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _unprocessable(exc: InputValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=[e.model_dump() for e in exc.errors])


@app.get("/")
def read_root():
    """
    Endpoint utama untuk menyapa pengguna.
    """
    return {"message": "Selamat datang di Kalkulator Faraidh"}


@app.get("/heirs", response_model=list[HeirInfo])
def read_heirs():
    """
    Daftar golongan ahli waris yang dikenali beserta nama Indonesia & Arab.
    """
    return HEIR_CATALOG


@app.post("/calculate", response_model=CalculationResult)
def run_calculation(calculation_data: CalculationInput):
    """
    Endpoint utama untuk menjalankan perhitungan Faraidh.
    """
    try:
        return calculate_faraidh(calculation_data, faraidh_config)
    except InputValidationError as exc:
        raise _unprocessable(exc)


@app.post("/calculate/text", response_model=CalculationResultWithText)
def run_calculation_with_text(calculation_data: CalculationInput):
    """Sama seperti /calculate, ditambah teks terbilang."""
    try:
        return calculate_with_text(calculation_data, faraidh_config)
    except InputValidationError as exc:
        raise _unprocessable(exc)
