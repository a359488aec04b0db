from __future__ import annotations
from sambat.core.engine import ConversionEngine
from sambat.dataset import load_year_records

def build_default_engine() -> ConversionEngine:
    return ConversionEngine.from_records(load_year_records())
