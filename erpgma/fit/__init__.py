# erpgma/fit/__init__.py
"""
Adapter between ERP containers and a Gamma-PDF fitting engine.
"""

from .engine import FitEngine, FitResultLike
from .options import FitOptions, FitWindow, RESERVED_KEYS, KNOWN_ENGINE_OPTIONS
from .provenance import ERP_INFO_TYPE, AttachOutcome, ErpInfo, attach_erp_info
from .erp import extract_data, fit_erp, validate_container


__all__ = [
    # engine interface
    "FitEngine",
    "FitResultLike",

    # options
    "FitOptions",
    "FitWindow",
    "RESERVED_KEYS",
    "KNOWN_ENGINE_OPTIONS",

    # provenance
    "ERP_INFO_TYPE",
    "AttachOutcome",
    "ErpInfo",
    "attach_erp_info",

    # pipeline
    "extract_data",
    "fit_erp",
    "validate_container",
]
