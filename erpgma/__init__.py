# erpgma/__init__.py
"""
erpgma: fit Gamma-PDF models to ERP data.

- erpgma.core: ERP container model and channel/bin selection
- erpgma.fit: the fitting adapter (`fit_erp`) and provenance records
"""

from .core import ErpContainer, ChannelLocation, ErpMeta
from .fit import fit_erp

__all__ = ["ErpContainer", "ChannelLocation", "ErpMeta", "fit_erp"]

__version__ = "0.1.0"
