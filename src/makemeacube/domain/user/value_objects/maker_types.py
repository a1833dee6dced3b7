"""Closed enumerations describing maker tools and their materials."""

from enum import Enum


class Printer3DType(str, Enum):
    """Printing technology of a 3D printer."""

    FDM = "fdm"  # Fused deposition modeling
    SLA = "sla"  # Stereolithography
    DLP = "dlp"  # Digital light processing
    SLS = "sls"  # Selective laser sintering


class MaterialType(str, Enum):
    """Consumable a maker tool can work with."""

    PLA = "pla"
    ABS = "abs"
    PETG = "petg"
    TPU = "tpu"
    NYLON = "nylon"
    RESIN = "resin"
