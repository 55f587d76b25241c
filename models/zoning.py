"""Zoning data models based on the Kigali City Zoning Regulations (2020)"""

import re
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from enum import Enum


class ZoneCode(str, Enum):
    """Canonical zone codes used by the knowledge base"""
    R1 = "R1"
    R1A = "R1A"
    R1B = "R1B"
    R2 = "R2"
    R3 = "R3"
    R4 = "R4"
    C1 = "C1"
    C3 = "C3"
    I1 = "I1"
    I2 = "I2"
    I3 = "I3"
    P1 = "P1"
    P2 = "P2"
    P3B = "P3B"
    P3C = "P3C"
    A1 = "A1"
    PA = "PA"
    PF1 = "PF1"
    PF2 = "PF2"
    PF3 = "PF3"
    PF4 = "PF4"
    PF5 = "PF5"
    T = "T"
    U = "U"
    W2 = "W2"
    W3 = "W3"
    W4 = "W4"
    W5 = "W5"
    WR = "WR"


class UnknownZone(BaseModel):
    """A zone label that could not be mapped to a canonical code"""
    model_config = ConfigDict(frozen=True)

    raw_label: str = ""

    def __str__(self) -> str:
        return self.raw_label


# Result of zone label normalization
ZoneIdentity = Union[ZoneCode, UnknownZone]


class UseStatus(str, Enum):
    """Outcome of classifying a use against a zone"""
    PERMITTED = "permitted"
    CONDITIONAL = "conditional"
    PROHIBITED = "prohibited"
    UNSPECIFIED = "unspecified"
    UNKNOWN_ZONE = "unknown_zone"


class Setbacks(BaseModel):
    """Minimum setbacks in meters"""
    front_principal: Optional[float] = Field(None, ge=0, description="Front setback on the principal road")
    front_secondary: Optional[float] = Field(None, ge=0, description="Front setback on a secondary road")
    rear: Optional[float] = Field(None, ge=0)
    side: Optional[float] = Field(None, ge=0)


class DensityRange(BaseModel):
    """Residential density range in dwelling units per hectare"""
    minimum: float = Field(..., ge=0)
    maximum: float = Field(..., ge=0)
    unit: str = "Du/Ha"
    note: Optional[str] = None

    @model_validator(mode='after')
    def check_order(self):
        if self.maximum < self.minimum:
            raise ValueError('Density maximum must not be lower than the minimum')
        return self

    def __str__(self) -> str:
        text = f"{self.minimum:g}-{self.maximum:g} {self.unit}"
        return f"{text} ({self.note})" if self.note else text


class Density(BaseModel):
    single_use: Optional[DensityRange] = None
    mixed_use: Optional[DensityRange] = None


class LotSize(BaseModel):
    """Lot size bounds in square meters"""
    min_sqm: Optional[float] = Field(None, gt=0)
    max_sqm: Optional[float] = Field(None, gt=0)
    note: Optional[str] = None

    def describe(self) -> str:
        parts = []
        if self.min_sqm:
            parts.append(f"Min {self.min_sqm:g} m²")
        if self.max_sqm:
            parts.append(f"Max {self.max_sqm:g} m²")
        return ", ".join(parts) or "As per UPC"


_FLOOR_LABEL = re.compile(r'^\s*(G(?:\+\d+)*(?:\+P)?)\b\s*(.*)$')


class MaxFloors(BaseModel):
    """Floor limit: an opaque label such as G+2 plus an optional extra-floor allowance"""
    label: str
    extra_floors: int = Field(0, ge=0)
    note: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "MaxFloors":
        """Split free text like 'G+2 (One extra floor may be allowed ...)'"""
        match = _FLOOR_LABEL.match(text or "")
        if not match:
            return cls(label=text.strip())

        label, rest = match.group(1), match.group(2).strip()
        note = rest.strip(' .').strip('()').strip() or None

        extra = 0
        if rest and re.search(r'\bone extra floor\b', rest, re.IGNORECASE):
            extra = 1
        return cls(label=label, extra_floors=extra, note=note)

    def __str__(self) -> str:
        return f"{self.label} ({self.note})" if self.note else self.label


class ConditionalUse(BaseModel):
    """A use allowed only with approval"""
    name: str
    authority: str
    conditions: Optional[str] = None


class UsePermissions(BaseModel):
    permitted: List[str] = []
    conditional: List[ConditionalUse] = []
    prohibited: List[str] = []
    ancillary: List[str] = []


class ZoneRegulation(BaseModel):
    """Complete regulations for one zone, read-only once loaded"""
    model_config = ConfigDict(frozen=True)

    code: ZoneCode
    display_code: str  # code as printed in the regulation tables, e.g. "P3-B"
    full_name: str
    category: str
    article: Optional[str] = None
    table: Optional[str] = None
    description: Optional[str] = None
    uses: Optional[UsePermissions] = None
    max_building_coverage: Optional[float] = Field(None, gt=0, le=1)
    min_landscaping_coverage: Optional[float] = Field(None, ge=0, le=1)
    min_green_space: Optional[float] = Field(None, ge=0, le=1)
    max_floor_area_ratio: Optional[float] = Field(None, gt=0)
    density: Optional[Density] = None
    max_floors: Optional[MaxFloors] = None
    ancillary_max_floors: Optional[str] = None
    floor_to_floor_height: Optional[str] = None
    lot_size: Optional[LotSize] = None
    setbacks: Optional[Setbacks] = None
    building_forms: List[str] = []
    development_strategy: List[str] = []
    roof: Optional[str] = None
    signage: Optional[Dict[str, Any]] = None
    restrictions: Optional[str] = None

    @field_validator('max_floors', mode='before')
    @classmethod
    def parse_max_floors(cls, v):
        if isinstance(v, str):
            return MaxFloors.parse(v)
        return v


class DevelopmentParams(BaseModel):
    """Development envelope subset of a zone regulation"""
    zone_name: str
    code: str
    article: Optional[str] = None
    table: Optional[str] = None
    lot_size: Optional[LotSize] = None
    max_building_coverage: Optional[float] = None
    min_landscaping_coverage: Optional[float] = None
    max_floor_area_ratio: Optional[float] = None
    density: Optional[Density] = None
    max_floors: Optional[MaxFloors] = None
    building_forms: List[str] = []
    setbacks: Optional[Setbacks] = None


class UseClassification(BaseModel):
    """Result of checking a use against a zone"""
    status: UseStatus
    zone_code: str
    zone_name: Optional[str] = None
    matched_entry: Optional[str] = None
    authority: Optional[str] = None
    conditions: Optional[str] = None
    article: Optional[str] = None

    @property
    def is_allowed(self) -> bool:
        return self.status == UseStatus.PERMITTED
