"""Pydantic schemas for estimate configuration files.

The schemas check structure and types, and reject NaN and infinity.
Domain range rules (positive dimensions, non-negative counts and rates,
markup range) are applied afterwards by ``validate_config`` so that
every violation is reported together with its path.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from furniture_estimator.domain.services.cost_aggregator import LaborPolicyType
from furniture_estimator.domain.value_objects import Currency, MaterialType

# Version 1.0: Wardrobe, table and sofa estimates with rate overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class WardrobeConfigSchema(BaseModel):
    """Wardrobe configuration. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kind: Literal["wardrobe"] = "wardrobe"
    height: float = 72.0
    width: float = 36.0
    depth: float = 24.0
    num_shelves: int = 2
    num_drawers: int = 0
    num_doors: int = 2
    drawer_height: float = 8.0
    drawer_depth: float = 20.0
    has_hanging_rod: bool = True
    has_back_panel: bool = True
    has_lighting: bool = False
    has_glass_doors: bool = False
    material_type: MaterialType = MaterialType.PLYWOOD
    hinge_type: str = "standard"
    drawer_slide_type: str = "standard"
    handle_type: str = "basic"
    finish_type: str = "none"


class TableConfigSchema(BaseModel):
    """Table configuration. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kind: Literal["table"] = "table"
    table_length: float = 48.0
    table_width: float = 24.0
    table_height: float = 30.0
    material_type: MaterialType = MaterialType.PLYWOOD
    finish_type: str = "none"


class SofaConfigSchema(BaseModel):
    """Sofa configuration. Dimensions in inches."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kind: Literal["sofa"] = "sofa"
    sofa_length: float = 80.0
    sofa_depth: float = 36.0
    sofa_height: float = 30.0
    num_seat_cushions: int = 3
    num_back_cushions: int = 3
    has_arms: bool = True
    material_type: MaterialType = MaterialType.PLYWOOD
    upholstery_type: str = "fabric"
    finish_type: str = "none"


FurnitureConfigSchema = Annotated[
    WardrobeConfigSchema | TableConfigSchema | SofaConfigSchema,
    Field(discriminator="kind"),
]


class HardwareRatesSchema(BaseModel):
    """Hardware prices: per-grade mappings plus the hanging rod."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    hinge: dict[str, float] | None = None
    drawer_slide: dict[str, float] | None = None
    handle: dict[str, float] | None = None
    hanging_rod: float | None = None


class RatesConfigSchema(BaseModel):
    """Rate table overrides.

    Every field is optional. Mappings are merged key by key into the base
    table; scalars replace the base value. The same shape is used for the
    persisted rate table.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    material: dict[str, float] | None = None
    edge_banding: float | None = None
    hardware: HardwareRatesSchema | None = None
    lighting: float | None = None
    glass_door: float | None = None
    finish: dict[str, float] | None = None
    upholstery: dict[str, float] | None = None
    sofa_cushion: float | None = None
    sofa_leg_set: float | None = None
    sofa_arm_pair: float | None = None
    labor_hourly_rate: float | None = None
    markup_percentage: float | None = None


class EstimateConfiguration(BaseModel):
    """Root configuration model for an estimate request.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        furniture: The piece to estimate, discriminated by ``kind``
        rates: Optional overrides applied on top of the stored rate table
        currency: Display currency
        labor_policy: How labor is priced

    Example:
        >>> config = EstimateConfiguration(
        ...     schema_version="1.0",
        ...     furniture=TableConfigSchema(table_length=60.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    furniture: FurnitureConfigSchema
    rates: RatesConfigSchema | None = Field(
        default=None, description="Rate overrides (optional)"
    )
    currency: Currency = Currency.INR
    labor_policy: LaborPolicyType = LaborPolicyType.HOURLY

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


__all__ = [
    "EstimateConfiguration",
    "FurnitureConfigSchema",
    "HardwareRatesSchema",
    "RatesConfigSchema",
    "SUPPORTED_VERSIONS",
    "SofaConfigSchema",
    "TableConfigSchema",
    "WardrobeConfigSchema",
]
