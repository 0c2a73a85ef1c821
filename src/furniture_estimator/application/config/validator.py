"""Full validation of estimate configurations.

Pydantic has already checked structure and types by the time a
configuration reaches here. This module applies the domain range rules
to the furniture and to the effective rate table, and adds advisory
warnings for selections the rate table does not price.
"""

from furniture_estimator.application.config.adapter import (
    config_to_rate_table,
    config_to_spec,
)
from furniture_estimator.application.config.schemas import EstimateConfiguration
from furniture_estimator.domain.rate_table import RateTable, material_key
from furniture_estimator.domain.validation import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_furniture,
    validate_rate_table,
)
from furniture_estimator.domain.value_objects import (
    FurnitureSpec,
    HardwareCategory,
    SofaSpec,
    ThicknessClass,
    WardrobeSpec,
)


def check_rate_coverage(spec: FurnitureSpec, rates: RateTable) -> ValidationResult:
    """Warn about selections that have no entry in the rate table.

    Unknown keys are priced at 0, which is allowed but rarely intended.
    """
    result = ValidationResult()

    for thickness in ThicknessClass:
        key = material_key(spec.material_type, thickness)
        if key not in rates.material:
            result.add_warning(
                path=f"rates.material.{key}",
                message=f"No material rate for '{key}'; priced at 0",
                suggestion=f"Set a rate with 'rates set material.{key} VALUE'",
            )

    if spec.finish_type not in rates.finish:
        result.add_warning(
            path="furniture.finish_type",
            message=f"No finish rate for '{spec.finish_type}'; priced at 0",
            suggestion=f"Known finishes: {', '.join(sorted(rates.finish))}",
        )

    if isinstance(spec, WardrobeSpec):
        selections = (
            (HardwareCategory.HINGE, "hinge_type", spec.hinge_type, spec.num_doors),
            (
                HardwareCategory.DRAWER_SLIDE,
                "drawer_slide_type",
                spec.drawer_slide_type,
                spec.num_drawers,
            ),
            (
                HardwareCategory.HANDLE,
                "handle_type",
                spec.handle_type,
                spec.num_doors + spec.num_drawers,
            ),
        )
        for category, attribute, grade, count in selections:
            # Grades of unused hardware are never priced.
            if count <= 0:
                continue
            grades = rates.hardware.get(category.value, {})
            if grade not in grades:
                result.add_warning(
                    path=f"furniture.{attribute}",
                    message=f"No {category.value} rate for '{grade}'; priced at 0",
                    suggestion=f"Known grades: {', '.join(sorted(grades))}",
                )

    if isinstance(spec, SofaSpec) and spec.upholstery_type not in rates.upholstery:
        result.add_warning(
            path="furniture.upholstery_type",
            message=f"No upholstery rate for '{spec.upholstery_type}'; priced at 0",
            suggestion=f"Known types: {', '.join(sorted(rates.upholstery))}",
        )

    return result


def validate_config(
    config: EstimateConfiguration, base_rates: RateTable | None = None
) -> ValidationResult:
    """Perform full validation of an estimate configuration.

    Args:
        config: An EstimateConfiguration instance (already validated by Pydantic)
        base_rates: Rate table the configuration's overrides apply to;
            built-in defaults when omitted.

    Returns:
        ValidationResult containing every error and warning found
    """
    result = ValidationResult()

    spec = config_to_spec(config)
    rates = config_to_rate_table(config, base_rates)

    result.merge(validate_furniture(spec))
    result.merge(validate_rate_table(rates))
    result.merge(check_rate_coverage(spec, rates))

    return result


__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_rate_coverage",
    "validate_config",
]
