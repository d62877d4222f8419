"""UserPhysicalData value object - physical measurements and estimates."""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex


@dataclass(frozen=True)
class UserPhysicalData:
    """Physical measurements read from the health data store.

    Every field is optional: a record is built from whatever subset of
    measurements is known. BMR and TDEE are derived estimates and are not
    required for completeness. Immutable; recomputation returns a new
    record.

    Attributes:
        weight: Body weight in kilograms
        height: Height in centimeters
        age: Age in years
        biological_sex: Biological sex category
        bmr: Basal metabolic rate in kcal/day
        tdee: Total daily energy expenditure in kcal/day
    """

    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    biological_sex: Optional[BiologicalSex] = None
    bmr: Optional[float] = None
    tdee: Optional[float] = None

    @property
    def has_complete_data(self) -> bool:
        """Whether all measurements required for BMR are present."""
        return (
            self.weight is not None
            and self.height is not None
            and self.age is not None
            and self.biological_sex is not None
        )

    @property
    def formatted_weight(self) -> Optional[str]:
        """Weight with one decimal, e.g. '75.0 kg'."""
        if self.weight is None:
            return None
        return f"{self.weight:.1f} kg"

    @property
    def formatted_height(self) -> Optional[str]:
        """Height without trailing zero decimals, e.g. '175 cm' or '175.5 cm'."""
        if self.height is None:
            return None
        # Shortest round-trip digits, never exponent notation
        value = format(Decimal(repr(float(self.height))), "f")
        if "." in value:
            value = value.rstrip("0").rstrip(".")
        return f"{value} cm"

    @property
    def formatted_age(self) -> Optional[str]:
        """Age in years, e.g. '30 years'."""
        if self.age is None:
            return None
        return f"{self.age} years"

    @property
    def formatted_biological_sex(self) -> Optional[str]:
        """Capitalized biological sex label, e.g. 'Male'."""
        if self.biological_sex is None:
            return None
        return self.biological_sex.display_name()

    def calculate_tdee(self, activity_level: ActivityLevel) -> Optional[float]:
        """Calculate TDEE from the stored BMR.

        BMR is never derived on the fly here: a record without BMR yields
        None even when all measurements are present.

        Args:
            activity_level: Physical activity level

        Returns:
            Optional[float]: TDEE in kcal/day, None if BMR is unknown
        """
        if self.bmr is None:
            return None

        # Import here to avoid circular dependency
        from ...calculation.tdee_service import TDEEService

        return TDEEService().calculate(self.bmr, activity_level)

    def with_metabolic_estimates(
        self, activity_level: ActivityLevel
    ) -> "UserPhysicalData":
        """Return a copy with BMR and TDEE computed from the measurements.

        Args:
            activity_level: Physical activity level for TDEE

        Returns:
            UserPhysicalData: New record, or self if data is incomplete
        """
        if not self.has_complete_data:
            return self

        from ...calculation.bmr_service import BMRService

        bmr = BMRService().calculate(
            weight=self.weight,
            height=self.height,
            age=self.age,
            sex=self.biological_sex,
        )
        estimated = replace(self, bmr=bmr)
        return replace(estimated, tdee=estimated.calculate_tdee(activity_level))
