"""BiologicalSex value object - selects the BMR formula variant."""

from enum import Enum


class BiologicalSex(str, Enum):
    """Biological sex as reported by the health data store.

    - MALE / FEMALE: select the matching Mifflin-St Jeor variant
    - OTHER / NOT_SET: use the midpoint of both variants
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    NOT_SET = "not_set"

    def display_name(self) -> str:
        """Get human-readable label.

        Returns:
            str: Capitalized label

        Example:
            >>> BiologicalSex.MALE.display_name()
            'Male'
        """
        names = {
            BiologicalSex.MALE: "Male",
            BiologicalSex.FEMALE: "Female",
            BiologicalSex.OTHER: "Other",
            BiologicalSex.NOT_SET: "Not specified",
        }
        return names[self]

    def is_unspecified(self) -> bool:
        """Whether neither sex-specific formula applies."""
        return self not in (BiologicalSex.MALE, BiologicalSex.FEMALE)
