from datetime import date
from typing import Optional

from libsim.errors import ValidationError


class TextValidator:
    """Checks for author and title text before it reaches the catalog file."""

    @staticmethod
    def validate_field(name: str, value: Optional[str], max_length: int = 0) -> str:
        if value is None or not value.strip():
            raise ValidationError(f"{name} is required.")
        t = value.strip()
        if max_length and len(t) > max_length:
            raise ValidationError(f"{name} must be at most {max_length} characters.")
        # no escaping in the file format
        if "," in t:
            raise ValidationError(f"{name} cannot contain a comma.")
        if "\n" in t or "\r" in t:
            raise ValidationError(f"{name} cannot contain a line break.")
        return t

    @staticmethod
    def validate_author(author: Optional[str], max_length: int = 0) -> str:
        return TextValidator.validate_field("Author", author, max_length)

    @staticmethod
    def validate_title(title: Optional[str], max_length: int = 0) -> str:
        return TextValidator.validate_field("Title", title, max_length)


class YearValidator:
    """Publication years run from the first printing presses up to this year."""

    @staticmethod
    def validate_year(year: int, min_year: int = 1440, current_year: Optional[int] = None) -> int:
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValidationError("Year must be an integer.")
        max_year = current_year if current_year is not None else date.today().year
        if year < min_year or year > max_year:
            raise ValidationError(f"Year must be between {min_year} and {max_year}.")
        return year
