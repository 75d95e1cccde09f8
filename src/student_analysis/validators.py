"""
Reusable field validators for Pydantic models.

These validators are used with Pydantic @field_validator decorators in
config.py and models/criteria.py.
"""

import re
from typing import Optional


# Plain XML names only (no namespace prefixes); they are embedded in XPath.
_XML_NAME = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')

# Picker value the UI shows for "every faculty"
ALL_FACULTIES = 'All'


def validate_xml_name(name: Optional[str]) -> Optional[str]:
    """
    Validate a plain XML element or attribute name.

    Args:
        name: Name to validate, or None

    Returns:
        The validated name (unchanged if valid)

    Raises:
        ValueError: If name is not a plain XML name

    Example:
        >>> validate_xml_name('Student')
        'Student'
        >>> validate_xml_name('Student[1]')  # Raises ValueError
    """
    if name is None:
        return name

    if not _XML_NAME.match(name):
        raise ValueError(
            f"Not a valid XML name: '{name}'\n"
            f"Example: 'Student'"
        )

    return name


def normalize_user_choice(
    value: Optional[str],
    wildcard: Optional[str] = None
) -> Optional[str]:
    """
    Turn a raw form value into a criterion value.

    Blank input, whitespace-only input and the optional wildcard label
    all mean "no constraint" and become None. Anything else is returned
    verbatim (no stripping, matching stays exact).

    Args:
        value: Raw value typed or picked by the user
        wildcard: Label that stands for "any" (e.g. 'All')

    Returns:
        None for "no constraint", otherwise the value unchanged

    Example:
        >>> normalize_user_choice('All', wildcard='All') is None
        True
        >>> normalize_user_choice('   ') is None
        True
        >>> normalize_user_choice('Eng')
        'Eng'
    """
    if value is None or not value.strip():
        return None

    if wildcard is not None and value == wildcard:
        return None

    return value
