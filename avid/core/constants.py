"""
Application-wide constants.

Centralize table names, column names and well-known values here.
"""

from enum import Enum


# ========================================
# Members Table
# ========================================

MEMBERS_TABLE = "members"
MEMBER_ALIAS = "member"

MEMBER_COLUMNS = (
    "username",
    "password",
    "country",
    "province",
    "city",
    "postal_code",
    "date_of_birth",
    "limits",
    "height",
    "weight",
    "body_type",
    "ethnicity",
    "email",
)


# ========================================
# Gambling Limits
# ========================================

class GamblingLimit(str, Enum):
    """
    Well-known gambling limit levels.

    Members store the limit as a plain string, so values outside
    this enum are still accepted by the store.
    """

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    SELF_EXCLUDED = "self_excluded"
