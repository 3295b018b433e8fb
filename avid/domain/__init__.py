"""
Domain package.

Contains the Member entity and its value objects.
"""

from avid.domain.member import Member
from avid.domain.value_objects import Address, Email, Height, Weight

__all__ = [
    "Member",
    "Address",
    "Email",
    "Height",
    "Weight",
]
