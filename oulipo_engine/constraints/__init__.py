"""
Constraint algorithms.

Each rule is available as a free function (check/transform) and as a class
implementing the Constraint or Transformer interface for registry use.
"""

from .base import Constraint, Generator, Transformer
from .lipogram import LipogramConstraint
from .lipogram import check as check_lipogram
from .n_plus_7 import NPlusSevenTransformer
from .n_plus_7 import transform as n_plus_7_transform
from .palindrome import PalindromeConstraint
from .palindrome import check as check_palindrome
from .prisoners import PrisonersConstraint
from .prisoners import check as check_prisoners
from .sestina import SestinaConstraint
from .sestina import check as check_sestina
from .snowball import SnowballConstraint
from .snowball import check as check_snowball
from .univocalic import UnivocalicConstraint
from .univocalic import check as check_univocalic

__all__ = [
    "Constraint",
    "Generator",
    "Transformer",
    "LipogramConstraint",
    "NPlusSevenTransformer",
    "PalindromeConstraint",
    "PrisonersConstraint",
    "SestinaConstraint",
    "SnowballConstraint",
    "UnivocalicConstraint",
    "check_lipogram",
    "check_palindrome",
    "check_prisoners",
    "check_sestina",
    "check_snowball",
    "check_univocalic",
    "n_plus_7_transform",
]
