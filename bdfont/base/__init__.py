"""
bdfont.base - supporting functions

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from . import binary
from . import image
