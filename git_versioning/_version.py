"""Version file - managed by setuptools-scm.

Placeholder for development; overwritten with the real version when the
package is built from a tagged checkout.
"""

from typing import Tuple

# Matches fallback_version in pyproject.toml
__version__ = "0.0.0+unknown"
__version_tuple__: Tuple[int, int, int] = (0, 0, 0)
