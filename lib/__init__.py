# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - seed.py: Loads the bundled seed questions at startup
# - utils.py: Shared utilities (base error class)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.seed import SeedLoadError, load_seed_questions
from lib.utils import ApplicationError

__all__ = [
    # Seed
    "SeedLoadError",
    "load_seed_questions",
    # Utils
    "ApplicationError",
]
