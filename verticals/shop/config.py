"""Shop vertical configuration.

Re-exports ShopConfig from the patterns module, demonstrating how
verticals use the domain config pattern.
"""

from patterns.domain_config import ShopConfig

# Default configuration instance
config = ShopConfig.default()
