from rule_blocks.config.models import ExtractorConfig
from rule_blocks.config.repository import ConfigRepository, validate_config

__all__ = ["ConfigRepository", "ExtractorConfig", "validate_config"]
