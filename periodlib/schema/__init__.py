from .config import PeriodicityConfig, parse_lead_days, validate_config

__all__ = ["PeriodicityConfig", "parse_lead_days", "validate_config"]
