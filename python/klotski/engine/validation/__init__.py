from klotski.engine.validation.validator import ensure_valid, validate_config

__all__ = ["ensure_valid", "validate_config"]
