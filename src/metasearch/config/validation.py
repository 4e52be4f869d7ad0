"""Configuration validation for startup checks.

Validates that configuration is usable before the application starts
accepting requests.

Usage:
    from metasearch.config.validation import validate_or_raise

    # During startup, once the engine registry exists
    validate_or_raise(settings, engine_names=registry.names)
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from metasearch.config.settings import Settings
from metasearch.core.logging import get_logger
from metasearch.utils.exceptions import ConfigurationError

logger = get_logger("metasearch.config")


class ValidationSeverity(str, Enum):
    """Severity of configuration validation issues."""

    ERROR = "error"  # Must be fixed, app cannot start
    WARNING = "warning"  # Should be fixed, app can start but may misbehave


@dataclass
class ValidationResult:
    """Result of a configuration validation check."""

    field: str
    severity: ValidationSeverity
    message: str
    suggestion: str | None = None

    def __str__(self) -> str:
        prefix = "ERROR" if self.severity == ValidationSeverity.ERROR else "WARNING"
        result = f"[{prefix}] {self.field}: {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


def validate_configuration(
    settings: Settings,
    engine_names: Iterable[str] | None = None,
) -> list[ValidationResult]:
    """Validate application configuration.

    Args:
        settings: Settings to validate
        engine_names: Registered engine names; the default engine check
            is skipped when omitted

    Returns:
        List of validation results (empty if all checks pass)
    """
    results: list[ValidationResult] = []

    results.extend(_validate_timeouts(settings))
    results.extend(_validate_scoring(settings))
    if engine_names is not None:
        results.extend(_validate_default_engines(settings, engine_names))

    return results


def validate_or_raise(
    settings: Settings,
    engine_names: Iterable[str] | None = None,
) -> None:
    """Validate configuration and raise if errors found.

    Raises:
        ConfigurationError: If any validation errors are found
    """
    results = validate_configuration(settings, engine_names)
    errors = [r for r in results if r.severity == ValidationSeverity.ERROR]

    if errors:
        error_messages = "\n".join(str(e) for e in errors)
        raise ConfigurationError(f"Configuration validation failed:\n{error_messages}")

    for warning in (r for r in results if r.severity == ValidationSeverity.WARNING):
        logger.warning("configuration_warning", detail=str(warning))


# =============================================================================
# Validators
# =============================================================================


def _validate_timeouts(settings: Settings) -> list[ValidationResult]:
    """Validate collection and backend timeouts."""
    results: list[ValidationResult] = []

    if settings.max_timeout <= 0:
        results.append(
            ValidationResult(
                field="max_timeout",
                severity=ValidationSeverity.ERROR,
                message=f"must be positive, got {settings.max_timeout}",
                suggestion="Set MAX_TIMEOUT to the default deadline in seconds, e.g. 5",
            )
        )

    if settings.backend_timeout <= 0:
        results.append(
            ValidationResult(
                field="backend_timeout",
                severity=ValidationSeverity.ERROR,
                message=f"must be positive, got {settings.backend_timeout}",
                suggestion="Set BACKEND_TIMEOUT to the per-engine bound in seconds, e.g. 4",
            )
        )
    elif settings.max_timeout > 0 and settings.backend_timeout > settings.max_timeout:
        results.append(
            ValidationResult(
                field="backend_timeout",
                severity=ValidationSeverity.WARNING,
                message=(
                    f"{settings.backend_timeout}s exceeds max_timeout {settings.max_timeout}s; "
                    "requests using the default deadline will cancel slow engines"
                ),
            )
        )

    return results


def _validate_scoring(settings: Settings) -> list[ValidationResult]:
    """Validate scoring weights."""
    results: list[ValidationResult] = []

    for engine, weight in settings.scoring.position_weights.items():
        if weight < 0:
            results.append(
                ValidationResult(
                    field=f"scoring.position_weights.{engine}",
                    severity=ValidationSeverity.WARNING,
                    message=f"negative weight {weight} ranks this engine's top results lowest",
                )
            )

    return results


def _validate_default_engines(
    settings: Settings,
    engine_names: Iterable[str],
) -> list[ValidationResult]:
    """Validate that every default engine is registered."""
    known = {name.lower() for name in engine_names}
    missing = [name for name in settings.default_engines if name.lower() not in known]
    if not settings.default_engines:
        return [
            ValidationResult(
                field="default_engines",
                severity=ValidationSeverity.ERROR,
                message="no default engines configured",
                suggestion=f"Use some of: {', '.join(sorted(known))}",
            )
        ]
    if missing:
        return [
            ValidationResult(
                field="default_engines",
                severity=ValidationSeverity.ERROR,
                message=f"unknown engine(s): {', '.join(missing)}",
                suggestion=f"Use some of: {', '.join(sorted(known))}",
            )
        ]
    return []
