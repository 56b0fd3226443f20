"""
Per-render dynamic overrides for width, precision and group spacing.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import DYNAMIC, UNSET, DynamicType, UnsetType
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class OverridePolicy(StrEnum):
    """
    When a supplied override replaces the value held by a FormatSpec field.

    A DYNAMIC field always takes its override and fails without one; the policies
    differ only for fields that are statically set or unset.

    Attributes:
        ALWAYS: A supplied override always wins (default).
        IF_UNSET: A supplied override applies to DYNAMIC and UNSET fields.
        DYNAMIC_ONLY: A supplied override applies to DYNAMIC fields only.

    Example:
        >>> spec = parse_spec("#04x")
        >>> spec.render_with(0, DynamicOverrides(width=7))
        '0x00000'
        >>> spec.render_with(0, DynamicOverrides(width=7, policy="dynamic_only"))
        '0x00'
    """
    ALWAYS = "always"
    IF_UNSET = "if_unset"
    DYNAMIC_ONLY = "dynamic_only"


class MissingDynamicValueError(LookupError):
    """
    A DYNAMIC field was rendered without a corresponding override.

    Attributes:
        field: Name of the field, "width" or "precision".
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is dynamic ('$') but no {field} override was supplied")


@dataclass(frozen=True)
class DynamicOverrides:
    """
    Render-time values for width, precision and spacing.

    None means "not supplied". Call-scoped: build one per render call or reuse it,
    it is immutable either way.

    Attributes:
        width: Minimum width in width-cost units, >= 0.
        precision: Fractional digits for floats, >= 0.
        spacing: Digits per group, >= 1.
        policy: OverridePolicy deciding whether overrides replace static fields.

    Examples:
        >>> parse_spec("-^$").render_with(1, DynamicOverrides(width=5))
        '--1--'
        >>> parse_spec("$").render(1)
        Traceback (most recent call last):
            ...
        numfmt.dynamic.MissingDynamicValueError: width is dynamic ('$') but no width override was supplied
    """

    width: int | None = None
    precision: int | None = None
    spacing: int | None = None
    policy: OverridePolicy = OverridePolicy.ALWAYS

    def __post_init__(self):
        """
        Validate fields
        """
        _validate_override(self.width, "width", minimum=0)
        _validate_override(self.precision, "precision", minimum=0)
        _validate_override(self.spacing, "spacing", minimum=1)

        if not isinstance(self.policy, (OverridePolicy, str)):
            raise TypeError(f"policy must be OverridePolicy or str, but got {fmt_type(self.policy)}")
        try:
            object.__setattr__(self, "policy", OverridePolicy(self.policy))
        except ValueError:
            raise ValueError(f"policy expected one of 'always', 'if_unset', 'dynamic_only', "
                             f"but found {fmt_value(self.policy)}") from None

    def merge(self,
              width: int | None | UnsetType = UNSET,
              precision: int | None | UnsetType = UNSET,
              spacing: int | None | UnsetType = UNSET,
              policy: OverridePolicy | str | UnsetType = UNSET,
              ) -> "DynamicOverrides":
        """
        Create a new DynamicOverrides instance with merged values.

        Parameters not provided (UNSET) are inherited from the current instance;
        pass None to drop an inherited override.
        """
        return DynamicOverrides(
            width=self.width if width is UNSET else width,
            precision=self.precision if precision is UNSET else precision,
            spacing=self.spacing if spacing is UNSET else spacing,
            policy=self.policy if policy is UNSET else policy,
        )

    def resolve(self,
                field: Literal["width", "precision", "spacing"],
                value: int | UnsetType | DynamicType,
                ) -> int | UnsetType:
        """
        Resolve a FormatSpec field value against this override record.

        Args:
            field: Field name, selects the override.
            value: The value held by the FormatSpec field.

        Returns:
            The override or the FormatSpec value according to the policy; never DYNAMIC.

        Raises:
            MissingDynamicValueError: If value is DYNAMIC and no override was supplied.
        """
        override = getattr(self, field)
        if override is not None:
            if value is DYNAMIC or self.policy is OverridePolicy.ALWAYS:
                return override
            if value is UNSET and self.policy is OverridePolicy.IF_UNSET:
                return override
        if value is DYNAMIC:
            raise MissingDynamicValueError(field)
        return value


# Private Methods ------------------------------------------------------------------------------------------------------

def _validate_override(value, name: str, *, minimum: int):
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} override must be int or None, but got {fmt_type(value)}")
    if value < minimum:
        raise ValueError(f"{name} override must be int >= {minimum}, but got {fmt_value(value)}")
