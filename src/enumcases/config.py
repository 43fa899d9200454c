"""Evaluation settings."""
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


log = logging.getLogger(__name__)

MAX_DEPTH_VAR = "ENUMCASES_MAX_DEPTH"
INT_BITS_VAR = "ENUMCASES_INT_BITS"

_ENV_FIELDS = {MAX_DEPTH_VAR: "max_depth", INT_BITS_VAR: "int_bits"}


class EvaluationPolicy(BaseModel):
    """
    Limits applied while evaluating an expression.

    max_depth: the deepest tree that may be evaluated or rendered; each
        nested composite adds one level.
    int_bits: when set, arithmetic is checked against a signed integer of
        this width. When unset, integers are unbounded.
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int = Field(default=200, ge=1)
    int_bits: Optional[int] = Field(default=None, ge=2)

    @property
    def int_range(self) -> Optional[tuple[int, int]]:
        if self.int_bits is None:
            return None
        return -(2 ** (self.int_bits - 1)), 2 ** (self.int_bits - 1) - 1

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EvaluationPolicy":
        """Build a policy from `ENUMCASES_*` variables, defaults elsewhere."""
        if environ is None:
            environ = os.environ
        values = {
            field: environ[var].strip()
            for var, field in _ENV_FIELDS.items()
            if environ.get(var, "").strip()
        }
        try:
            return cls.model_validate(values)
        except ValidationError:
            log.warning("Rejecting evaluation settings from the environment: %r", values)
            raise


DEFAULT_POLICY = EvaluationPolicy()
