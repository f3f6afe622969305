"""Exceptions raised while turning benchmark samples into weight records."""

from __future__ import annotations


class WeightWriterError(Exception):
    """Base class for weight analysis failures."""


class EmptyInputError(WeightWriterError, ValueError):
    """No benchmark batches were supplied."""


class MissingRegressionError(WeightWriterError, RuntimeError):
    """The regression oracle returned nothing for a non-empty sample set."""


class AccountingInvariantError(WeightWriterError, RuntimeError):
    """A storage key was marked seen while its prefix was not."""
