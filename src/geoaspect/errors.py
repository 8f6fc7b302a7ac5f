"""Errors raised by strict aspect computations and the warnings the resolver emits."""

from __future__ import annotations


class GeoAspectError(ValueError):
    pass


class InvalidRange(GeoAspectError):
    """A data range cannot produce an aspect: zero width, inverted or non-finite bounds."""


class OutOfDomain(GeoAspectError):
    """The range center is too close to a pole for a bounded aspect ratio."""


class AspectWarning(UserWarning):
    pass


class InvalidRangeWarning(AspectWarning):
    pass


class OutOfDomainWarning(AspectWarning):
    pass


class DegenerateRangeWarning(AspectWarning):
    """Zero-height range: the aspect collapses to 0."""
