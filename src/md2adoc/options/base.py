"""Base classes for parser and renderer options.

This module defines the foundation classes for the options used by the
md2adoc conversion pipeline. Options are frozen dataclasses: a single
default instance can be shared by every conversion without risk of one
call mutating another call's configuration.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2adoc.exceptions import InvalidOptionsError

UNSET = object()


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        InvalidOptionsError
            If a keyword does not name a field of this options class

        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise InvalidOptionsError(
                f"Unknown option(s) for {type(self).__name__}: {', '.join(unknown)}",
                component_name=type(self).__name__,
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)

    @staticmethod
    def _require_choice(name: str, value: Any, choices: tuple[str, ...]) -> None:
        if value not in choices:
            raise InvalidOptionsError(
                f"Invalid value for {name}: {value!r} (expected one of {', '.join(choices)})",
                parameter_name=name,
                parameter_value=value,
            )


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """
