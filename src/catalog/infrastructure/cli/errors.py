"""Translation of domain errors into CLI exits."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click

from catalog.domain.exceptions import DomainException, InconsistentStateError


class InternalFault(click.ClickException):
    """The store is in a state the user cannot fix (EX_SOFTWARE)."""

    exit_code = 70


@contextmanager
def reported_errors() -> Iterator[None]:
    try:
        yield
    except InconsistentStateError as exc:
        raise InternalFault(f"Internal error: {exc}") from exc
    except DomainException as exc:
        raise click.ClickException(str(exc)) from exc
