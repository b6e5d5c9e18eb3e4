"""Resultados etiquetados para llamadas que pueden fallar fuera del proceso.

``NotFound`` y ``UpstreamError`` se mantienen separados internamente aunque
la fachada GraphQL responda ``null`` en ambos casos.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    resource: str
    identifier: Optional[str] = None


@dataclass(frozen=True)
class UpstreamError:
    detail: str
    status_code: Optional[int] = None


Result = Union[Ok[T], NotFound, UpstreamError]
