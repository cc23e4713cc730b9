"""Явные операторы конечных объёмов: суммы по граням, градиент, дивергенция."""
from fvc.surface_integrate import surface_integrate, surface_sum
from fvc.gradient import check_grad_scheme, grad
from fvc.divergence import div

__all__ = ["surface_sum", "surface_integrate", "check_grad_scheme", "grad", "div"]
