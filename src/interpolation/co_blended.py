"""
Схема CoBlended: то же смешение, что cellCoBlended, но по числу Куранта,
вычисленному прямо на грани:
    Co_f = Δt · deltaCoeffs · |φ_f| / |Sf|.
"""
from __future__ import annotations

from dimensions import DIMLESS
from fields import SurfaceField
from interpolation.courant_blended import CourantBlendedScheme
from interpolation.scheme_registry import register_scheme


@register_scheme("CoBlended")
class CoBlended(CourantBlendedScheme):
    """Смешение двух схем по числу Куранта грани."""

    def face_courant_number(self) -> SurfaceField:
        mesh = self.mesh
        ni = mesh.n_internal_faces
        flux = self.volumetric_flux().mag()
        factor = mesh.time.delta_t_value() * mesh.delta_coeffs / mesh.magSf
        return SurfaceField(mesh, "Co", flux.internal * factor[:ni], DIMLESS,
                            flux.boundary * factor[ni:])
