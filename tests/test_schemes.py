"""Тесты для реестра схем и одиночных схем интерполяции."""

import copy

import pytest
import numpy as np
from pathlib import Path
import sys

# Добавляем путь к src для импорта
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from dimensions import DIMLESS, DIM_FLUX
from fields import SurfaceField, VolField
from interpolation import (LUST, Downwind, Linear, LinearUpwind, LocalMax, LocalMin,
                           MidPoint, ReverseLinear, SchemeRegistry,
                           SurfaceInterpolationScheme, Upwind, interpolate,
                           resolve_scheme, scheme_registry)
from mesh import BoxGeometry, FvMesh, Patch, box_mesh
from utils.errors import ConfigurationError, FieldLookupError
from utils.token_stream import TokenStream


@pytest.fixture
def line():
    """Неравномерная 1D-сетка: 3 ячейки, центры 0.5, 2, 4.5."""
    return FvMesh(owner=[0, 1, 0, 2], neighbour=[1, 2],
                  cell_volumes=[1.0, 2.0, 3.0],
                  face_area_vectors=[[1.0], [1.0], [-1.0], [1.0]],
                  cell_centres=[[0.5], [2.0], [4.5]],
                  face_centres=[[1.0], [3.0], [0.0], [6.0]],
                  patches=[Patch("inlet", 2, 1), Patch("outlet", 3, 1)])


@pytest.fixture
def box():
    mesh = box_mesh(BoxGeometry(nx=4, ny=3, lx=2.0, ly=1.5))
    phi = SurfaceField.from_face_values(mesh, "phi", mesh.Sf @ np.array([1.0, -0.5]),
                                        DIM_FLUX)
    mesh.register_object(phi)
    return mesh


def linear_field(mesh, name="T"):
    """Линейное поле с точными граничными значениями."""
    ni = mesh.n_internal_faces
    T = VolField(mesh, name, 2.0 * mesh.C[:, 0] - mesh.C[:, 1])
    T.boundary[:] = 2.0 * mesh.Cf[ni:, 0] - mesh.Cf[ni:, 1]
    return T


class TestSchemeRegistry:
    """Тесты выбора схемы по имени."""

    def test_builtin_names(self):
        for name in ("linear", "midPoint", "reverseLinear", "upwind", "downwind",
                     "linearUpwind", "LUST", "localMax", "localMin",
                     "CoBlended", "cellCoBlended"):
            assert name in scheme_registry

    def test_resolve(self, box):
        assert isinstance(resolve_scheme(box, "linear"), Linear)
        assert isinstance(resolve_scheme(box, TokenStream("upwind phi")), Upwind)

    def test_fresh_instances(self, box):
        assert resolve_scheme(box, "linear") is not resolve_scheme(box, "linear")

    def test_unknown_name(self, box):
        with pytest.raises(ConfigurationError) as err:
            resolve_scheme(box, TokenStream("QUICK", source="interpolationSchemes/x"))
        msg = str(err.value)
        assert "QUICK" in msg
        assert "linear" in msg and "cellCoBlended" in msg
        assert "interpolationSchemes/x" in msg

    def test_empty_spec(self, box):
        with pytest.raises(ConfigurationError):
            resolve_scheme(box, "")

    def test_resolve_leaves_remaining_tokens(self, box):
        stream = TokenStream("upwind phi 10 linear")
        scheme = scheme_registry.resolve(box, stream)
        assert isinstance(scheme, Upwind)
        assert stream.remaining() == "10 linear"

    def test_flux_form(self, box):
        phi = box.lookup_object("phi")
        scheme = resolve_scheme(box, "linearUpwind grad(T)", face_flux=phi)
        assert isinstance(scheme, LinearUpwind)
        assert scheme.face_flux is phi
        assert scheme.grad_scheme_name == "grad(T)"

    def test_missing_flux(self, box):
        with pytest.raises(FieldLookupError):
            resolve_scheme(box, "upwind psi")

    def test_custom_registry(self, box):
        registry = SchemeRegistry("test")

        @registry.register("half")
        class Half(SurfaceInterpolationScheme):
            def weights(self, vf):
                return self._weights_field(np.full(self.mesh.n_internal_faces, 0.5))

        assert Half.type_name == "half"
        assert registry.names() == ["half"]
        assert isinstance(resolve_scheme(box, "half", registry=registry), Half)
        with pytest.raises(ValueError):
            registry.register("half")(Linear)

    def test_not_copyable(self, box):
        scheme = resolve_scheme(box, "linear")
        with pytest.raises(TypeError):
            copy.copy(scheme)
        with pytest.raises(TypeError):
            copy.deepcopy(scheme)


class TestGeometricSchemes:
    """Тесты linear / midPoint / reverseLinear."""

    def test_linear_weights(self, line):
        w = Linear(line).weights(VolField.uniform(line, "T", 0.0))
        # грань x=1: до владельца 0.5, до соседа 1 -> вес владельца 2/3
        assert np.allclose(w.internal, [2.0 / 3.0, 0.6])
        assert np.allclose(w.boundary, 1.0)
        assert w.dimensions == DIMLESS

    def test_midpoint_and_reverse(self, line):
        T = VolField.uniform(line, "T", 0.0)
        assert np.allclose(MidPoint(line).weights(T).internal, 0.5)
        assert np.allclose(ReverseLinear(line).weights(T).internal, [1.0 / 3.0, 0.4])

    def test_linear_exact_for_linear_field(self, box):
        T = linear_field(box)
        Tf = Linear(box).interpolate(T)
        ni = box.n_internal_faces
        assert np.allclose(Tf.internal, 2.0 * box.Cf[:ni, 0] - box.Cf[:ni, 1])
        assert np.allclose(Tf.boundary, T.boundary)
        assert not Linear(box).corrected()
        assert Linear(box).correction(T) is None

    def test_vector_field(self, box):
        U = VolField(box, "U", box.C.copy())
        Uf = Linear(box).interpolate(U)
        assert Uf.internal.shape == (box.n_internal_faces, 2)
        assert np.allclose(Uf.internal, box.Cf[:box.n_internal_faces])

    def test_interpolate_helper(self, box):
        box.schemes.set_scheme("interpolationSchemes", "interpolate(T)", "midPoint")
        T = linear_field(box)
        Tf = interpolate(T)
        own, nei = box.internal_owner, box.neighbour
        assert np.allclose(Tf.internal, 0.5 * (T.internal[own] + T.internal[nei]))


class TestUpwindSchemes:
    """Тесты upwind / downwind / linearUpwind / LUST."""

    def test_upwind_weights(self, box):
        phi = box.lookup_object("phi")
        w = Upwind(box, phi).weights(VolField.uniform(box, "T", 0.0))
        assert np.all(w.internal[phi.internal > 0] == 1.0)
        assert np.all(w.internal[phi.internal < 0] == 0.0)

    def test_downwind_complement(self, box):
        phi = box.lookup_object("phi")
        T = VolField.uniform(box, "T", 0.0)
        w_up = Upwind(box, phi).weights(T)
        w_down = Downwind(box, phi).weights(T)
        assert np.allclose(w_up.internal + w_down.internal, 1.0)

    def test_upwind_values(self, box):
        phi = box.lookup_object("phi")
        T = linear_field(box)
        Tf = Upwind(box, phi).interpolate(T)
        cells = np.where(phi.internal >= 0, box.internal_owner, box.neighbour)
        assert np.allclose(Tf.internal, T.internal[cells])

    def test_zero_flux_takes_owner(self, line):
        phi = SurfaceField(line, "phi", [0.0, -1.0], DIM_FLUX)
        w = Upwind(line, phi).weights(VolField.uniform(line, "T", 0.0))
        assert np.allclose(w.internal, [1.0, 0.0])

    def test_linear_upwind_exact_for_linear_field(self, box):
        T = linear_field(box)
        scheme = resolve_scheme(box, "linearUpwind phi grad(T)")
        assert scheme.corrected()
        Tf = scheme.interpolate(T)
        ni = box.n_internal_faces
        assert np.allclose(Tf.internal, 2.0 * box.Cf[:ni, 0] - box.Cf[:ni, 1])
        corr = scheme.correction(T)
        assert np.allclose(corr.boundary, 0.0)
        assert corr.dimensions == T.dimensions

    def test_linear_upwind_vector(self, box):
        U = VolField(box, "U", box.C.copy())
        ni = box.n_internal_faces
        U.boundary[:] = box.Cf[ni:]
        scheme = resolve_scheme(box, "linearUpwind phi grad(U)")
        Uf = scheme.interpolate(U)
        assert np.allclose(Uf.internal, box.Cf[:ni])

    def test_lust(self, box):
        T = linear_field(box)
        lust = resolve_scheme(box, "LUST phi grad(T)")
        lu = resolve_scheme(box, "linearUpwind phi grad(T)")
        lin = Linear(box)
        assert isinstance(lust, LUST)
        w = lust.weights(T)
        expected = 0.75 * lin.weights(T).internal + 0.25 * lu.weights(T).internal
        assert np.allclose(w.internal, expected)
        assert np.allclose(lust.correction(T).internal, 0.25 * lu.correction(T).internal)
        # линейное поле воспроизводится точно
        ni = box.n_internal_faces
        assert np.allclose(lust.interpolate(T).internal,
                           2.0 * box.Cf[:ni, 0] - box.Cf[:ni, 1])

    def test_bad_grad_scheme(self, box):
        box.schemes.set_scheme("gradSchemes", "grad(T)", "Gauss pointLinear")
        with pytest.raises(ConfigurationError):
            resolve_scheme(box, "linearUpwind phi grad(T)")


class TestLocalExtremum:
    """Тесты localMax / localMin."""

    def test_values(self, line):
        T = VolField(line, "T", [1.0, 5.0, 2.0])
        assert np.allclose(LocalMax(line).interpolate(T).internal, [5.0, 5.0])
        assert np.allclose(LocalMin(line).interpolate(T).internal, [1.0, 2.0])
        assert np.allclose(LocalMax(line).interpolate(T).boundary, T.boundary)

    def test_weights_not_implemented(self, line):
        with pytest.raises(NotImplementedError):
            LocalMax(line).weights(VolField.uniform(line, "T", 1.0))
