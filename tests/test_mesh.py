"""Тесты для модуля сетки: геометрия, генераторы, время, реестр, fvSchemes."""

import pytest
import numpy as np
from pathlib import Path
import sys

# Добавляем путь к src для импорта
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from mesh import (BoxGeometry, FvMesh, FvSchemes, LineGeometry, ObjectRegistry,
                  Patch, Time, box_mesh, line_mesh)
from utils.errors import ConfigurationError, FieldLookupError


class TestGeometry:
    """Тесты для параметров генераторов."""

    def test_valid_geometry(self):
        geom = BoxGeometry(nx=4, ny=3, lx=2.0, ly=1.5)
        assert geom.nx == 4
        assert geom.depth == 1.0

    def test_invalid_cells(self):
        with pytest.raises(ValueError):
            LineGeometry(n_cells=0, length=1.0)
        with pytest.raises(ValueError):
            BoxGeometry(nx=4, ny=-1, lx=1.0, ly=1.0)

    def test_invalid_dimensions(self):
        with pytest.raises(ValueError):
            LineGeometry(n_cells=5, length=-1.0)
        with pytest.raises(ValueError):
            BoxGeometry(nx=4, ny=3, lx=1.0, ly=0.0)


class TestLineMesh:
    """Тесты одномерной сетки."""

    @pytest.fixture
    def mesh(self):
        return line_mesh(LineGeometry(n_cells=4, length=2.0, area=0.5))

    def test_sizes(self, mesh):
        assert mesh.n_cells == 4
        assert mesh.n_internal_faces == 3
        assert mesh.n_boundary_faces == 2
        assert [p.name for p in mesh.patches] == ["inlet", "outlet"]

    def test_volumes_and_areas(self, mesh):
        assert np.allclose(mesh.V, 0.25)
        assert np.allclose(mesh.magSf, 0.5)
        # граничные нормали наружу
        assert mesh.Sf[mesh.patch("inlet").start, 0] < 0
        assert mesh.Sf[mesh.patch("outlet").start, 0] > 0

    def test_weights_uniform(self, mesh):
        assert np.allclose(mesh.weights[:3], 0.5)
        assert np.allclose(mesh.weights[3:], 1.0)

    def test_delta_coeffs(self, mesh):
        assert np.allclose(mesh.delta_coeffs[:3], 2.0)
        # от центра ячейки до граничной грани
        assert np.allclose(mesh.delta_coeffs[3:], 4.0)

    def test_single_cell(self):
        mesh = line_mesh(LineGeometry(n_cells=1, length=1.0))
        assert mesh.n_internal_faces == 0
        assert mesh.n_boundary_faces == 2

    def test_unknown_patch(self, mesh):
        with pytest.raises(KeyError):
            mesh.patch("wall")


class TestBoxMesh:
    """Тесты двумерной сетки."""

    @pytest.fixture
    def mesh(self):
        return box_mesh(BoxGeometry(nx=3, ny=2, lx=3.0, ly=1.0))

    def test_sizes(self, mesh):
        assert mesh.n_cells == 6
        # (nx-1)*ny + nx*(ny-1)
        assert mesh.n_internal_faces == 2 * 2 + 3 * 1
        assert mesh.n_boundary_faces == 2 * 2 + 2 * 3
        assert [p.size for p in mesh.patches] == [2, 2, 3, 3]

    def test_closed_cells(self, mesh):
        """Сумма векторов площадей по граням ячейки равна нулю."""
        total = np.asarray(mesh.incidence(-1.0) @ mesh.Sf)
        assert np.allclose(total, 0.0)

    def test_owner_neighbour_orientation(self, mesh):
        """Sf внутренних граней направлен от owner к neighbour."""
        ni = mesh.n_internal_faces
        d = mesh.C[mesh.neighbour] - mesh.C[mesh.internal_owner]
        assert np.all(np.einsum("ij,ij->i", d, mesh.Sf[:ni]) > 0)

    def test_incidence_shape(self, mesh):
        A = mesh.incidence()
        assert A.shape == (mesh.n_cells, mesh.n_faces)
        # каждая ячейка декартовой 2D-сетки ограничена 4 гранями
        assert np.allclose(np.asarray(A.sum(axis=1)).ravel(), 4.0)
        assert mesh.incidence() is A

    def test_info(self, mesh):
        info = mesh.info()
        assert "Ячеек: 6" in info
        assert "left(2)" in info


class TestFvMeshValidation:
    """Тесты проверки входных массивов."""

    def test_negative_volume(self):
        with pytest.raises(ValueError):
            FvMesh([0, 0], [], [-1.0], [[1.0], [-1.0]], [[0.5]], [[1.0], [0.0]],
                   [Patch("a", 0, 2)])

    def test_patches_must_cover_boundary(self):
        with pytest.raises(ValueError):
            FvMesh([0, 0], [], [1.0], [[1.0], [-1.0]], [[0.5]], [[1.0], [0.0]],
                   [Patch("a", 0, 1)])

    def test_owner_range(self):
        with pytest.raises(ValueError):
            FvMesh([0, 3], [], [1.0], [[1.0], [-1.0]], [[0.5]], [[1.0], [0.0]],
                   [Patch("a", 0, 2)])


class TestTime:
    """Тесты для времени."""

    def test_increment(self):
        time = Time(0.1, end_time=0.3)
        steps = 0
        while time.run():
            time.increment()
            steps += 1
        assert steps == 3
        assert time.time_index == 3
        assert time.name == "0.3"

    def test_delta_t(self):
        time = Time(0.25)
        assert time.delta_t.value == 0.25
        with pytest.raises(ValueError):
            time.set_delta_t(0.0)
        with pytest.raises(ValueError):
            Time(-1.0)


class TestObjectRegistry:
    """Тесты реестра объектов."""

    def test_lookup(self):
        registry = ObjectRegistry()

        class Named:
            name = "phi"

        obj = registry.register_object(Named())
        assert registry.found_object("phi")
        assert registry.lookup_object("phi") is obj
        assert registry.names() == ["phi"]

    def test_missing(self):
        registry = ObjectRegistry()
        registry.register_object(1.0, name="x")
        with pytest.raises(FieldLookupError) as err:
            registry.lookup_object("rho")
        assert "rho" in str(err.value)
        assert "x" in str(err.value)

    def test_wrong_kind(self):
        registry = ObjectRegistry()
        registry.register_object("text", name="rho")
        assert not registry.found_object("rho", float)
        with pytest.raises(FieldLookupError):
            registry.lookup_object("rho", float)

    def test_check_out(self):
        registry = ObjectRegistry()
        registry.register_object(1.0, name="x")
        registry.check_out("x")
        assert not registry.found_object("x")


class TestFvSchemes:
    """Тесты таблиц схем."""

    def test_defaults(self):
        schemes = FvSchemes()
        assert schemes.interpolation_scheme("interpolate(T)").remaining() == "linear"
        assert schemes.grad_scheme("grad(T)").remaining() == "Gauss linear"

    def test_explicit_entry(self):
        schemes = FvSchemes({"interpolationSchemes": {"interpolate(Co)": "localMax"}})
        assert schemes.interpolation_scheme("interpolate(Co)").remaining() == "localMax"
        assert schemes.interpolation_scheme("interpolate(rho)").remaining() == "linear"

    def test_no_default(self):
        schemes = FvSchemes()
        with pytest.raises(ConfigurationError) as err:
            schemes.div_scheme("div(phi,T)")
        assert "div(phi,T)" in str(err.value)

    def test_unknown_table(self):
        with pytest.raises(ConfigurationError):
            FvSchemes({"laplacianSchemes": {"default": "Gauss linear corrected"}})

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "case.yaml"
        path.write_text(
            "fvSchemes:\n"
            "  divSchemes:\n"
            "    div(phi,T): Gauss cellCoBlended 1 linear 10 upwind\n",
            encoding="utf-8",
        )
        schemes = FvSchemes.from_yaml(path)
        stream = schemes.div_scheme("div(phi,T)")
        assert stream.read_word() == "Gauss"
        assert stream.read_word() == "cellCoBlended"
        assert str(path) in stream.source

    def test_set_scheme(self):
        schemes = FvSchemes()
        schemes.set_scheme("divSchemes", "div(phi,T)", "Gauss upwind")
        assert schemes.div_scheme("div(phi,T)").remaining() == "Gauss upwind"
        with pytest.raises(ConfigurationError):
            schemes.set_scheme("fooSchemes", "x", "y")
