"""
Tests for the factor tracer.

Eigenvector signs are not unique, so projected axes are compared by
absolute value.
"""

import numpy as np
import pytest

from uapca import (
    DimensionMismatch,
    EmptyInput,
    FactorTracer,
    InvalidComponentCount,
    MultivariateNormal,
    Point,
    get_factor_tracer,
)


def _student_example():
    """Three 3-D distributions with correlated uncertainty."""
    means = [[1.0, 2.0, 0.5], [-1.0, 0.5, 1.5], [0.5, -1.0, -2.0]]
    covs = [
        [[1.0, 0.2, 0.0], [0.2, 0.5, 0.1], [0.0, 0.1, 0.3]],
        [[0.4, 0.0, 0.1], [0.0, 0.9, 0.0], [0.1, 0.0, 0.6]],
        [[0.2, 0.1, 0.1], [0.1, 0.2, 0.1], [0.1, 0.1, 0.8]],
    ]
    return [MultivariateNormal(m, c) for m, c in zip(means, covs)]


class TestFactorTracer:

    @pytest.mark.parametrize('scale', [0.5, 1.0, 2.0, 3.0])
    def test_standard_normal(self, scale):
        tracer = get_factor_tracer([MultivariateNormal.standard(2)], 2)
        points = tracer(scale)

        assert len(points) == 2
        expected = [[scale, 0.0], [0.0, scale]]
        for point, exp in zip(points, expected):
            assert isinstance(point, Point)
            np.testing.assert_allclose(np.abs(point.data()), exp, atol=1e-12)

    def test_axis_lengths_follow_eigenvalues(self):
        tracer = get_factor_tracer([MultivariateNormal([0, 0], [[4.0, 0.0], [0.0, 1.0]])], 2)
        points = tracer(1.5)

        np.testing.assert_allclose(np.abs(points[0].data()), [3.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(np.abs(points[1].data()), [0.0, 1.5], atol=1e-12)

    def test_projected_axes_are_scaled_unit_vectors(self):
        dists = _student_example()
        tracer = get_factor_tracer(dists, 2)
        sigma = np.sqrt(tracer.pca.lengths[:2])

        for scale in (1.0, 2.0):
            axes = tracer.axes(scale)
            assert axes.shape == (2, 2)
            np.testing.assert_allclose(np.abs(axes), np.diag(scale * sigma), atol=1e-12)

    def test_points_have_target_dimension(self):
        tracer = get_factor_tracer(_student_example(), 1)
        points = tracer(2.0)

        assert len(points) == 1
        assert points[0].n_dims == 1
        np.testing.assert_allclose(
            np.abs(points[0].data()), [2.0 * np.sqrt(tracer.pca.lengths[0])], atol=1e-12
        )

    def test_repeat_calls_are_pure(self):
        tracer = get_factor_tracer(_student_example(), 2)
        first = [p.data().copy() for p in tracer(1.0)]
        tracer(5.0)
        second = [p.data() for p in tracer(1.0)]

        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)

    def test_linear_in_scale(self):
        tracer = get_factor_tracer(_student_example(), 3)
        np.testing.assert_allclose(tracer.axes(3.0), 3.0 * tracer.axes(1.0), atol=1e-12)

    def test_fit_scale_is_separate_from_call_scale(self):
        dists = [MultivariateNormal.standard(2)]
        tracer = get_factor_tracer(dists, 2, scale=2.0)

        assert tracer.pca.scale == 2.0
        np.testing.assert_allclose(np.abs(tracer.axes(1.0)), 2.0 * np.eye(2), atol=1e-12)

    def test_points_only(self):
        tracer = get_factor_tracer([Point([1.0, 0.0]), Point([-1.0, 0.0])], 2)
        points = tracer(1.0)

        np.testing.assert_allclose(np.abs(points[0].data()), [1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(points[1].data(), [0.0, 0.0], atol=1e-12)

    def test_is_tracer_instance(self):
        assert isinstance(get_factor_tracer(_student_example(), 2), FactorTracer)

    def test_empty_input(self):
        with pytest.raises(EmptyInput):
            get_factor_tracer([], 2)

    @pytest.mark.parametrize('components', [0, 4])
    def test_invalid_component_count(self, components):
        with pytest.raises(InvalidComponentCount):
            get_factor_tracer(_student_example(), components)

    def test_dimension_mismatch(self):
        dists = [MultivariateNormal.standard(2), MultivariateNormal.standard(3)]
        with pytest.raises(DimensionMismatch):
            get_factor_tracer(dists, 2)
