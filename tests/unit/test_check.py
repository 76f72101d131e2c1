from __future__ import annotations

import numpy as np

from revad import check_gradient


def test_smooth_function_passes() -> None:
    chk = check_gradient(lambda x, y: (x * y).exp() + y.sin() / x, [0.7, -0.4])
    assert chk.analytic.shape == (2,)
    assert chk.passed(1e-5)
    np.testing.assert_allclose(chk.numeric, chk.analytic, atol=1e-5)


def test_degree_functions_use_radian_derivative() -> None:
    # The recorded partial of sin_deg is cos of the converted angle, without
    # the pi/180 chain factor, so it disagrees with finite differences.
    chk = check_gradient(lambda x: x.sin_deg(), [30.0])
    assert not chk.passed(1e-3)
    assert np.isclose(chk.numeric[0] * 180.0 / np.pi, chk.analytic[0], atol=1e-5)


def test_no_inputs() -> None:
    chk = check_gradient(lambda: 3.0, [])
    assert chk.value == 3.0
    assert chk.max_abs_error == 0.0
