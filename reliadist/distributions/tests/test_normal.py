import io
import logging

import numpy as np
import pytest
import scipy.stats

from ..enum import ParameterStatus
from ..normal import NormalDistribution
from ..randomvariable import RandomVariable


def test_NormalDistribution___init__():
    rv = NormalDistribution(1, 3.0, 0.5)
    assert isinstance(rv, RandomVariable)
    assert rv.type == "NORMAL"
    assert rv.tag == 1
    assert rv.mean == 3.0
    assert rv.stdv == 0.5
    np.testing.assert_array_equal(rv.parameters, [3.0, 0.5])
    assert rv.status is ParameterStatus.VALID


def test_NormalDistribution_from_parameters():
    rv = NormalDistribution.from_parameters(2, [-1.0, 2.0], start_value=-1.0)
    assert rv.tag == 2
    assert rv.mean == -1.0
    assert rv.stdv == 2.0
    assert rv.start_value == -1.0
    assert rv.status is ParameterStatus.VALID

    rv = NormalDistribution.from_parameters(2, np.array([4.0, 1.0]))
    np.testing.assert_array_equal(rv.parameters, [4.0, 1.0])


@pytest.mark.parametrize("parameters", [[], [1.0], [1.0, 2.0, 3.0]])
def test_NormalDistribution_from_parameters_count(caplog, parameters):
    with caplog.at_level(logging.ERROR):
        rv = NormalDistribution.from_parameters(8, parameters)

    assert rv.status is ParameterStatus.INVALID_PARAMETER_COUNT
    np.testing.assert_array_equal(rv.parameters, [0.0, 0.0])
    assert rv.type == "NORMAL"
    assert "requires 2 parameters" in caplog.text
    assert caplog.records[0].tag == 8
    assert np.isnan(rv.cdf(0.0))


@pytest.mark.parametrize("stdv", [0.0, -1.0, np.nan])
def test_NormalDistribution_invalid_stdv(caplog, stdv):
    with caplog.at_level(logging.ERROR):
        rv = NormalDistribution(3, 1.0, stdv)
    assert rv.status is ParameterStatus.INVALID_MOMENTS
    assert "strictly positive standard deviation" in caplog.text

    rv = NormalDistribution.from_parameters(3, [1.0, stdv])
    assert rv.status is ParameterStatus.INVALID_PARAMETERS
    assert np.isnan(rv.pdf(1.0))


def test_NormalDistribution_invalid_types():
    with pytest.raises(TypeError):
        NormalDistribution(1, "1.0", 2.0)
    with pytest.raises(TypeError):
        NormalDistribution.from_parameters(1, ["a", "b"])


@pytest.mark.parametrize("mean, stdv", [(0.0, 1.0), (3.0, 0.5), (-20.0, 7.0)])
def test_NormalDistribution_evaluation(mean, stdv):
    rv = NormalDistribution(1, mean, stdv)
    ref = scipy.stats.norm(loc=mean, scale=stdv)

    for x in mean + stdv * np.linspace(-4, 4, 17):
        assert rv.pdf(x) == pytest.approx(ref.pdf(x), rel=1e-10)
        assert rv.cdf(x) == pytest.approx(ref.cdf(x), rel=1e-10)

    for p in [1e-6, 0.05, 0.5, 0.8, 0.999]:
        assert rv.inverse_cdf(p) == pytest.approx(ref.ppf(p), rel=1e-10, abs=1e-12)
        assert rv.cdf(rv.inverse_cdf(p)) == pytest.approx(p, abs=1e-9)


def test_NormalDistribution_inverse_cdf_out_of_range(caplog):
    rv = NormalDistribution(4, 10.0, 2.0)
    with caplog.at_level(logging.ERROR):
        assert rv.inverse_cdf(1.5) == 0.0
    assert "Invalid probability value" in caplog.text


def test_NormalDistribution_print():
    rv = NormalDistribution(5, 10.0, 2.5)
    stream = io.StringIO()
    rv.print(stream)
    assert stream.getvalue() == "Normal RV #5\n\tmean = 10\n\tstdv = 2.5\n"


def test_NormalDistribution___json__():
    rv = NormalDistribution(5, 10.0, 2.5)
    assert rv.__json__() == {
        "tag": 5,
        "type": "NORMAL",
        "parameters": [10.0, 2.5],
        "start_value": 0.0,
    }


def test_NormalDistribution_nan_input(caplog):
    rv = NormalDistribution(1, 3.0, 0.5)
    with caplog.at_level(logging.ERROR):
        assert np.isnan(rv.pdf(np.nan))
        assert np.isnan(rv.cdf(np.nan))
    assert len(caplog.records) == 0
