import pytest

torch = pytest.importorskip("torch")

from dae.core.activations import ActivationType, activate, derivative
from dae.core.metrics import mean_squared_error, reconstruction_error
from dae.core.neuron import Neuron


def _neuron(activation=ActivationType.IDENTITY, num_input: int = 3) -> Neuron:
    return Neuron(num_input, activation, learning_rate=0.1, generator=torch.Generator().manual_seed(0))


def test_mean_squared_error_reference_values() -> None:
    assert mean_squared_error(3.0, 5.0) == 4.0
    for value in (-2.5, 0.0, 1.0, 7.25):
        assert mean_squared_error(value, value) == 0


def test_reconstruction_error_averages_over_batch() -> None:
    outputs = torch.tensor([[1.0, 2.0], [3.0, 4.0]], dtype=torch.float64)
    targets = torch.tensor([[1.0, 0.0], [3.0, 6.0]], dtype=torch.float64)
    assert reconstruction_error(outputs, targets) == pytest.approx(2.0)
    with pytest.raises(ValueError):
        reconstruction_error(outputs, targets[:1])


def test_activation_parsing() -> None:
    assert ActivationType.parse(2) is ActivationType.TANH
    assert ActivationType.parse("sigmoid") is ActivationType.SIGMOID
    assert ActivationType.parse("rectified_linear") is ActivationType.RELU
    with pytest.raises(ValueError):
        ActivationType.parse(9)
    with pytest.raises(ValueError):
        ActivationType.parse("softmax")


@pytest.mark.parametrize("kind", list(ActivationType))
def test_derivative_matches_finite_difference(kind: ActivationType) -> None:
    net = torch.tensor([-0.7, 0.3, 1.2], dtype=torch.float64)
    eps = 1e-6
    numeric = (activate(kind, net + eps) - activate(kind, net - eps)) / (2 * eps)
    analytic = derivative(kind, net, activate(kind, net))
    assert torch.allclose(numeric, analytic, atol=1e-6)


def test_output_does_not_mutate_weights() -> None:
    neuron = _neuron()
    x = torch.tensor([0.2, -0.4, 1.0], dtype=torch.float64)
    before = neuron.weights
    first = neuron.output(x)
    assert neuron.output(x) == first
    assert torch.equal(neuron.weights, before)


@pytest.mark.parametrize("kind", list(ActivationType))
def test_update_moves_output_towards_target(kind: ActivationType) -> None:
    neuron = _neuron(kind)
    x = torch.tensor([0.5, 0.5, 0.5], dtype=torch.float64)
    target = 0.6
    if kind is ActivationType.RELU and neuron.output(x) == 0.0:
        pytest.skip("inactive relu unit does not learn")
    gap_before = abs(neuron.output(x) - target)
    neuron.update(x, target)
    assert abs(neuron.output(x) - target) < gap_before


def test_backpropagate_with_zero_error_is_a_no_op() -> None:
    neuron = _neuron(ActivationType.TANH)
    x = torch.tensor([1.0, -1.0, 0.5], dtype=torch.float64)
    before = neuron.weights
    bias = neuron.bias
    assert neuron.backpropagate(x, 0.0) == 0.0
    assert torch.equal(neuron.weights, before)
    assert neuron.bias == bias


def test_initial_weights_are_bounded_by_fan_in() -> None:
    neuron = Neuron(16, generator=torch.Generator().manual_seed(3))
    assert neuron.weights.shape == (16,)
    assert float(neuron.weights.abs().max()) <= 0.25
    assert neuron.bias == 0.0


def test_neuron_rejects_bad_input() -> None:
    neuron = _neuron()
    with pytest.raises(ValueError):
        neuron.output(torch.zeros(4, dtype=torch.float64))
    with pytest.raises(ValueError):
        Neuron(0)
    with pytest.raises(ValueError):
        Neuron(3, learning_rate=0.0)
