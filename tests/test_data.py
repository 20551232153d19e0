import pytest

torch = pytest.importorskip("torch")

from dae.data.noise import gaussian_noise, masking_noise, salt_and_pepper_noise
from dae.data.patterns import as_batch, block_patterns


def test_block_patterns_layout() -> None:
    patterns = block_patterns(5, 2)
    assert patterns.tolist() == [[1.0, 1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 1.0, 1.0, 1.0]]
    assert block_patterns(4, 2, repeat=3).shape == (6, 4)
    with pytest.raises(ValueError):
        block_patterns(3, 4)


def test_as_batch_validates_shape() -> None:
    assert as_batch([[1, 2], [3, 4]], 2).dtype == torch.float64
    with pytest.raises(ValueError):
        as_batch([], 2)
    with pytest.raises(ValueError):
        as_batch([1.0, 2.0], 2)
    with pytest.raises(ValueError):
        as_batch([[1.0, 2.0, 3.0]], 2)


def test_masking_noise_only_zeroes_elements() -> None:
    clean = torch.ones(20, 10, dtype=torch.float64)
    noisy = masking_noise(clean, 0.3, generator=torch.Generator().manual_seed(0))
    assert noisy.shape == clean.shape
    assert set(noisy.unique().tolist()) <= {0.0, 1.0}
    assert 0 < int((noisy == 0).sum()) < clean.numel()
    assert torch.equal(clean, torch.ones(20, 10, dtype=torch.float64))


def test_masking_noise_extremes() -> None:
    clean = torch.full((3, 4), 2.0, dtype=torch.float64)
    assert torch.equal(masking_noise(clean, 0.0), clean)
    assert torch.equal(masking_noise(clean, 1.0), torch.zeros_like(clean))
    with pytest.raises(ValueError):
        masking_noise(clean, 1.5)


def test_noise_is_reproducible_with_seeded_generator() -> None:
    clean = block_patterns(6, 3, repeat=2)
    first = gaussian_noise(clean, 0.2, generator=torch.Generator().manual_seed(5))
    second = gaussian_noise(clean, 0.2, generator=torch.Generator().manual_seed(5))
    assert torch.equal(first, second)
    assert not torch.equal(first, clean)
    assert torch.equal(gaussian_noise(clean, 0.0), clean)
    with pytest.raises(ValueError):
        gaussian_noise(clean, -1.0)


def test_salt_and_pepper_uses_bounds() -> None:
    clean = torch.full((10, 10), 0.5, dtype=torch.float64)
    noisy = salt_and_pepper_noise(clean, 0.5, low=-1.0, high=2.0, generator=torch.Generator().manual_seed(1))
    assert set(noisy.unique().tolist()) <= {-1.0, 0.5, 2.0}
    with pytest.raises(ValueError):
        salt_and_pepper_noise(clean, -0.1)


def test_as_batch_normalises_tensor_lists() -> None:
    mixed = [torch.tensor([1, 2]), torch.tensor([0.5, 1.5], dtype=torch.float32)]
    batch = as_batch(mixed, 2)
    assert batch.dtype == torch.float64
    assert batch.tolist() == [[1.0, 2.0], [0.5, 1.5]]
    with pytest.raises(ValueError):
        as_batch([torch.zeros(2), torch.zeros(3)], 2)
