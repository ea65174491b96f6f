import pytest

from hourpicker.app.state import HoursBinding


def test_set_value_emits_on_change():
    binding = HoursBinding(1.0)
    received = []
    binding.value_changed.connect(received.append)

    binding.set_value(2.5)
    binding.set_value(2.5)

    assert binding.value() == 2.5
    assert received == [2.5]


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_rejected(bad):
    binding = HoursBinding(1.0)
    with pytest.raises(ValueError, match="finite"):
        binding.set_value(bad)
    assert binding.value() == 1.0


def test_non_finite_initial_value_rejected():
    with pytest.raises(ValueError):
        HoursBinding(float("nan"))
