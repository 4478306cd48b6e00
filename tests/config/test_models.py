# tests/config/test_models.py
import pytest
from pydantic import ValidationError

from htree.config.models import LogModel, TreeConfig, TreeModel


def test_defaults():
    cfg = TreeConfig()
    assert cfg.run_id == "local"
    assert cfg.tree.order == 0
    assert cfg.tree.numeric == "float"
    assert cfg.log.level == "INFO" and cfg.log.sample_every == 1


def test_nested_mapping():
    cfg = TreeConfig.model_validate(
        {"run_id": "r-7", "tree": {"order": 6, "numeric": "decimal"}, "log": {"debug": True}}
    )
    assert cfg.tree.order == 6
    assert cfg.tree.numeric == "decimal"
    assert cfg.log.debug is True


@pytest.mark.parametrize("order", [-1, True, "many"])
def test_bad_orders(order):
    with pytest.raises(ValidationError):
        TreeModel(order=order)


def test_unknown_numeric_and_extra_keys_rejected():
    with pytest.raises(ValidationError):
        TreeModel(numeric="fraction")
    with pytest.raises(ValidationError):
        TreeModel(order=2, scale=700)
    with pytest.raises(ValidationError):
        LogModel(sample_every=0)
