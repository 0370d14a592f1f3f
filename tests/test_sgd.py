import numpy as np
import pytest

from scalar_aad.nn import MLP
from scalar_aad.optim import L2Loss, MaxMargin, SGD, SGDConfig


X_LINE = [[0.0], [0.5], [1.0]]
Y_LINE = [0.0, 1.0, 2.0]


def test_learning_rate_decay():
    assert SGD.learning_rate(1.0, 0, 100) == 1.0
    assert SGD.learning_rate(1.0, 50, 100) == pytest.approx(0.55)
    assert SGD.learning_rate(2.0, 100, 100) == pytest.approx(0.2)


def test_default_config():
    config = SGDConfig()
    assert config.base_step == 1.0
    assert config.n_iter == 100
    assert config.batch_size is None


def test_single_step_matches_manual_update():
    model = MLP(1, [3, 1], rng=np.random.default_rng(5))
    reference = MLP(1, [3, 1], rng=np.random.default_rng(5))

    total, _ = L2Loss().loss(reference, X_LINE, Y_LINE)
    reference.zero_grad()
    total.backward()
    expected = [p.val - 0.3 * p.grad for p in reference.parameters()]

    SGD().train(model, L2Loss(), X_LINE, Y_LINE,
                SGDConfig(base_step=0.3, n_iter=1, verbose=False))

    assert [p.val for p in model.parameters()] == pytest.approx(expected)


def test_regression_loss_decreases():
    model = MLP(1, [1], rng=np.random.default_rng(0))
    history = SGD().train(model, L2Loss(), X_LINE, Y_LINE,
                          SGDConfig(base_step=0.5, n_iter=60, verbose=False))

    assert len(history['loss_history']) == 60
    assert history['n_iterations'] == 60
    assert history['final_loss'] < history['loss_history'][0]
    assert history['final_loss'] < 0.05
    assert history['learning_rates'][0] == 0.5
    assert history['learning_rates'][-1] == pytest.approx(0.5 * (1.0 - 0.9 * 59 / 60))


def test_separable_classification():
    X = [[1.0, 1.0], [2.0, 1.0], [-1.0, -1.0], [-2.0, -1.0]]
    y = [1, 1, -1, -1]
    model = MLP(2, [1], rng=np.random.default_rng(1))

    history = SGD().train(model, MaxMargin(), X, y,
                          SGDConfig(base_step=0.5, n_iter=100, verbose=False))

    assert history['final_accuracy'] == 1.0
    assert history['final_loss'] < 0.05


def test_minibatch_training_runs(rng):
    X = rng.uniform(-1.0, 1.0, size=(20, 2))
    y = np.where(X[:, 0] + X[:, 1] > 0, 1.0, -1.0)
    model = MLP(2, [4, 1], rng=rng)

    history = SGD().train(model, MaxMargin(), X, y,
                          SGDConfig(base_step=0.1, n_iter=5, batch_size=5, verbose=False),
                          rng=rng)

    assert len(history['accuracy_history']) == 5
    assert all(a in (0.0, 0.2, 0.4, 0.6, 0.8, 1.0) for a in history['accuracy_history'])


def test_progress_output_and_callback(capsys):
    model = MLP(1, [1], rng=np.random.default_rng(0))
    calls = []

    SGD().train(model, L2Loss(), X_LINE, Y_LINE,
                SGDConfig(base_step=0.1, n_iter=4, log_every=2),
                callback=lambda i, loss, acc: calls.append((i, loss, acc)))

    out = capsys.readouterr().out
    assert "step 0 loss" in out
    assert "step 2 loss" in out
    assert "step 1 loss" not in out
    assert [c[0] for c in calls] == [0, 1, 2, 3]


def test_zero_iterations_leave_model_untouched():
    model = MLP(1, [2, 1], rng=np.random.default_rng(0))
    before = [p.val for p in model.parameters()]

    history = SGD().train(model, L2Loss(), X_LINE, Y_LINE, SGDConfig(n_iter=0))

    assert history['final_loss'] is None
    assert [p.val for p in model.parameters()] == before


def test_bad_config():
    model = MLP(1, [1], rng=np.random.default_rng(0))
    with pytest.raises(ValueError):
        SGD().train(model, L2Loss(), X_LINE, Y_LINE, SGDConfig(n_iter=-1))
    with pytest.raises(ValueError):
        SGD().train(model, L2Loss(), X_LINE, Y_LINE, SGDConfig(log_every=0))
