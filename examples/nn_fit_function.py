"""
Fit f(x) = x^2 - 2x + 1 on [-1, 1] with a linear MLP fed (x, x^2).
"""

import argparse
import numpy as np

from scalar_aad import MLP, SGD, SGDConfig, L2Loss, Scalar


def f(x):
    return x * x - x * 2 + 1


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Regression of a quadratic with a Scalar MLP',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--base-step', type=float, default=0.1,
                       help='Initial learning rate')
    parser.add_argument('--n-iter', type=int, default=100,
                       help='Number of SGD steps')
    parser.add_argument('--seed', type=int, default=None,
                       help='Seed for weight initialisation')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save fit and training curves with this file prefix')
    return parser.parse_args()


def main():
    args = parse_args()
    rng = np.random.default_rng(args.seed)

    # Give the model x and x^2 as features
    xs = np.arange(-1.0, 1.0 + 1e-9, 0.1)
    X = [[x, x * x] for x in xs]
    y = [f(x) for x in xs]

    # 2 inputs, 2 hidden layers with 4 neurons, 1 output, no ReLU
    model = MLP(2, [4, 4, 1], nonlin=False, rng=rng)
    print(model)

    config = SGDConfig(base_step=args.base_step, n_iter=args.n_iter)
    history = SGD().train(model, L2Loss(), X, y, config, rng=rng)

    # Test the trained model at a bunch of points
    x_test = [-2.5, -1.5, -0.5, 0.0, 0.5, 1.5, 2.5]
    preds = []
    for x in x_test:
        yp = model([Scalar(x), Scalar(x * x)])[0].val
        preds.append(yp)
        print(f"f({x})={f(x)}, fp({x})={yp:.6f}, "
              f"{abs((f(x) - yp) / f(x)) * 100:.2f}% error")

    if args.plot:
        from scalar_aad.utils.plotting import plot_fit, plot_training_history
        plot_fit(x_test, [f(x) for x in x_test], preds,
                 save_path=f"{args.plot}_fit.png", title='x^2 - 2x + 1')
        plot_training_history(history, save_path=f"{args.plot}_history.png")


if __name__ == "__main__":
    main()
