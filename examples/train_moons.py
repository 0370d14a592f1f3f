"""
Binary classification of the two-moons dataset with the max-margin loss.

Trains MLP(2, [8, 8, 2]) and exports the model's outputs over a grid on
[-2, 2]^2 as `x, y, out0, out1` rows.
"""

import argparse
import numpy as np
from sklearn.datasets import make_moons

from scalar_aad import MLP, SGD, SGDConfig, MaxMargin, Scalar, load_csv, save_csv


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Two-moons classification with a Scalar MLP',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--data', type=str, default=None,
                       help='CSV with header and columns x, y, label; generated if omitted')
    parser.add_argument('--n-samples', type=int, default=100,
                       help='Generated samples (ignored with --data)')
    parser.add_argument('--noise', type=float, default=0.1,
                       help='Noise of generated samples')
    parser.add_argument('--n-iter', type=int, default=100,
                       help='Number of SGD steps')
    parser.add_argument('--batch-size', type=int, default=None,
                       help='Rows sampled per step (full dataset if omitted)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Seed for data, weights and batches')
    parser.add_argument('--out', type=str, default='moon_fit.csv',
                       help='Where to write the grid predictions')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save training curves to this PNG')
    return parser.parse_args()


def main():
    args = parse_args()
    rng = np.random.default_rng(args.seed)

    if args.data:
        data = load_csv(args.data)
        X, y = data[:, :2], data[:, 2]
    else:
        X, labels = make_moons(n_samples=args.n_samples, noise=args.noise,
                               random_state=args.seed)
        y = labels * 2.0 - 1.0  # {0, 1} -> {-1, +1}

    # 2 inputs, 2 hidden layers, 2 outputs
    model = MLP(2, [8, 8, 2], rng=rng)
    print(model)

    config = SGDConfig(n_iter=args.n_iter, batch_size=args.batch_size)
    history = SGD().train(model, MaxMargin(), X, y, config, rng=rng)

    fit = []
    for gx in np.arange(-2.0, 2.0 + 1e-9, 0.1):
        for gy in np.arange(-2.0, 2.0 + 1e-9, 0.1):
            p = model([Scalar(gx), Scalar(gy)])
            fit.append([gx, gy, p[0].val, p[1].val])

    path = save_csv(args.out, fit)
    print(f"\nGrid predictions saved to: {path}")

    if args.plot:
        from scalar_aad.utils.plotting import plot_training_history
        plot_training_history(history, save_path=args.plot)


if __name__ == "__main__":
    main()
