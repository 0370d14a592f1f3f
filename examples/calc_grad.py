"""
Gradient of c = 4 * a^3 with respect to a, by one backward pass.
"""

import argparse

from scalar_aad.aad import Scalar, numerical_grad, print_graph_summary


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Differentiate c = 4 * a^3',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--a', type=float, default=2.0,
                       help='Point at which to differentiate')
    parser.add_argument('--graph', action='store_true',
                       help='Print the computation graph summary')
    return parser.parse_args()


def main():
    args = parse_args()

    a = Scalar(args.a)
    b = a.pow(3.0)
    c = b.mul(Scalar(4.0))
    c.backward()

    print(f"a's gradient with respect to c is {a.grad}")
    print(f"finite difference check:        {numerical_grad(lambda x: 4.0 * x ** 3, args.a):.6f}")

    if args.graph:
        print_graph_summary(c, detailed=True)


if __name__ == "__main__":
    main()
